from __future__ import annotations

from typing import Dict

from selectolax.lexbor import LexborHTMLParser

from ..base import ExtractionStrategy, Extractor, node_text
from ..text import clean_text, is_valid_term


def _cut_at_bracket(text: str) -> str:
    return text.split("[", 1)[0].strip()


class GlossaryListExtractor(Extractor):
    """Definition-list glossaries (Wikipedia style).

    Within each ``dl.glossary`` the most recent ``dt`` is the current term and
    every following ``dd`` is a definition for it. Term and definition are both
    cut at their first ``[``, which drops citation markers such as ``[12]``
    together with anything after them.
    """

    name = "glossary_list"
    strategy = ExtractionStrategy.STRUCTURED_LIST

    def __init__(self, *, list_sel: str = "dl.glossary") -> None:
        self.list_sel = list_sel

    def extract(self, doc: LexborHTMLParser) -> Dict[str, str]:
        terms: Dict[str, str] = {}
        for dl in doc.css(self.list_sel) or []:
            current_term = ""
            for child in dl.iter():
                if child.tag == "dt":
                    current_term = _cut_at_bracket(clean_text(node_text(child)))
                elif child.tag == "dd" and current_term:
                    definition = _cut_at_bracket(clean_text(node_text(child)))
                    if is_valid_term(current_term, definition):
                        terms[current_term] = definition
        return terms
