from __future__ import annotations

from typing import Dict

from selectolax.lexbor import LexborHTMLParser

from ..base import ExtractionStrategy, Extractor, next_element, node_text
from ..text import clean_text, is_valid_term


class EmphasisParagraphExtractor(Extractor):
    """Paragraph glossaries where a bold span names the term (Coursera style).

    A paragraph containing ``strong`` text gives the term; the next sibling
    element holds its definition.
    """

    name = "emphasis_paragraph"
    strategy = ExtractionStrategy.EMPHASIS_PARAGRAPH

    def __init__(self, *, block_sel: str = "p", emphasis_sel: str = "strong") -> None:
        self.block_sel = block_sel
        self.emphasis_sel = emphasis_sel

    def extract(self, doc: LexborHTMLParser) -> Dict[str, str]:
        terms: Dict[str, str] = {}
        for block in doc.css(self.block_sel) or []:
            spans = block.css(self.emphasis_sel)
            if not spans:
                continue
            term = clean_text("".join(node_text(s) for s in spans))
            sibling = next_element(block)
            if sibling is None:
                continue
            definition = clean_text(node_text(sibling))
            if is_valid_term(term, definition):
                terms[term] = definition
        return terms
