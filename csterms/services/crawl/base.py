from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Optional

from selectolax.lexbor import LexborHTMLParser, LexborNode


class ExtractionStrategy(str, enum.Enum):
    STRUCTURED_LIST = "structured_list"
    EMPHASIS_PARAGRAPH = "emphasis_paragraph"


@dataclass(frozen=True)
class SourceDescriptor:
    name: str
    url: str
    strategy: ExtractionStrategy


@dataclass
class SourceResult:
    source_name: str
    source_url: str
    parser: Optional[str] = None
    extracted: int = 0
    merged: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_element(node: Optional[LexborNode]) -> bool:
    # Text and comment nodes carry pseudo tags that do not start with a letter.
    tag = node.tag if node is not None else None
    return bool(tag) and tag[0].isalpha()


def next_element(node: LexborNode) -> Optional[LexborNode]:
    sibling = node.next
    while sibling is not None and not is_element(sibling):
        sibling = sibling.next
    return sibling


def node_text(node: LexborNode) -> str:
    return node.text(deep=True, separator="")


class Extractor:
    """Minimal extractor contract.

    Subclasses implement extract() to turn a parsed document into a mapping of
    validated term -> definition. Missing or malformed structure is skipped,
    never raised.
    """

    name: str = "base"
    strategy: Optional[ExtractionStrategy] = None

    def extract(self, doc: LexborHTMLParser) -> Dict[str, str]:
        raise NotImplementedError

    def extract_html(self, html: str) -> Dict[str, str]:
        return self.extract(LexborHTMLParser(html))
