"""Extraction strategies, looked up by ``ExtractionStrategy``."""
from __future__ import annotations

from typing import Dict

from ..base import ExtractionStrategy, Extractor
from .emphasis_paragraph import EmphasisParagraphExtractor
from .glossary_list import GlossaryListExtractor

EXTRACTORS: Dict[ExtractionStrategy, Extractor] = {
    ExtractionStrategy.STRUCTURED_LIST: GlossaryListExtractor(),
    ExtractionStrategy.EMPHASIS_PARAGRAPH: EmphasisParagraphExtractor(),
}


def get_extractor(strategy: ExtractionStrategy) -> Extractor:
    try:
        return EXTRACTORS[strategy]
    except KeyError:
        raise ValueError(f"No extractor registered for strategy: {strategy!r}") from None


__all__ = [
    "EXTRACTORS",
    "EmphasisParagraphExtractor",
    "GlossaryListExtractor",
    "get_extractor",
]
