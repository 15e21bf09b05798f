from __future__ import annotations

from typing import Tuple

from .base import ExtractionStrategy, SourceDescriptor

SOURCES: Tuple[SourceDescriptor, ...] = (
    SourceDescriptor(
        name="Coursera",
        url="https://www.coursera.org/collections/computer-science-terms",
        strategy=ExtractionStrategy.EMPHASIS_PARAGRAPH,
    ),
    SourceDescriptor(
        name="Wikipedia",
        url="https://en.wikipedia.org/wiki/Glossary_of_computer_science",
        strategy=ExtractionStrategy.STRUCTURED_LIST,
    ),
)
