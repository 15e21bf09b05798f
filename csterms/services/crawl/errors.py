from __future__ import annotations


class ScrapeError(RuntimeError):
    """Fatal scrape condition; the API must not be started."""


class NoTermsFoundError(ScrapeError):
    def __init__(self, message: str = "No terms were found from any source") -> None:
        super().__init__(message)


class SnapshotError(ScrapeError):
    """The glossary could not be serialized or written to disk."""
