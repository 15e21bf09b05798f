"""Computer-science terminology scraper and read-only glossary API."""

__version__ = "0.1"
