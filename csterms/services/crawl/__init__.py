"""Terminology crawling subsystem.

Structure:
- base.py: source descriptors, extraction strategies and the extractor contract
- text.py: text cleanup and term/definition validation
- extractors/: one extraction strategy per page layout
- fetcher.py: fetch + parse + extract + merge for a single source
- pipeline.py: timestamped JSON snapshot writer
- sources.py: the configured sources
- runner.py: concurrent scrape of all sources and the process entrypoint

Fetching uses httpx and parsing uses selectolax. The merged glossary lives in
``csterms.services.glossary_store``.
"""

__all__ = [
    "base",
    "fetcher",
    "pipeline",
    "runner",
]
