from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from datetime import datetime
from typing import List, Optional, Sequence

import uvicorn

from csterms.config import Settings, get_settings
from csterms.main import create_app
from csterms.services.glossary_store import GlossaryStore
from .base import SourceDescriptor, SourceResult
from .errors import NoTermsFoundError, ScrapeError
from .fetcher import SourceFetcher
from .pipeline import write_snapshot
from .sources import SOURCES

logger = logging.getLogger(__name__)


def scrape_all(
    sources: Sequence[SourceDescriptor],
    store: GlossaryStore,
    *,
    fetcher: Optional[SourceFetcher] = None,
) -> List[SourceResult]:
    """Scrape every source concurrently, one worker each, and wait for all of them.

    There is no overall deadline; each fetch is bounded by its own request timeout.
    """
    fetcher = fetcher or SourceFetcher()
    results: List[SourceResult] = []
    with ThreadPoolExecutor(max_workers=max(1, len(sources)), thread_name_prefix="scrape") as pool:
        futures = {pool.submit(fetcher.run, source, store): source for source in sources}
        wait(futures)

    for future, source in futures.items():
        try:
            results.append(future.result())
        except Exception:
            logger.exception("%s: extraction failed for %s", source.name, source.url)
    return results


def run_scrape(
    store: GlossaryStore,
    *,
    sources: Sequence[SourceDescriptor] = SOURCES,
    settings: Optional[Settings] = None,
    fetcher: Optional[SourceFetcher] = None,
    now: Optional[datetime] = None,
) -> str:
    """Populate the store from all sources and write the snapshot.

    Returns the snapshot path. Raises NoTermsFoundError when nothing was
    scraped and SnapshotError when the snapshot cannot be written.
    """
    settings = settings or get_settings()
    fetcher = fetcher or SourceFetcher(settings=settings)
    scrape_all(sources, store, fetcher=fetcher)

    if len(store) == 0:
        raise NoTermsFoundError()

    return write_snapshot(store.get_all(), settings, now=now)


def serve(store: GlossaryStore, settings: Settings) -> None:
    logger.info("API server is running on http://localhost:%d", settings.api_port)
    uvicorn.run(create_app(store), host=settings.api_host, port=settings.api_port, access_log=False)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = get_settings()
    store = GlossaryStore()
    try:
        path = run_scrape(store, settings=settings)
    except ScrapeError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Successfully scraped %d unique terms and saved to %s", len(store), path)
    serve(store, settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
