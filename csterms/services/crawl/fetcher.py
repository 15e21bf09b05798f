from __future__ import annotations

import logging
from typing import Optional

import httpx
from selectolax.lexbor import LexborHTMLParser

from csterms.config import Settings, get_settings
from csterms.services.glossary_store import GlossaryStore
from .base import SourceDescriptor, SourceResult
from .extractors import get_extractor

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """A single source could not be fetched or parsed."""


class SourceFetcher:
    """Fetch one source, extract its terms and merge them into the store.

    Every failure is confined to the source at hand: it is logged and the
    source contributes nothing. An httpx client may be injected (tests use a
    MockTransport); otherwise a short-lived client is opened per fetch.
    """

    def __init__(self, *, settings: Optional[Settings] = None, client: Optional[httpx.Client] = None) -> None:
        self.settings = settings or get_settings()
        self.client = client

    # --- Public API ---
    def run(self, source: SourceDescriptor, store: GlossaryStore) -> SourceResult:
        extractor = get_extractor(source.strategy)
        result = SourceResult(
            source_name=source.name,
            source_url=source.url,
            parser=extractor.name,
        )
        try:
            html = self._get(source.url)
            doc = self._parse(source.url, html)
        except FetchError as exc:
            logger.warning("%s: %s", source.name, exc)
            result.error = str(exc)
            return result

        terms = extractor.extract(doc)
        result.extracted = len(terms)
        result.merged = store.merge(terms)
        logger.info(
            "%s: extracted %d terms from %s (%d merged)",
            source.name,
            result.extracted,
            source.url,
            result.merged,
        )
        return result

    # --- Internals ---
    def _get(self, url: str) -> str:
        if self.client is not None:
            return self._request(self.client, url)
        with httpx.Client(timeout=self.settings.timeout, follow_redirects=True) as client:
            return self._request(client, url)

    def _request(self, client: httpx.Client, url: str) -> str:
        try:
            resp = client.get(url, headers=self.settings.headers, timeout=self.settings.timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc
        if resp.status_code != 200:
            raise FetchError(f"Bad status code {resp.status_code} from {url}")
        return resp.text

    @staticmethod
    def _parse(url: str, html: str) -> LexborHTMLParser:
        try:
            return LexborHTMLParser(html)
        except Exception as exc:
            raise FetchError(f"Failed to parse HTML from {url}: {exc}") from exc
