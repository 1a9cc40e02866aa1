# File: tests/conftest.py
import asyncio
from typing import Dict, Iterable

import pytest

from link_scout.config import CrawlerConfig
from link_scout.crawler.fetcher import FetchError
from link_scout.crawler.link_extractor import extract_page
from link_scout.crawler.models import Page
from link_scout.logger import configure


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


def links_html(*hrefs: str, title: str = "") -> str:
    """Build a small HTML document with one anchor per href."""
    head = f"<head><title>{title}</title></head>" if title else ""
    anchors = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return f"<html>{head}<body>{anchors}</body></html>"


class FakeFetcher:
    """
    In-memory fetcher keyed by absolute URL.

    ``fail`` lists URLs whose next N fetches raise FetchError (N = value),
    ``delays`` holds per-URL sleeps to force interleavings.
    """

    def __init__(
        self,
        documents: Dict[str, str],
        fail: Dict[str, int] | None = None,
        delays: Dict[str, float] | None = None,
    ) -> None:
        self.documents = documents
        self.fail = dict(fail or {})
        self.delays = delays or {}
        self.calls: Dict[str, int] = {}
        self.in_flight: set[str] = set()
        self.overlaps: list[str] = []

    async def fetch(self, url: str) -> Page:
        self.calls[url] = self.calls.get(url, 0) + 1
        if url in self.in_flight:
            self.overlaps.append(url)
        self.in_flight.add(url)
        try:
            await asyncio.sleep(self.delays.get(url, 0))
            if self.fail.get(url, 0) > 0:
                self.fail[url] -= 1
                raise FetchError(url)
            if url not in self.documents:
                raise FetchError(url)
            return extract_page(self.documents[url])
        finally:
            self.in_flight.discard(url)

    def fetched(self) -> Iterable[str]:
        return self.calls.keys()


@pytest.fixture()
def make_config():
    """Factory for CrawlerConfig with test defaults."""

    def _make(seed_url: str = "http://example.com", max_depth: int = 3, **kwargs) -> CrawlerConfig:
        kwargs.setdefault("user_agent", "TestAgent/1.0")
        return CrawlerConfig(seed_url=seed_url, max_depth=max_depth, **kwargs)

    return _make


@pytest.fixture(autouse=True)
def reset_logging():
    """CliRunner swaps stderr; give the project logger a live stream again after each test."""
    yield
    configure(level="INFO")
