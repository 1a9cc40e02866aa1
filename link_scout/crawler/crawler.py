from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional, Protocol

from aiohttp import ClientSession, ClientTimeout, TCPConnector

from link_scout.crawler.fetcher import FetchError, Fetcher
from link_scout.crawler.models import Page
from link_scout.crawler.site import Site

__all__ = ("AsyncCrawler", "PageFetcher")


class PageFetcher(Protocol):
    async def fetch(self, url: str) -> Page: ...


class AsyncCrawler:
    """
    Асинхронный краулер: одна задача на каждый новый URL внутри домена.

    Each task fetches its URL unlocked, then records the page and claims the
    page's in-domain links under the site lock, then spawns one child task per
    claimed link with depth - 1. Fan-out is unbounded unless
    ``config.max_concurrency`` is set.
    """

    def __init__(self, config, fetcher: Optional[PageFetcher] = None) -> None:
        self.config = config
        self._validate_config()
        self.site = Site(str(config.seed_url))
        self.failures = 0
        self.logger = logging.getLogger("LinkScout")
        self.session: Optional[ClientSession] = None
        self._fetcher = fetcher

    async def __aenter__(self) -> AsyncCrawler:
        if self._fetcher is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                # no connection cap; max_concurrency bounds fetches instead
                connector=TCPConnector(limit=0),
            )
            limit = self.config.max_concurrency
            semaphore = asyncio.Semaphore(limit) if limit else None
            self._fetcher = Fetcher(self.session, semaphore)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> Site:
        seed = self.site.domain
        depth = self.config.max_depth
        if self._fetcher is None:
            raise RuntimeError("Fetcher not initialized")
        self.logger.info("Старт обхода: %s (depth %d)", seed, depth)
        start = time.monotonic()
        if depth > 0 and await self.site.claim(seed):
            async with asyncio.TaskGroup() as tg:
                tg.create_task(self._crawl(tg, seed, depth))
        duration = time.monotonic() - start
        self.logger.info(
            "Завершено: %d страниц, %d ошибок за %.2f с",
            len(self.site.pages), self.failures, duration,
        )
        return self.site

    async def _crawl(self, tg: asyncio.TaskGroup, url: str, depth: int) -> None:
        if depth <= 0:
            return
        try:
            page = await self._fetcher.fetch(url)
        except FetchError as exc:
            await self.site.discard(url)
            self.failures += 1
            self.logger.warning("%s", exc)
            return
        claimed = await self.site.record(url, page)
        self.logger.info("found: %s %r", url, page.title)
        for link in claimed:
            tg.create_task(self._crawl(tg, link, depth - 1))

    def _validate_config(self) -> None:
        required = ("seed_url", "max_depth", "timeout", "user_agent", "max_concurrency")
        for f in required:
            if not hasattr(self.config, f):
                raise AttributeError(f"config missing '{f}'")
