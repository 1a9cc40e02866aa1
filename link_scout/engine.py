"""link_scout.engine: Orchestration layer для запуска обхода."""

from __future__ import annotations

import asyncio
from typing import Optional

from link_scout.config import CrawlerConfig
from link_scout.crawler.crawler import AsyncCrawler
from link_scout.crawler.site import Site
from link_scout.logger import logger

__all__ = ["start_crawl", "run_crawl"]


async def start_crawl(config: CrawlerConfig) -> Site:
    """Открывает AsyncCrawler с HTTP-сессией и возвращает заполненный Site."""
    async with AsyncCrawler(config) as crawler:
        return await crawler.crawl()


def run_crawl(config: CrawlerConfig, crawl_timeout: Optional[float] = None) -> Site:
    """Синхронная обёртка: запускает обход, опционально с общим таймаутом."""
    try:
        if crawl_timeout:
            return asyncio.run(asyncio.wait_for(start_crawl(config), timeout=crawl_timeout))
        return asyncio.run(start_crawl(config))
    except asyncio.TimeoutError:
        logger.error("Crawl did not finish within %s seconds", crawl_timeout)
        raise
    except Exception as exc:
        logger.error("Crawl failed: %s", exc)
        raise
