"""
Fetcher module: one GET per URL, body handed to the link extractor.

No retries, no rate limiting. Any transport failure becomes a FetchError.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientSession
from link_scout.crawler.link_extractor import extract_page
from link_scout.crawler.models import Page


class FetchError(Exception):
    """Transport failure or non-retrievable URL."""

    def __init__(self, url: str, reason: Optional[BaseException] = None) -> None:
        super().__init__(f"not found: {url}")
        self.url = url
        self.reason = reason


class Fetcher:
    """Retrieves documents through a shared aiohttp session and extracts a Page."""

    def __init__(self, session: ClientSession, semaphore: Optional[asyncio.Semaphore] = None) -> None:
        self.session = session
        self._semaphore = semaphore

    async def fetch(self, url: str) -> Page:
        """
        Fetch *url* and parse it.

        The response status is not inspected: whatever body arrives is parsed.
        Raises FetchError on any transport-level failure.
        """
        if self._semaphore is None:
            data = await self._get(url)
        else:
            async with self._semaphore:
                data = await self._get(url)
        return extract_page(data)

    async def _get(self, url: str) -> bytes:
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                return await resp.read()
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            # ValueError covers URLs aiohttp refuses to build a request for
            raise FetchError(url, exc) from exc
