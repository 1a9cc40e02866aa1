"""
Visited registry: the set of URLs a crawl has claimed, guarded by one lock.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Iterator


class VisitedRegistry:
    """
    Maps URL -> claimed flag.

    ``False`` means discovered and claimed for scheduling but not yet fetched,
    ``True`` means fetched successfully. Failed URLs are removed so they can be
    claimed again later. The mutators must be called with :attr:`lock` held.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._urls: Dict[str, bool] = {}

    @property
    def lock(self) -> asyncio.Lock:
        return self._lock

    def try_claim(self, url: str) -> bool:
        """Insert *url* as unclaimed if unknown. Returns True if the caller now owns it."""
        self._require_lock()
        if url in self._urls:
            return False
        self._urls[url] = False
        return True

    def mark_attempted(self, url: str, success: bool) -> None:
        """Record the fetch outcome; a failure forgets the URL entirely."""
        self._require_lock()
        if success:
            self._urls[url] = True
        else:
            self._urls.pop(url, None)

    def snapshot(self) -> Dict[str, bool]:
        return dict(self._urls)

    def __contains__(self, url: object) -> bool:
        return url in self._urls

    def __len__(self) -> int:
        return len(self._urls)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._urls))

    def _require_lock(self) -> None:
        if not self._lock.locked():
            raise RuntimeError("registry lock is not held")
