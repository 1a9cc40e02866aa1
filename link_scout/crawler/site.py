"""
Site aggregate: domain, visited registry and page map of one crawl session.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping

from link_scout.crawler.link_extractor import resolve_link
from link_scout.crawler.models import Page
from link_scout.crawler.registry import VisitedRegistry

__all__ = ("Site",)


class Site:
    """
    Shared state handed to every crawl task.

    Registry and page map only change together, through the compound
    operations below, each of which takes the registry lock once.
    """

    def __init__(self, domain: str) -> None:
        self.domain = domain
        self.visited = VisitedRegistry()
        self._pages: Dict[str, Page] = {}

    @property
    def pages(self) -> Mapping[str, Page]:
        return MappingProxyType(self._pages)

    async def claim(self, url: str) -> bool:
        async with self.visited.lock:
            return self.visited.try_claim(url)

    async def record(self, url: str, page: Page) -> List[str]:
        """
        Store *page* for *url* and claim its in-domain links.

        Returns the absolute URLs this call claimed, in the order the links
        appear in the document.
        """
        claimed: List[str] = []
        async with self.visited.lock:
            self._pages[url] = page
            self.visited.mark_attempted(url, True)
            for link in page.in_domain_links:
                target = resolve_link(self.domain, link)
                if self.visited.try_claim(target):
                    claimed.append(target)
        return claimed

    async def discard(self, url: str) -> None:
        """Forget a URL whose fetch failed so it may be rediscovered."""
        async with self.visited.lock:
            self.visited.mark_attempted(url, False)

    def __repr__(self) -> str:
        return f"Site(domain={self.domain!r}, pages={len(self._pages)}, visited={len(self.visited)})"
