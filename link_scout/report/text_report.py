"""Plain-text dump of a finished crawl, as printed by ``link_scout crawl``."""

from __future__ import annotations

from typing import List, Mapping

from link_scout.crawler.models import Page
from link_scout.crawler.site import Site

__all__ = ["format_page", "format_site", "format_registry"]


def format_page(page: Page) -> str:
    """One line per in-domain link: ``  <index>: <link>``."""
    return "".join(f"  {i}: {link}\n" for i, link in enumerate(page.in_domain_links))


def format_site(site: Site) -> str:
    lines: List[str] = [f"domain: {site.domain}\n"]
    for url, page in sorted(site.pages.items()):
        lines.append(f"{url}:\n{format_page(page)}\n")
    return "".join(lines)


def format_registry(snapshot: Mapping[str, bool]) -> str:
    """``scraped?:<true|false>: <url>`` for every URL the crawl knows about."""
    return "".join(
        f"scraped?:{str(done).lower()}: {url}\n" for url, done in sorted(snapshot.items())
    )
