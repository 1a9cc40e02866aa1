"""
Link extraction and classification utilities for LinkScout.

Classification is a plain lexical test on the ``href`` value, not a hostname
comparison: ``//host/x`` and anything containing ``#`` stay out-domain even
when they point back at the same site.
"""
from __future__ import annotations

import re
from typing import List, Union

from bs4 import BeautifulSoup, NavigableString
from bs4.element import Tag
from link_scout.crawler.models import Page

__all__ = ("is_in_domain", "resolve_link", "extract_page")

_IN_DOMAIN_RE = re.compile(r"/[^/#][^#]*")


def is_in_domain(href: str) -> bool:
    """Return True if *href* starts with ``/``, is not ``//`` or ``/#`` and has no fragment."""
    return _IN_DOMAIN_RE.fullmatch(href) is not None


def resolve_link(domain: str, href: str) -> str:
    """Prefix *href* with *domain*, trimming exactly one trailing slash from the domain."""
    return domain.removesuffix("/") + href


def _title_text(tag: Tag) -> str:
    # only the token right after <title> counts
    first = next(iter(tag.contents), None)
    if isinstance(first, NavigableString):
        return str(first)
    return ""


def extract_page(markup: Union[str, bytes]) -> Page:
    """
    Parse *markup* and build a Page.

    Anchors contribute their first ``href``; anchors without one are skipped.
    The first non-empty ``<title>`` wins.
    """
    soup = BeautifulSoup(markup, "html.parser", on_duplicate_attribute="ignore")
    title = ""
    in_domain: List[str] = []
    out_domain: List[str] = []
    for tag in soup.find_all(["a", "title"]):
        if not isinstance(tag, Tag):
            continue
        if tag.name == "title":
            if not title:
                title = _title_text(tag)
            continue
        href = tag.get("href")
        if href is None:
            continue
        if isinstance(href, list):
            href = " ".join(href)
        if is_in_domain(href):
            in_domain.append(href)
        else:
            out_domain.append(href)
    return Page(title=title, in_domain_links=tuple(in_domain), out_domain_links=tuple(out_domain))
