"""
Data models for the LinkScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Page:
    """Result of fetching one URL: title plus in-domain and out-domain link targets."""

    title: str = ""
    in_domain_links: Tuple[str, ...] = ()
    out_domain_links: Tuple[str, ...] = ()
