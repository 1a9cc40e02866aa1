"""Concurrent domain-scoped crawler: fetch, classify, deduplicate."""

from link_scout.crawler.crawler import AsyncCrawler
from link_scout.crawler.fetcher import FetchError, Fetcher
from link_scout.crawler.models import Page
from link_scout.crawler.registry import VisitedRegistry
from link_scout.crawler.site import Site

__all__ = ["AsyncCrawler", "FetchError", "Fetcher", "Page", "Site", "VisitedRegistry"]
