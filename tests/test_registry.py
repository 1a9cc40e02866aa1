# File: tests/test_registry.py
import asyncio

import pytest

from link_scout.crawler.models import Page
from link_scout.crawler.registry import VisitedRegistry
from link_scout.crawler.site import Site


@pytest.mark.asyncio()
async def test_try_claim_first_caller_wins():
    registry = VisitedRegistry()
    async with registry.lock:
        assert registry.try_claim("http://example.com/a") is True
        assert registry.try_claim("http://example.com/a") is False
    assert registry.snapshot() == {"http://example.com/a": False}


@pytest.mark.asyncio()
async def test_mark_attempted_success_and_failure():
    registry = VisitedRegistry()
    async with registry.lock:
        registry.try_claim("http://example.com/ok")
        registry.try_claim("http://example.com/broken")
        registry.mark_attempted("http://example.com/ok", True)
        registry.mark_attempted("http://example.com/broken", False)
    assert registry.snapshot() == {"http://example.com/ok": True}
    assert "http://example.com/broken" not in registry
    # a failed URL can be claimed again
    async with registry.lock:
        assert registry.try_claim("http://example.com/broken") is True


def test_mutators_require_lock():
    registry = VisitedRegistry()
    with pytest.raises(RuntimeError):
        registry.try_claim("http://example.com/")
    with pytest.raises(RuntimeError):
        registry.mark_attempted("http://example.com/", True)


@pytest.mark.asyncio()
async def test_snapshot_is_a_copy():
    registry = VisitedRegistry()
    async with registry.lock:
        registry.try_claim("u")
    snap = registry.snapshot()
    snap["v"] = True
    assert "v" not in registry
    assert len(registry) == 1


@pytest.mark.asyncio()
async def test_concurrent_claims_have_single_winner():
    site = Site("http://example.com/")
    results = await asyncio.gather(*(site.claim("http://example.com/x") for _ in range(50)))
    assert results.count(True) == 1


@pytest.mark.asyncio()
async def test_record_stores_page_and_claims_links_in_order():
    site = Site("http://example.com/")
    await site.claim("http://example.com/")
    await site.claim("http://example.com/known")
    page = Page(
        title="Home",
        in_domain_links=("/b", "/known", "/a", "/b"),
        out_domain_links=("https://other.org/",),
    )
    claimed = await site.record("http://example.com/", page)
    assert claimed == ["http://example.com/b", "http://example.com/a"]
    assert site.pages["http://example.com/"] is page
    assert site.visited.snapshot() == {
        "http://example.com/": True,
        "http://example.com/known": False,
        "http://example.com/b": False,
        "http://example.com/a": False,
    }


@pytest.mark.asyncio()
async def test_discard_forgets_url():
    site = Site("http://example.com")
    await site.claim("http://example.com/gone")
    await site.discard("http://example.com/gone")
    assert "http://example.com/gone" not in site.visited
    assert await site.claim("http://example.com/gone") is True


def test_pages_view_is_read_only():
    site = Site("http://example.com")
    with pytest.raises(TypeError):
        site.pages["http://example.com"] = Page()  # type: ignore[index]
