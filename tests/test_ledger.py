# File: tests/test_ledger.py
import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from krawl.crawler.ledger import VisitLedger


def test_claim_once():
    ledger = VisitLedger()
    assert ledger.try_claim("https://site.com/")
    assert not ledger.try_claim("https://site.com/")
    assert "https://site.com/" in ledger
    assert len(ledger) == 1


def test_urls_are_stored_as_given():
    ledger = VisitLedger()
    assert ledger.try_claim("https://site.com/page")
    assert ledger.try_claim("https://site.com/page/")
    assert list(ledger) == ["https://site.com/page", "https://site.com/page/"]


def test_concurrent_threads_claim_exactly_once():
    ledger = VisitLedger()
    urls = [f"https://site.com/{i % 50}" for i in range(2000)]
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(ledger.try_claim, urls))
    assert sum(results) == 50
    assert len(ledger) == 50


@pytest.mark.asyncio()
async def test_concurrent_tasks_claim_exactly_once():
    ledger = VisitLedger()

    async def claim(url: str) -> bool:
        await asyncio.sleep(0)
        return ledger.try_claim(url)

    results = await asyncio.gather(*(claim("https://site.com/x") for _ in range(100)))
    assert results.count(True) == 1
