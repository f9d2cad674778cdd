# === FILE: krawl/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Optional

from krawl.crawler.classifier import LinkClassifier
from krawl.crawler.ledger import VisitLedger
from krawl.crawler.models import PageRecord, RenderedPage
from krawl.crawler.renderer import PageRenderer
from krawl.errors import RenderError

__all__ = ("Crawler",)


class Crawler:
    """
    Depth-first crawler over the pages of one site.

    Every URL is claimed in the ledger before it is rendered, so cycles end
    at the first repeat. With ``concurrency == 1`` siblings are walked one
    after another and records appear in a fixed order; with more, siblings
    are expanded together and records appear in completion order.
    """

    def __init__(
        self,
        renderer: PageRenderer,
        classifier: LinkClassifier,
        ledger: Optional[VisitLedger] = None,
        concurrency: int = 1,
    ) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        self.renderer = renderer
        self.classifier = classifier
        self.ledger = ledger if ledger is not None else VisitLedger()
        self.concurrency = concurrency
        self.pages_rendered = 0
        self.render_failures = 0
        self.logger = logging.getLogger("krawl")
        self._slots = asyncio.Semaphore(concurrency)

    async def run(self, depth: int, output: List[PageRecord]) -> List[PageRecord]:
        """Crawl from the classifier's seed URL, appending into *output*."""
        self.logger.info("Crawl started: %s (depth %d)", self.classifier.seed_url, depth)
        start = time.monotonic()
        try:
            await self.crawl(self.classifier.seed_url, depth, output)
        finally:
            duration = time.monotonic() - start
            self.logger.info(
                "Crawl finished: %d pages, %d failures in %.2f s",
                len(output), self.render_failures, duration,
            )
        return output

    async def crawl(self, page_url: str, depth: int, output: List[PageRecord]) -> None:
        """
        Visit *page_url* and everything internal reachable from it within *depth* generations.

        Raises RenderError if *page_url* itself cannot be rendered; failures
        further down are logged and do not stop the siblings.
        """
        if depth <= 0:
            return
        if not self.ledger.try_claim(page_url):
            return

        page = await self._render(page_url)
        output.append(PageRecord(url=page_url, title=page.title, content=page.content))

        children = [link for link in page.links if self.classifier.should_follow(link)]
        if not children:
            return

        if self.concurrency == 1:
            for link in children:
                await self._crawl_child(link, depth - 1, output)
        else:
            await asyncio.gather(*(self._crawl_child(link, depth - 1, output) for link in children))

    async def _crawl_child(self, link: str, depth: int, output: List[PageRecord]) -> None:
        try:
            await self.crawl(link, depth, output)
        except RenderError as exc:
            self.logger.warning("Error crawling %s: %s", link, exc.message)

    async def _render(self, url: str) -> RenderedPage:
        async with self._slots:
            self.logger.debug("Rendering %s", url)
            try:
                page = await self.renderer.render(url)
            except RenderError:
                self.render_failures += 1
                raise
        self.pages_rendered += 1
        return page
