# File: krawl/engine.py
"""krawl.engine: entry point that validates a request, opens a renderer and runs the crawl."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import List, Optional

from krawl.config import CrawlRequest
from krawl.crawler.crawler import Crawler
from krawl.crawler.models import PageRecord
from krawl.crawler.renderer import PageRenderer, create_renderer
from krawl.crawler.validator import validate
from krawl.errors import CrawlAborted, CrawlTimeout, KrawlError, RenderError
from krawl.logger import logger

__all__ = ["CrawlResult", "run", "run_async"]


@dataclass(slots=True)
class CrawlResult:
    """Pages collected by one crawl plus the error that ended it early, if any."""

    pages: List[PageRecord] = field(default_factory=list)
    error: Optional[KrawlError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def timed_out(self) -> bool:
        return isinstance(self.error, CrawlTimeout)

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


async def run_async(request: CrawlRequest, renderer: Optional[PageRenderer] = None) -> CrawlResult:
    """
    Crawl the site described by *request*.

    ConfigError is raised before any renderer is opened. A seed page that
    cannot be rendered, the overall deadline expiring, or any other error
    during the crawl is reported in the returned :class:`CrawlResult`
    alongside whatever was collected.
    """
    validated = validate(request)
    if renderer is None:
        renderer = create_renderer(request)

    output: List[PageRecord] = []
    crawler = Crawler(renderer, validated.classifier(), concurrency=request.concurrency)

    async def _session() -> None:
        async with renderer:
            await crawler.run(request.max_depth, output)

    error: Optional[KrawlError] = None
    try:
        await asyncio.wait_for(_session(), timeout=request.timeout)
    except asyncio.TimeoutError:
        logger.error("Crawl did not finish within %s seconds", request.timeout)
        error = CrawlTimeout(request.timeout, len(output))
    except RenderError as exc:
        logger.error("Crawl failed: %s", exc)
        error = exc
    except Exception as exc:
        logger.exception("Crawl aborted by unexpected error")
        error = CrawlAborted(exc, len(output))

    return CrawlResult(pages=list(output), error=error)


def run(request: CrawlRequest, renderer: Optional[PageRenderer] = None) -> CrawlResult:
    """Blocking wrapper around :func:`run_async`."""
    return asyncio.run(run_async(request, renderer))
