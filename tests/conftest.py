# File: tests/conftest.py
import asyncio
from typing import Dict, List, Optional, Union

import pytest

from krawl.config import CrawlRequest
from krawl.crawler.models import RenderedPage
from krawl.errors import RenderError

SEED = "https://site.com/"

PageSpec = Union[List[str], Exception]


class FakeRenderer:
    """
    In-memory renderer over a dict of ``url -> outbound links``.

    A value that is an exception is raised instead of rendering; unknown URLs
    raise RenderError like a 404 would.
    """

    def __init__(self, site: Dict[str, PageSpec], delay: float = 0.0, hang: Optional[str] = None) -> None:
        self.site = site
        self.delay = delay
        self.hang = hang
        self.calls: List[str] = []
        self.entered = 0
        self.exited = 0
        self.in_flight = 0
        self.max_in_flight = 0

    async def __aenter__(self) -> "FakeRenderer":
        self.entered += 1
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.exited += 1

    async def render(self, url: str) -> RenderedPage:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if url == self.hang:
                await asyncio.sleep(3600)
            if self.delay:
                await asyncio.sleep(self.delay)
            entry = self.site.get(url)
            if entry is None:
                raise RenderError(url, "HTTP 404")
            if isinstance(entry, Exception):
                raise entry
            return RenderedPage(url=url, title=f"Title of {url}", content=f"Body of {url}", links=list(entry))
        finally:
            self.in_flight -= 1


@pytest.fixture()
def make_renderer():
    def _make(site: Dict[str, PageSpec], **kwargs) -> FakeRenderer:
        return FakeRenderer(site, **kwargs)

    return _make


@pytest.fixture()
def basic_request() -> CrawlRequest:
    """
    Return a basic valid CrawlRequest rooted at :data:`SEED`.
    """
    return CrawlRequest(seed_url=SEED, max_depth=3, timeout=5.0)


@pytest.fixture()
def blog_site() -> Dict[str, PageSpec]:
    """
    A small site with a cycle, an external link, a fragment link and a blog section.
    """
    return {
        "https://site.com/": [
            "https://site.com/about",
            "https://site.com/blog/",
            "https://other.com/",
            "https://site.com/about#team",
        ],
        "https://site.com/about": ["https://site.com/"],
        "https://site.com/blog/": [
            "https://site.com/blog/post-1",
            "https://site.com/blog/post-2",
        ],
        "https://site.com/blog/post-1": ["https://site.com/blog/", "https://site.com/blog/post-1/comments"],
        "https://site.com/blog/post-2": [],
        "https://site.com/blog/post-1/comments": [],
        "https://other.com/": [],
    }
