# krawl/crawler/renderer.py
"""
Page renderers: turn a URL into title, body text and outbound links.

The crawler only talks to the :class:`PageRenderer` protocol. Two backends
ship with krawl: :class:`HttpRenderer` (aiohttp + BeautifulSoup, no JavaScript)
and :class:`BrowserRenderer` (headless Chromium through Playwright, installed
with the ``browser`` extra).
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional, Protocol, runtime_checkable
from urllib.parse import urljoin, urlparse

from aiohttp import ClientError, ClientSession, ClientTimeout
from bs4 import BeautifulSoup
from bs4.element import Tag

from krawl.config import CrawlRequest
from krawl.crawler.models import RenderedPage
from krawl.errors import RenderError

__all__ = ("PageRenderer", "HttpRenderer", "BrowserRenderer", "extract_page", "create_renderer")

_SKIP_SCHEMES = ("mailto:", "javascript:", "tel:", "data:")
_HTML_TYPES = ("text/html", "application/xhtml+xml")


@runtime_checkable
class PageRenderer(Protocol):
    async def __aenter__(self) -> Any: ...

    async def __aexit__(self, exc_type, exc, tb) -> Any: ...

    async def render(self, url: str) -> RenderedPage:
        """Render *url*; raise RenderError when the page cannot be produced."""
        ...


def extract_page(url: str, html: str) -> RenderedPage:
    """
    Pull the title, visible body text and ``a[href]`` links out of *html*.

    Links are resolved against *url*; mailto:, javascript: and similar
    non-navigational hrefs are dropped. Order of appearance is kept.
    """
    soup = BeautifulSoup(html, "html.parser")
    title = soup.title.get_text(strip=True) if soup.title else ""
    for tag in soup(["script", "style", "noscript", "template"]):
        tag.decompose()
    body = soup.body if soup.body is not None else soup
    content = body.get_text(" ", strip=True)

    links: List[str] = []
    for tag in body.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()
        if not raw or raw.lower().startswith(_SKIP_SCHEMES):
            continue
        absolute = urljoin(url, raw)
        if urlparse(absolute).scheme in ("http", "https"):
            links.append(absolute)
    return RenderedPage(url=url, title=title, content=content, links=links)


class HttpRenderer:
    """Plain HTTP renderer: one aiohttp session per crawl, no script execution."""

    def __init__(self, *, page_timeout: float = 30.0, user_agent: str = "KrawlBot/1.0") -> None:
        self.page_timeout = page_timeout
        self.user_agent = user_agent
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger("krawl")

    async def __aenter__(self) -> HttpRenderer:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.page_timeout),
            headers={"User-Agent": self.user_agent},
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None

    async def render(self, url: str) -> RenderedPage:
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url) as resp:
                if resp.status >= 400:
                    raise RenderError(url, f"HTTP {resp.status}")
                mime = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
                if mime not in _HTML_TYPES:
                    raise RenderError(url, f"unsupported content type {mime or 'unknown'!r}")
                html = await resp.text(errors="replace")
                final_url = str(resp.url)
        except (ClientError, asyncio.TimeoutError) as exc:
            raise RenderError(url, str(exc) or type(exc).__name__) from exc

        self.logger.debug("Fetched %s (%d bytes)", url, len(html))
        page = extract_page(final_url, html)
        # the record keeps the URL it was requested under
        page.url = url
        return page


class BrowserRenderer:
    """Headless Chromium renderer; waits for ``body`` before reading the page."""

    _LAUNCH_ARGS = ("--disable-gpu", "--no-sandbox", "--disable-dev-shm-usage")
    _LINKS_JS = "els => els.map(a => a.href)"

    def __init__(self, *, page_timeout: float = 30.0, user_agent: str = "KrawlBot/1.0", headless: bool = True) -> None:
        self.page_timeout = page_timeout
        self.user_agent = user_agent
        self.headless = headless
        self._playwright = None
        self._browser = None
        self._context = None
        self.logger = logging.getLogger("krawl")

    async def __aenter__(self) -> BrowserRenderer:
        from playwright.async_api import async_playwright

        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._playwright.chromium.launch(
                headless=self.headless, args=list(self._LAUNCH_ARGS)
            )
            self._context = await self._browser.new_context(user_agent=self.user_agent)
        except BaseException:
            await self._close()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self._close()

    async def _close(self) -> None:
        if self._context is not None:
            await self._context.close()
            self._context = None
        if self._browser is not None:
            await self._browser.close()
            self._browser = None
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None

    async def render(self, url: str) -> RenderedPage:
        if self._context is None:
            raise RuntimeError("Browser not initialized")
        from playwright.async_api import Error as PlaywrightError

        timeout_ms = self.page_timeout * 1000
        page = None
        try:
            page = await self._context.new_page()
            await page.goto(url, timeout=timeout_ms)
            await page.wait_for_selector("body", state="visible", timeout=timeout_ms)
            title = await page.title()
            content = await page.inner_text("body")
            links = await page.eval_on_selector_all("a[href]", self._LINKS_JS)
        except PlaywrightError as exc:
            raise RenderError(url, exc.message) from exc
        finally:
            if page is not None:
                await page.close()

        return RenderedPage(
            url=url,
            title=title,
            content=content,
            links=[link for link in links if isinstance(link, str) and link],
        )


def create_renderer(request: CrawlRequest) -> PageRenderer:
    """Build the renderer named by ``request.renderer``."""
    if request.renderer == "browser":
        return BrowserRenderer(page_timeout=request.page_timeout, user_agent=request.user_agent)
    return HttpRenderer(page_timeout=request.page_timeout, user_agent=request.user_agent)
