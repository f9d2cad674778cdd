# krawl/errors.py
"""
Exception hierarchy for krawl.

Configuration errors are raised before any page is rendered; render errors
are recovered per branch by the crawler; a timeout travels back to the caller
inside :class:`krawl.engine.CrawlResult` together with the pages collected so far,
and so does any other failure, wrapped in :class:`CrawlAborted`.
"""
from __future__ import annotations

__all__ = (
    "KrawlError",
    "ConfigError",
    "InvalidSeedURL",
    "PatternDomainMismatch",
    "InvalidPathPattern",
    "RenderError",
    "CrawlTimeout",
    "CrawlAborted",
)


class KrawlError(Exception):
    """Base class for every error raised by krawl."""


class ConfigError(KrawlError, ValueError):
    """The crawl request is not usable; nothing has been crawled."""


class InvalidSeedURL(ConfigError):
    def __init__(self, url: str) -> None:
        super().__init__(f"invalid seed URL: {url!r}")
        self.url = url


class PatternDomainMismatch(ConfigError):
    def __init__(self, pattern: str, pattern_host: str, seed_host: str) -> None:
        super().__init__(
            f"domain in pattern {pattern!r} ({pattern_host}) does not match seed domain {seed_host}"
        )
        self.pattern = pattern
        self.pattern_host = pattern_host
        self.seed_host = seed_host


class InvalidPathPattern(ConfigError):
    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"path pattern {pattern!r} is not a valid regular expression: {reason}")
        self.pattern = pattern
        self.reason = reason


class RenderError(KrawlError):
    """A single page could not be rendered."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url
        self.message = message


class CrawlTimeout(KrawlError, TimeoutError):
    """The overall crawl deadline elapsed."""

    def __init__(self, timeout: float, pages: int) -> None:
        super().__init__(f"crawl did not finish within {timeout:g} seconds ({pages} pages collected)")
        self.timeout = timeout
        self.pages = pages


class CrawlAborted(KrawlError):
    """The crawl stopped on an unexpected error; ``cause`` holds the original exception."""

    def __init__(self, cause: BaseException, pages: int) -> None:
        super().__init__(f"crawl aborted after {pages} pages: {type(cause).__name__}: {cause}")
        self.cause = cause
        self.pages = pages
