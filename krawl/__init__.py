"""
krawl package initializer.
Defines package version and exposes the crawl entry points and CLI.
"""
__version__ = "0.1.0"

from krawl.config import CrawlRequest, load_config
from krawl.crawler.models import PageRecord
from krawl.engine import CrawlResult, run, run_async
from krawl.errors import (
    ConfigError,
    CrawlAborted,
    CrawlTimeout,
    InvalidPathPattern,
    InvalidSeedURL,
    KrawlError,
    PatternDomainMismatch,
    RenderError,
)

# Expose CLI entry point
from krawl.cli import cli

__all__ = [
    "__version__",
    "cli",
    "ConfigError",
    "CrawlAborted",
    "CrawlRequest",
    "CrawlResult",
    "CrawlTimeout",
    "InvalidPathPattern",
    "InvalidSeedURL",
    "KrawlError",
    "PageRecord",
    "PatternDomainMismatch",
    "RenderError",
    "load_config",
    "run",
    "run_async",
]
