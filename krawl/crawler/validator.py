# krawl/crawler/validator.py
"""
Up-front checks on a crawl request.

Runs once before the crawl; a failure here means no page is rendered.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple
from urllib.parse import urlparse

from krawl.config import CrawlRequest
from krawl.crawler.classifier import LinkClassifier, extract_host
from krawl.errors import InvalidPathPattern, InvalidSeedURL, PatternDomainMismatch

__all__ = ("ValidatedRequest", "validate", "validate_seed_url", "validate_path_patterns")


@dataclass(frozen=True, slots=True)
class ValidatedRequest:
    """A request that passed validation, with its patterns compiled once."""

    request: CrawlRequest
    seed_host: str
    patterns: Tuple[re.Pattern[str], ...]

    def classifier(self) -> LinkClassifier:
        return LinkClassifier(self.request.seed_url, self.patterns)


def validate_seed_url(url: str) -> str:
    """Return the seed host, or raise InvalidSeedURL unless *url* is absolute with a host."""
    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except ValueError as exc:
        raise InvalidSeedURL(url) from exc
    if not parsed.scheme or not host:
        raise InvalidSeedURL(url)
    return host


def validate_path_patterns(patterns: Tuple[str, ...], seed_host: str) -> Tuple[re.Pattern[str], ...]:
    compiled = []
    for pattern in patterns:
        pattern_host = extract_host(pattern)
        # patterns without a host of their own are plain path fragments
        if pattern_host and pattern_host != seed_host:
            raise PatternDomainMismatch(pattern, pattern_host, seed_host)
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise InvalidPathPattern(pattern, str(exc)) from exc
    return tuple(compiled)


def validate(request: CrawlRequest) -> ValidatedRequest:
    """Check *request* and return it with compiled matchers; raises ConfigError."""
    seed_host = validate_seed_url(request.seed_url)
    patterns = validate_path_patterns(request.path_patterns, seed_host)
    return ValidatedRequest(request=request, seed_host=seed_host, patterns=patterns)
