# krawl/crawler/classifier.py
"""
Link classification: is a discovered link part of the site being crawled?
"""
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Union
from urllib.parse import urlparse

from krawl.logger import logger

PatternLike = Union[str, re.Pattern[str]]

__all__ = ("LinkClassifier", "extract_host", "is_internal", "is_fragment_link")


def extract_host(url: str) -> Optional[str]:
    """Return the lowercased hostname of *url*, '' when it has none, None when unparseable."""
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return None


def is_fragment_link(link: str) -> bool:
    """Links carrying a fragment marker are never followed on their own."""
    return "#" in link


class LinkClassifier:
    """
    Decides whether a link is internal to the crawl.

    A link is internal when its host equals the seed host and, if any path
    patterns are configured, at least one of them matches somewhere in the
    link. An empty pattern list puts no restriction on the path.
    """

    def __init__(self, seed_url: str, patterns: Iterable[PatternLike] = ()) -> None:
        self.seed_url = seed_url
        self.seed_host = extract_host(seed_url)
        self._patterns: List[PatternLike] = list(patterns)
        self._compiled: Dict[str, Optional[re.Pattern[str]]] = {}

    def is_internal(self, link: str) -> bool:
        if not self.seed_host:
            return False
        host = extract_host(link)
        if host is None or host != self.seed_host:
            return False
        return self.matches_patterns(link)

    def matches_patterns(self, link: str) -> bool:
        if not self._patterns:
            return True
        matchers = [self._matcher(p) for p in self._patterns]
        if any(m is None for m in matchers):
            # one broken pattern fails the whole classification closed
            return False
        return any(m.search(link) for m in matchers)

    def _matcher(self, pattern: PatternLike) -> Optional[re.Pattern[str]]:
        if isinstance(pattern, re.Pattern):
            return pattern
        if pattern not in self._compiled:
            try:
                self._compiled[pattern] = re.compile(pattern)
            except re.error as exc:
                logger.debug("Pattern %r does not compile: %s", pattern, exc)
                self._compiled[pattern] = None
        return self._compiled[pattern]

    def should_follow(self, link: str) -> bool:
        """Internal and fragment-free."""
        return not is_fragment_link(link) and self.is_internal(link)


def is_internal(link: str, seed_url: str, path_patterns: Iterable[PatternLike] = ()) -> bool:
    """One-shot form of :meth:`LinkClassifier.is_internal`."""
    return LinkClassifier(seed_url, path_patterns).is_internal(link)
