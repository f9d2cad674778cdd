# krawl/crawler/models.py
"""
Data models for the krawl crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class PageRecord:
    """Title and body text collected for one visited URL."""

    url: str
    title: str
    content: str


@dataclass(slots=True)
class RenderedPage:
    """What a renderer hands back: the page text plus its outbound links."""

    url: str
    title: str
    content: str
    links: List[str] = field(default_factory=list)
