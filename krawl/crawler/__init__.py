"""Traversal core: validation, classification, visit ledger, renderers and the crawler."""
from krawl.crawler.classifier import LinkClassifier, is_fragment_link, is_internal
from krawl.crawler.crawler import Crawler
from krawl.crawler.ledger import VisitLedger
from krawl.crawler.models import PageRecord, RenderedPage
from krawl.crawler.renderer import BrowserRenderer, HttpRenderer, PageRenderer, create_renderer
from krawl.crawler.validator import ValidatedRequest, validate

__all__ = [
    "BrowserRenderer",
    "Crawler",
    "HttpRenderer",
    "LinkClassifier",
    "PageRecord",
    "PageRenderer",
    "RenderedPage",
    "ValidatedRequest",
    "VisitLedger",
    "create_renderer",
    "is_fragment_link",
    "is_internal",
    "validate",
]
