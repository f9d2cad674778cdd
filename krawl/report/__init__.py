"""krawl.report: JSON and HTML reports of collected pages, used by the CLI."""

from krawl.report.html_report import render_html
from krawl.report.json_report import pages_to_dicts, render_json

__all__ = ["render_json", "render_html", "pages_to_dicts"]
