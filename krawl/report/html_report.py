# File: krawl/report/html_report.py
"""krawl.report.html_report: HTML report rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Union

from jinja2 import Environment, FileSystemLoader, PackageLoader, select_autoescape

from krawl.crawler.models import PageRecord

TEMPLATE_NAME = "report.html.j2"


def _environment(template_dir: Optional[Union[Path, str]]) -> Environment:
    if template_dir is None:
        loader = PackageLoader("krawl.report", "templates")
    else:
        loader = FileSystemLoader(str(template_dir))
    return Environment(loader=loader, autoescape=select_autoescape(["html", "xml", "j2"]))


def render_html(
    pages: Iterable[PageRecord],
    output_path: Union[Path, str],
    template_dir: Optional[Union[Path, str]] = None,
    *,
    seed_url: str = "",
) -> Path:
    """Render the HTML report and save it to *output_path*.

    Args:
        pages: collected page records.
        output_path: path of the resulting HTML file.
        template_dir: directory holding ``report.html.j2``; the packaged
            template is used when omitted.
        seed_url: shown in the report heading.

    Returns:
        Path of the saved HTML file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    template = _environment(template_dir).get_template(TEMPLATE_NAME)
    page_list = list(pages)
    context: dict[str, Any] = {
        "seed_url": seed_url,
        "pages": page_list,
        "total": len(page_list),
    }

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
