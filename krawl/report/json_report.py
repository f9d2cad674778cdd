# krawl/report/json_report.py

"""
JSON report for krawl.

Serialises the collected page records to a file.
"""
import json
from dataclasses import asdict
from pathlib import Path
from typing import Iterable

from krawl.crawler.models import PageRecord


def pages_to_dicts(pages: Iterable[PageRecord]) -> list[dict]:
    return [asdict(p) for p in pages]


def render_json(pages: Iterable[PageRecord], output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save *pages* as a JSON list of ``{url, title, content}`` objects.

    :param pages: page records in crawl order
    :param output_path: path of the JSON file
    :param pretty: indent the output by two spaces
    :return: Path of the saved file

    Example:
    ```python
    from krawl.report.json_report import render_json
    report_path = render_json(result.pages, 'reports/pages.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(pages_to_dicts(pages), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
