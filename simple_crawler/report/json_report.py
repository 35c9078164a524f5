"""
JSON report of a finished crawl.

Serializes a CrawlSummary to a file.
"""
import json
from pathlib import Path

from simple_crawler.crawler.models import CrawlSummary


def render_json(summary: CrawlSummary, output_path: Path | str) -> Path:
    """
    Save *summary* as JSON at *output_path* and return the path.

    Example:
    ```python
    from simple_crawler.report.json_report import render_json
    report_path = render_json(summary, 'reports/crawl.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(summary.as_dict(), f, ensure_ascii=False, indent=2)

    return output
