"""simple_crawler.report: page artifacts and the crawl summary report."""

from __future__ import annotations

from simple_crawler.report.json_report import render_json
from simple_crawler.report.page_writer import PageWriter, page_filename

__all__ = ["render_json", "PageWriter", "page_filename"]
