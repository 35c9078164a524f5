"""HTML parsing for the crawler."""

from simple_crawler.parser.html_parser import Extraction, extract

__all__ = ["Extraction", "extract"]
