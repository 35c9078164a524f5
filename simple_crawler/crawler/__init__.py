"""Crawl engine and the pieces it drives."""

from simple_crawler.crawler.crawler import Crawler
from simple_crawler.crawler.frontier import Frontier
from simple_crawler.crawler.models import CrawlSummary, FetchResult, PageOutcome, PageReport
from simple_crawler.crawler.robots import RobotsPolicy

__all__ = ["Crawler", "Frontier", "CrawlSummary", "FetchResult", "PageOutcome", "PageReport", "RobotsPolicy"]
