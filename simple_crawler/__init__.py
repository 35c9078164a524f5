"""
simple_crawler package initializer.
Defines package version and exposes the public entry points.
"""
__version__ = "0.1.0"

from simple_crawler.config import CrawlConfig, load_config
from simple_crawler.crawler import Crawler, CrawlSummary
from simple_crawler.engine import Engine, start_crawl

__all__ = ["__version__", "CrawlConfig", "load_config", "Crawler", "CrawlSummary", "Engine", "start_crawl"]
