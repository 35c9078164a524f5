"""simple_crawler.engine: orchestration layer between the CLI and the crawler."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Union

from simple_crawler.config import CrawlConfig, load_config
from simple_crawler.crawler.crawler import Crawler
from simple_crawler.crawler.models import CrawlSummary
from simple_crawler.exceptions import SeedURLError
from simple_crawler.logger import logger

__all__ = ["Engine", "start_crawl"]


async def start_crawl(config: CrawlConfig) -> CrawlSummary:
    """Run one crawl to completion and return its summary.

    SeedURLError is raised by the Crawler constructor, before a session
    is opened.
    """
    crawler = Crawler(config)
    async with crawler:
        return await crawler.crawl()


class Engine:
    """Facade for the CLI and tests: load the config, run the crawl."""

    @staticmethod
    def load_config(path: Union[str, Path]) -> CrawlConfig:
        return load_config(path)

    def __init__(self, config: CrawlConfig) -> None:
        self.config = config

    def run(self) -> CrawlSummary:
        """Blocking entry point: runs the crawl on a fresh event loop."""
        logger.info("Starting crawl at %s", self.config.seed_url)
        try:
            return asyncio.run(start_crawl(self.config))
        except SeedURLError:
            raise
        except Exception as exc:
            logger.error("Crawl failed: %s", exc)
            raise
