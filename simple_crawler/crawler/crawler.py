from __future__ import annotations

import asyncio
import time
from typing import Iterable, List, Optional

from aiohttp import ClientSession, ClientTimeout

from simple_crawler.config import CrawlConfig
from simple_crawler.crawler.fetcher import Fetcher
from simple_crawler.crawler.frontier import Frontier
from simple_crawler.crawler.link_extractor import discover_links, in_scope, normalize_url, split_seed_url
from simple_crawler.crawler.models import CrawlSummary, FetchResult, PageOutcome, PageReport
from simple_crawler.crawler.robots import RobotsPolicy
from simple_crawler.exceptions import FetchError, UnsupportedContentError
from simple_crawler.logger import logger, progress
from simple_crawler.parser.html_parser import extract
from simple_crawler.report.page_writer import PageWriter

__all__ = ("Crawler",)


class Crawler:
    """Breadth-first crawler: one request in flight, paced from response completion.

    The seed URL is split into protocol and domain on construction, so a
    bad seed fails before any network activity.
    """

    def __init__(self, config: CrawlConfig) -> None:
        self.config = config
        self.protocol, self.domain = split_seed_url(config.seed_url)
        self.pattern = config.pattern
        self.delay = config.delay
        self.writer = PageWriter(config)
        self.robots = RobotsPolicy.empty(prefix_match=config.robots_prefix_match)
        self.frontier = Frontier()
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None

    async def __aenter__(self) -> Crawler:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.config.timeout),
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    @property
    def robots_url(self) -> str:
        return f"{self.protocol}://{self.domain}/robots.txt"

    async def load_robots(self) -> RobotsPolicy:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        logger.info("Obtaining robots.txt...")
        text = await self.fetcher.fetch_text(self.robots_url)
        self.robots = RobotsPolicy.parse(
            text,
            self.protocol,
            self.domain,
            prefix_match=self.config.robots_prefix_match,
        )
        logger.info("Blocked %d urls...", len(self.robots))
        return self.robots

    async def crawl(self) -> CrawlSummary:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        start = time.monotonic()
        await self.load_robots()

        seed = self.config.seed_url
        self.frontier = Frontier([seed])
        self.frontier.mark_visited(normalize_url(seed, self.protocol, self.domain))

        summary = CrawlSummary(seed_url=seed, robots_rules=len(self.robots))
        while self.frontier:
            report = await self._visit(self.frontier.pop())
            summary.pages.append(report)
            progress.info("%s", report.describe())

        summary.elapsed = time.monotonic() - start
        logger.info(
            "Done: %d urls in %.2f s (%s)",
            len(summary.pages),
            summary.elapsed,
            ", ".join(f"{k}={v}" for k, v in summary.counts().items()),
        )
        return summary

    async def _visit(self, url: str) -> PageReport:
        # the seed is queued as given; links are already normalized
        normalized = normalize_url(url, self.protocol, self.domain)
        if self.robots.is_blocked(url) or self.robots.is_blocked(normalized):
            return PageReport(url, None, PageOutcome.BLOCKED, frontier_size=len(self.frontier))

        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        result = await self.fetcher.fetch(url)
        try:
            result.raise_for_status()
            result.raise_for_content_type()
        except FetchError as exc:
            report = PageReport(
                url, result.status or None, PageOutcome.ERROR,
                frontier_size=len(self.frontier), error=exc.reason,
            )
        except UnsupportedContentError:
            report = PageReport(url, result.status, PageOutcome.NON_HTML, frontier_size=len(self.frontier))
        else:
            added = self._process_html(result)
            report = PageReport(
                url, result.status, PageOutcome.HTML,
                new_links=added, frontier_size=len(self.frontier),
            )

        await self._pace(result.completed_at)
        return report

    def _process_html(self, result: FetchResult) -> int:
        self.writer.save_html(result.url, result.body)
        page = extract(result.body)
        if self.writer.wants_text:
            self.writer.save_text(result.url, page.text)
        return len(self._enqueue(discover_links(page.links, self.protocol, self.domain)))

    def _enqueue(self, links: Iterable[str]) -> List[str]:
        added: List[str] = []
        for link in links:
            if self.robots.is_blocked(link):
                logger.debug("Disallowed by robots.txt: %s", link)
                continue
            if not in_scope(link, self.pattern):
                continue
            if self.frontier.push(link):
                added.append(link)
        return added

    async def _pace(self, completed_at: float) -> None:
        """Sleep for whatever is left of the delay since *completed_at*."""
        remaining = completed_at + self.delay - time.monotonic()
        if remaining > 0:
            await asyncio.sleep(remaining)
