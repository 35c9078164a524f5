"""
Data models for the crawler.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from simple_crawler.exceptions import FetchError, UnsupportedContentError

HTML_MIME = "text/html"


class PageOutcome(str, Enum):
    """What happened to a dequeued URL."""

    HTML = "html"
    NON_HTML = "non_html"
    ERROR = "error"
    BLOCKED = "blocked"


@dataclass(frozen=True, slots=True)
class FetchResult:
    """One HTTP response. ``status`` is 0 when the request never completed."""

    url: str
    status: int
    content_type: str
    body: str
    completed_at: float
    error: Optional[str] = None

    @property
    def is_html(self) -> bool:
        return HTML_MIME in self.content_type

    def raise_for_status(self) -> None:
        if self.error is not None or self.status != 200:
            raise FetchError(self.url, self.status, self.error)

    def raise_for_content_type(self) -> None:
        if not self.is_html:
            raise UnsupportedContentError(self.url, self.content_type)


@dataclass(frozen=True, slots=True)
class PageReport:
    """Progress record for one dequeued URL."""

    url: str
    status: Optional[int]
    outcome: PageOutcome
    new_links: int = 0
    frontier_size: int = 0
    error: Optional[str] = None

    def describe(self) -> str:
        """Human readable progress line."""
        if self.outcome is PageOutcome.BLOCKED:
            return f"{self.url} -> (blocked by robots.txt)"
        status = self.status if self.status else "---"
        if self.outcome is PageOutcome.ERROR:
            suffix = f"(error! {self.error})" if self.error else "(error!)"
        elif self.outcome is PageOutcome.NON_HTML:
            suffix = "(skipped; non-html)"
        else:
            suffix = f"({self.new_links} new links, {self.frontier_size} total)"
        return f"{self.url} -> {status} {suffix}"


@dataclass(slots=True)
class CrawlSummary:
    """Everything a finished crawl reports back."""

    seed_url: str
    pages: List[PageReport] = field(default_factory=list)
    robots_rules: int = 0
    elapsed: float = 0.0

    @property
    def visited_urls(self) -> List[str]:
        return [p.url for p in self.pages]

    def counts(self) -> Dict[str, int]:
        counter = Counter(p.outcome.value for p in self.pages)
        return {outcome.value: counter.get(outcome.value, 0) for outcome in PageOutcome}

    def as_dict(self) -> Dict[str, Any]:
        return {
            "seed_url": self.seed_url,
            "robots_rules": self.robots_rules,
            "elapsed": round(self.elapsed, 3),
            "counts": self.counts(),
            "pages": [
                {
                    "url": p.url,
                    "status": p.status,
                    "outcome": p.outcome.value,
                    "new_links": p.new_links,
                    "frontier_size": p.frontier_size,
                    "error": p.error,
                }
                for p in self.pages
            ],
        }
