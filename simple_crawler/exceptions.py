"""simple_crawler.exceptions: error taxonomy shared by the crawler, config and CLI."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "CrawlerError",
    "ConfigurationError",
    "SeedURLError",
    "FetchError",
    "UnsupportedContentError",
    "ExtractionDegradation",
]


class CrawlerError(Exception):
    """Base class for every error raised by simple_crawler."""


class ConfigurationError(CrawlerError):
    """Invalid run configuration; raised before any network activity."""


class SeedURLError(ConfigurationError):
    """Protocol or domain could not be taken from the seed URL."""

    def __init__(self, seed_url: str, part: str) -> None:
        super().__init__(f"Couldn't figure out {part} in seed url: {seed_url}")
        self.seed_url = seed_url
        self.part = part


class FetchError(CrawlerError):
    """A page could not be fetched: transport failure or non-200 status."""

    def __init__(self, url: str, status: int, reason: Optional[str] = None) -> None:
        detail = reason or f"HTTP {status}"
        super().__init__(f"{url}: {detail}")
        self.url = url
        self.status = status
        self.reason = reason


class UnsupportedContentError(CrawlerError):
    """The response is not an HTML document."""

    def __init__(self, url: str, content_type: str) -> None:
        super().__init__(f"{url}: unsupported content type {content_type!r}")
        self.url = url
        self.content_type = content_type


class ExtractionDegradation(UserWarning):
    """HTML could not be fully parsed; partial or empty results were used."""
