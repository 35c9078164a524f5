"""simple_crawler.report.page_writer: per-page HTML and text artifacts."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from simple_crawler.config import CrawlConfig
from simple_crawler.logger import logger

__all__ = ["PageWriter", "page_filename"]


def page_filename(url: str) -> str:
    """Final path segment of *url*; ``index`` when it is empty."""
    return url.rsplit("/", 1)[-1] or "index"


class PageWriter:
    """Writes raw HTML and/or visible text of crawled pages.

    Output directories are expected to exist already. A failed write is
    logged and the crawl goes on.
    """

    def __init__(self, config: CrawlConfig) -> None:
        self.html_dir: Optional[Path] = config.html_dir if config.save_html else None
        self.text_dir: Optional[Path] = config.text_dir if config.save_text else None

    @property
    def wants_text(self) -> bool:
        return self.text_dir is not None

    def save_html(self, url: str, body: str) -> Optional[Path]:
        if self.html_dir is None:
            return None
        return self._write(self.html_dir / f"{page_filename(url)}.html", body)

    def save_text(self, url: str, text: str) -> Optional[Path]:
        if self.text_dir is None:
            return None
        return self._write(self.text_dir / f"{page_filename(url)}.txt", text)

    @staticmethod
    def _write(path: Path, content: str) -> Optional[Path]:
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            logger.error("Could not write %s: %s", path, exc)
            return None
        logger.debug("Saved %s", path)
        return path
