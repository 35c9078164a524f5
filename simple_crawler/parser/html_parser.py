"""HTML content extraction for the crawler.

:func:`extract` turns a page body into the two things the crawl needs:

* links — ``href`` values of ``<a>`` elements, in document order, with empty
  and fragment-only (``#...``) values dropped;
* text_nodes — every non-blank text node that is not inside ``<script>`` or
  ``<style>``, in document order.

Parsing is forgiving. Broken markup gives whatever the tree builder could
recover, and an outright parser failure gives an empty :class:`Extraction`
plus an :class:`~simple_crawler.exceptions.ExtractionDegradation` warning
in the log; it never aborts the crawl.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from simple_crawler.exceptions import ExtractionDegradation
from simple_crawler.logger import logger

__all__: Sequence[str] = ("Extraction", "extract", "extract_links", "extract_text")

_HIDDEN_PARENTS = ["script", "style"]


@dataclass(slots=True)
class Extraction:
    """Links and visible text found in one document."""

    links: list[str] = field(default_factory=list)
    text_nodes: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Text nodes joined the way they are written to ``.txt`` files."""
        return " ".join(node.strip() for node in self.text_nodes)


def extract_links(soup: BeautifulSoup) -> list[str]:
    links: list[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if not isinstance(href, str):
            continue
        href = href.strip()
        if not href or href.startswith("#"):
            continue
        links.append(href)
    return links


def extract_text(soup: BeautifulSoup) -> list[str]:
    nodes: list[str] = []
    for node in soup.find_all(string=True):
        # comments, doctypes, CDATA and processing instructions
        if not isinstance(node, NavigableString) or isinstance(node, PreformattedString):
            continue
        if not node.strip():
            continue
        if node.find_parent(_HIDDEN_PARENTS) is not None:
            continue
        nodes.append(str(node))
    return nodes


def extract(html: str) -> Extraction:
    """Parse *html* and return its links and visible text nodes."""
    try:
        soup = BeautifulSoup(html, "lxml")
        return Extraction(links=extract_links(soup), text_nodes=extract_text(soup))
    except Exception as exc:
        warning = ExtractionDegradation(f"HTML parsing failed: {exc}")
        logger.warning("%s", warning)
        return Extraction()
