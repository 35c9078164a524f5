"""
URL normalization and scope filtering for discovered links.
"""
from __future__ import annotations

import re
from typing import Iterable, Iterator, Tuple

from simple_crawler.exceptions import SeedURLError

__all__ = ("normalize_url", "split_seed_url", "in_scope", "discover_links")

_SCHEME_SEP = "://"


def split_seed_url(seed_url: str) -> Tuple[str, str]:
    """
    Return ``(protocol, domain)`` of the seed URL.

    The domain runs from ``://`` up to the next ``/`` or the end of the
    string. Raises SeedURLError when either part is missing.
    """
    protocol, sep, rest = seed_url.partition(_SCHEME_SEP)
    if not sep or not protocol:
        raise SeedURLError(seed_url, "protocol")
    domain = rest.split("/", 1)[0]
    if not domain:
        raise SeedURLError(seed_url, "domain")
    return protocol, domain


def normalize_url(reference: str, protocol: str, domain: str) -> str:
    """
    Make an href absolute and comparison-stable.

    ``//host/p`` gets the protocol, ``/p`` gets protocol and domain, anything
    else is taken as is. The fragment and trailing slashes are dropped, so
    ``/a``, ``/a/`` and ``/a#top`` collapse to one entry.
    """
    if reference.startswith("//"):
        url = f"{protocol}:{reference}"
    elif reference.startswith("/"):
        url = f"{protocol}{_SCHEME_SEP}{domain}{reference}"
    else:
        url = reference

    url = url.split("#", 1)[0]
    head, sep, rest = url.partition(_SCHEME_SEP)
    if sep:
        return head + sep + rest.rstrip("/")
    return url.rstrip("/")


def in_scope(url: str, pattern: re.Pattern[str]) -> bool:
    """Unanchored search of the scope pattern in *url*."""
    return pattern.search(url) is not None


def discover_links(hrefs: Iterable[str], protocol: str, domain: str) -> Iterator[str]:
    """Normalize hrefs in document order, skipping fragment-only references."""
    for href in hrefs:
        if not href or href.startswith("#"):
            continue
        yield normalize_url(href, protocol, domain)
