"""
Fetcher module: a single HTTP GET per call, no retries.
"""
from __future__ import annotations

import asyncio
import time

from aiohttp import ClientError, ClientSession

from simple_crawler.crawler.models import FetchResult
from simple_crawler.logger import logger


class Fetcher:
    """Performs GET requests on a shared session, one at a time."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch *url* and return its FetchResult.

        Transport failures are not raised: they come back with status 0
        and ``error`` set. ``completed_at`` is taken right after the body
        has been read.
        """
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                ctype = resp.headers.get("Content-Type", "")
                body = await resp.text(errors="replace")
                return FetchResult(
                    url=url,
                    status=resp.status,
                    content_type=ctype,
                    body=body,
                    completed_at=time.monotonic(),
                )
        except (ClientError, asyncio.TimeoutError) as exc:
            reason = str(exc) or type(exc).__name__
            logger.debug("Request to %s failed: %s", url, reason)
            return FetchResult(
                url=url,
                status=0,
                content_type="",
                body="",
                completed_at=time.monotonic(),
                error=reason,
            )

    async def fetch_text(self, url: str) -> str:
        """Body of *url* for a 200 response, otherwise an empty string."""
        result = await self.fetch(url)
        if result.status != 200:
            logger.debug("%s -> HTTP %s, treated as empty", url, result.status or result.error)
            return ""
        return result.body
