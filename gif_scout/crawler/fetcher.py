# gif_scout/crawler/fetcher.py
"""
Fetcher module: sequential HTTP page loading with fixed pacing and an optional timeout.
"""
from __future__ import annotations

import asyncio
import time
from typing import Optional, Protocol

from aiohttp import ClientError, ClientSession, ClientTimeout

from gif_scout.config import CrawlConfig
from gif_scout.crawler.models import PageData
from gif_scout.logger import logger


class PageFetcher(Protocol):
    """Anything that can load a page body by URL."""

    async def fetch(self, url: str) -> Optional[PageData]:
        ...


class Fetcher:
    """Loads pages one at a time through a shared aiohttp session.

    No retries: a failed page is reported as ``None`` and the caller moves on.
    """

    def __init__(self, session: ClientSession, config: CrawlConfig) -> None:
        self.session = session
        self.config = config
        self._timeout = ClientTimeout(total=config.timeout)
        self._last_request_ts: Optional[float] = None

    async def fetch(self, url: str) -> Optional[PageData]:
        """
        Fetch *url* and return PageData on a 2xx response.

        Returns None on non-success status, network error, timeout or
        undecodable body.
        """
        await self._pace()
        try:
            async with self.session.get(url, timeout=self._timeout, raise_for_status=False) as resp:
                if not resp.ok:
                    logger.debug("HTTP %s for %s", resp.status, url)
                    return None
                text = await resp.text(errors="replace")
                return PageData(url=url, content=text, status=resp.status)
        except asyncio.TimeoutError:
            logger.warning("Timed out fetching %s", url)
        except (ClientError, UnicodeDecodeError, LookupError) as exc:
            logger.warning("Failed %s: %s", url, exc)
        return None

    async def _pace(self) -> None:
        delay = self.config.request_delay
        if self._last_request_ts is not None and delay > 0:
            wait = delay - (time.monotonic() - self._last_request_ts)
            if wait > 0:
                await asyncio.sleep(wait)
        self._last_request_ts = time.monotonic()
