# === FILE: gif_scout/crawler/crawler.py ===
from __future__ import annotations

import time
from typing import List, Optional, Set, Union

from aiohttp import ClientSession
from bs4 import BeautifulSoup

from gif_scout.config import CrawlConfig
from gif_scout.crawler.extractor import extract_links, extract_resources
from gif_scout.crawler.fetcher import Fetcher, PageFetcher
from gif_scout.crawler.frontier import FrontierScheduler
from gif_scout.crawler.models import CrawlSession, PageTask
from gif_scout.crawler.scope import ScopePolicy
from gif_scout.logger import logger
from gif_scout.parser.html_parser import parse_html
from gif_scout.utils import strip_fragment

__all__ = ("GifCrawler", "StartPageError", "crawl", "run_session")


class StartPageError(RuntimeError):
    """The start page itself could not be loaded."""


def _seed_tasks(document: BeautifulSoup, start_url: str, scope: ScopePolicy) -> List[PageTask]:
    return [
        PageTask(strip_fragment(link), 1)
        for link in extract_links(document, start_url)
        if scope.allows(link)
    ]


async def run_session(
    start_document: Union[str, BeautifulSoup],
    start_url: str,
    config: CrawlConfig,
    fetcher: PageFetcher,
) -> CrawlSession:
    """Run one crawl and return its session (results, ledger, page counter)."""
    scope = ScopePolicy.from_url(start_url, config.include_subdomains)
    document = parse_html(start_document)
    session = CrawlSession()
    session.resources |= extract_resources(document, start_url)

    if config.depth > 0:
        frontier = FrontierScheduler(config, scope, fetcher, session)
        frontier.seed(_seed_tasks(document, start_url, scope))
        await frontier.run()
    return session


async def crawl(
    start_document: Union[str, BeautifulSoup],
    start_url: str,
    config: CrawlConfig,
    fetcher: PageFetcher,
) -> Set[str]:
    """
    Collect GIF URLs reachable from an already loaded start page.

    The start page costs no fetch. Linked pages are fetched breadth-first
    through *fetcher* within ``config.depth`` and ``config.max_pages``.
    """
    session = await run_session(start_document, start_url, config, fetcher)
    return session.resources


class GifCrawler:
    """Asynchronous GIF crawler owning its HTTP session."""

    def __init__(self, config: CrawlConfig) -> None:
        self.config = config
        self._validate_config()
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.last_session: Optional[CrawlSession] = None

    async def __aenter__(self) -> GifCrawler:
        self.session = ClientSession(
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, start_document: Union[str, BeautifulSoup], start_url: str) -> Set[str]:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        logger.info("Старт обхода: %s (depth=%d, max_pages=%d)", start_url, self.config.depth, self.config.max_pages)
        start = time.monotonic()
        self.last_session = await run_session(start_document, start_url, self.config, self.fetcher)
        duration = time.monotonic() - start
        logger.info(
            "Завершено: %d GIF, %d страниц за %.2f с",
            len(self.last_session.resources),
            self.last_session.pages_fetched,
            duration,
        )
        return self.last_session.resources

    async def crawl_url(self, start_url: str) -> Set[str]:
        """Load *start_url* (outside the page budget) and crawl from it."""
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        page = await self.fetcher.fetch(start_url)
        if page is None:
            raise StartPageError(f"could not load start page {start_url}")
        return await self.crawl(page.content, start_url)

    def _validate_config(self) -> None:
        required = ("depth", "include_subdomains", "max_pages", "user_agent", "request_delay")
        for f in required:
            if not hasattr(self.config, f):
                raise AttributeError(f"config missing '{f}'")
        if self.config.max_pages < 1:
            raise ValueError("max_pages must be >= 1")
        if self.config.depth < 0:
            raise ValueError("depth must be >= 0")
