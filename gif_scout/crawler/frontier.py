# gif_scout/crawler/frontier.py
"""
Breadth-first frontier: fetches queued pages one at a time within the
page and depth budgets, collecting GIF URLs into the crawl session.
"""
from __future__ import annotations

import enum
from collections import deque
from typing import Deque, Iterable, Optional

from bs4 import BeautifulSoup

from gif_scout.config import CrawlConfig
from gif_scout.crawler.extractor import extract_links, extract_resources
from gif_scout.crawler.fetcher import PageFetcher
from gif_scout.crawler.models import CrawlSession, PageData, PageTask
from gif_scout.crawler.scope import ScopePolicy
from gif_scout.logger import logger
from gif_scout.parser.html_parser import parse_html
from gif_scout.utils import strip_fragment

__all__ = ("FrontierState", "FrontierScheduler")


class FrontierState(enum.Enum):
    IDLE = "idle"
    DRAINING = "draining"
    EXHAUSTED = "exhausted"


class FrontierScheduler:
    """FIFO work queue of :class:`PageTask` driven by :meth:`run`."""

    def __init__(
        self,
        config: CrawlConfig,
        scope: ScopePolicy,
        fetcher: PageFetcher,
        session: CrawlSession,
    ) -> None:
        self.config = config
        self.scope = scope
        self.fetcher = fetcher
        self.session = session
        self.state = FrontierState.IDLE
        self._queue: Deque[PageTask] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def seed(self, tasks: Iterable[PageTask]) -> None:
        """Queue the initial tasks taken from the already loaded start page."""
        if self.state is FrontierState.EXHAUSTED:
            raise RuntimeError("frontier is exhausted")
        self._queue.extend(tasks)

    def _budget_left(self) -> bool:
        return self.session.pages_fetched < self.config.max_pages

    async def run(self) -> None:
        """Drain the queue until it is empty or ``max_pages`` pages were fetched."""
        if self.state is FrontierState.EXHAUSTED:
            return
        self.state = FrontierState.DRAINING
        try:
            while self._queue and self._budget_left():
                task = self._queue.popleft()
                if task.depth_level > self.config.depth:
                    logger.debug("Skip %s: depth %d over limit", task.url, task.depth_level)
                    continue
                if not self.session.visited.mark_if_new(task.url):
                    continue
                self.session.pages_fetched += 1
                await self._visit(task)
        finally:
            self.state = FrontierState.EXHAUSTED
        logger.debug(
            "Frontier exhausted: %d fetched, %d left in queue",
            self.session.pages_fetched,
            len(self._queue),
        )

    async def _visit(self, task: PageTask) -> None:
        try:
            page = await self.fetcher.fetch(task.url)
        except Exception as exc:  # any provider fault costs this page only
            logger.warning("Failed %s: %s", task.url, exc)
            return
        if page is None:
            return

        document = self._parse(page)
        if document is None:
            return

        found = extract_resources(document, page.url)
        if found:
            logger.debug("%d GIF(s) on %s", len(found), page.url)
        self.session.resources |= found

        if task.depth_level < self.config.depth:
            self._expand(document, page.url, task.depth_level + 1)

    @staticmethod
    def _parse(page: PageData) -> Optional[BeautifulSoup]:
        try:
            return parse_html(page.content)
        except Exception as exc:  # bs4 tree builders are best-effort; never fatal here
            logger.warning("Failed to parse %s: %s", page.url, exc)
            return None

    def _expand(self, document: BeautifulSoup, base_url: str, depth_level: int) -> None:
        for link in extract_links(document, base_url):
            if not self.scope.allows(link):
                continue
            url = strip_fragment(link)
            if url not in self.session.visited and self._budget_left():
                self._queue.append(PageTask(url, depth_level))
