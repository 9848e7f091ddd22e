# File: tests/conftest.py
from __future__ import annotations

from typing import Dict, List, Optional, Union

import pytest

from gif_scout.config import CrawlConfig
from gif_scout.crawler.models import PageData

PageBody = Union[str, BaseException, None]


class FakeFetcher:
    """
    In-memory page provider.

    ``pages`` maps URL -> HTML text, an exception to raise, or None
    (simulates a non-success status). Unknown URLs behave like None.
    """

    def __init__(self, pages: Dict[str, PageBody]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str) -> Optional[PageData]:
        self.calls.append(url)
        entry = self.pages.get(url)
        if isinstance(entry, BaseException):
            raise entry
        if entry is None:
            return None
        return PageData(url=url, content=entry)


@pytest.fixture()
def make_fetcher():
    """Factory for FakeFetcher instances."""
    return FakeFetcher


@pytest.fixture()
def basic_config() -> CrawlConfig:
    """
    Return a basic valid CrawlConfig: one level deep, no pacing.
    """
    return CrawlConfig(depth=1, max_pages=10, request_delay=0)
