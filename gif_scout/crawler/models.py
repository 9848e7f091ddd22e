# gif_scout/crawler/models.py
"""
Data models for the GifScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Set

from gif_scout.crawler.ledger import VisitedLedger


@dataclass(slots=True, frozen=True)
class PageTask:
    """One unit of traversal work: an in-scope page and its link depth."""

    url: str
    depth_level: int


@dataclass(slots=True)
class PageData:
    """Fetched page: final URL, HTTP status and decoded body."""

    url: str
    content: str
    status: int = 200


@dataclass(slots=True)
class CrawlSession:
    """Mutable state of a single crawl invocation.

    Created per call and never shared, so two crawls running in the same
    process cannot see each other's ledger, results or page counter.
    """

    visited: VisitedLedger = field(default_factory=VisitedLedger)
    resources: Set[str] = field(default_factory=set)
    pages_fetched: int = 0
