# gif_scout/crawler/ledger.py
"""Visited-page bookkeeping for one crawl."""
from __future__ import annotations

from typing import Iterator, Set

from gif_scout.utils import strip_fragment


class VisitedLedger:
    """Set of page URLs (fragment stripped) already scheduled for fetching."""

    def __init__(self) -> None:
        self._seen: Set[str] = set()

    def mark_if_new(self, url: str) -> bool:
        """Record *url* and return True, or return False if it was seen before."""
        key = strip_fragment(url)
        if key in self._seen:
            return False
        self._seen.add(key)
        return True

    def __contains__(self, url: object) -> bool:
        return isinstance(url, str) and strip_fragment(url) in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def __iter__(self) -> Iterator[str]:
        return iter(self._seen)
