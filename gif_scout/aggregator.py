# File: gif_scout/aggregator.py
"""gif_scout.aggregator: Сводный отчёт об одном обходе."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from gif_scout.crawler.models import CrawlSession


@dataclass(slots=True)
class CrawlReport:
    """Итог обхода: найденные GIF и статистика по страницам."""

    start_url: str
    resources: List[str] = field(default_factory=list)
    pages_fetched: int = 0
    pages_visited: List[str] = field(default_factory=list)
    download: Optional[Dict[str, Any]] = None

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)


def build_report(start_url: str, session: CrawlSession) -> CrawlReport:
    """Собирает CrawlReport из состояния сессии; списки отсортированы для стабильного вывода."""
    return CrawlReport(
        start_url=start_url,
        resources=sorted(session.resources),
        pages_fetched=session.pages_fetched,
        pages_visited=sorted(session.visited),
    )


__all__ = ["CrawlReport", "build_report"]
