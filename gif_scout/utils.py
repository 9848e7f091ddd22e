# File: gif_scout/utils.py
"""gif_scout.utils: Утилиты для разрешения и нормализации URL."""

from __future__ import annotations

from typing import Optional, Sequence
from urllib.parse import urldefrag, urljoin, urlsplit

from gif_scout.logger import logger

__all__: Sequence[str] = (
    "resolve_url",
    "strip_fragment",
    "url_path",
)


def resolve_url(candidate: Optional[str], base_url: str) -> Optional[str]:
    """Разрешает candidate относительно base_url.

    Возвращает абсолютный URL или None, если кандидат пустой
    или не разбирается (например, ``http://[::1``).
    """
    if candidate is None:
        return None
    raw = candidate.strip()
    if not raw:
        return None
    try:
        absolute = urljoin(base_url, raw)
        # .port бросает ValueError на нечисловом или вне диапазона порте
        _ = urlsplit(absolute).port
    except ValueError as exc:
        logger.debug("Unresolvable URL %r against %s: %s", raw, base_url, exc)
        return None
    return absolute


def strip_fragment(url: str) -> str:
    """Убирает #fragment, остальное оставляет как есть."""
    return urldefrag(url)[0]


def url_path(url: str) -> Optional[str]:
    """Путь URL без query и fragment, либо None для неразбираемого URL."""
    try:
        return urlsplit(url).path
    except ValueError:
        return None
