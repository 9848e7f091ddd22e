# === FILE: gif_scout/downloader.py ===
"""Resource sink: saves discovered GIFs to disk.

Filenames are derived from the URL path, filesystem-unsafe characters are
replaced with ``_`` and everything lands under ``<output_dir>/gifs/``.
Transfers run one after another with a small fixed gap; a failed transfer is
recorded in the :class:`DownloadSummary` and never aborts the batch.
"""
from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Protocol
from urllib.parse import unquote, urlsplit

from aiohttp import ClientError, ClientSession, ClientTimeout

from gif_scout.config import DownloadConfig
from gif_scout.logger import logger

__all__ = ["DownloadSummary", "ResourceSink", "GifDownloader", "make_filename"]

_UNSAFE_RE = re.compile(r'[<>:"\\|?*\x00-\x1F]')
_FALLBACK_NAME = "file.gif"
_SUBDIR = "gifs"


@dataclass(slots=True)
class DownloadSummary:
    """Outcome of handing a URL set to the sink."""

    found: int = 0
    started: int = 0
    errors: List[Dict[str, str]] = field(default_factory=list)

    @property
    def message(self) -> str:
        if not self.found:
            return "No GIFs found."
        return f"Saved {self.started} of {self.found} GIF(s)."

    def as_dict(self) -> Dict[str, object]:
        return {"message": self.message, "found": self.found, "started": self.started, "errors": self.errors}


class ResourceSink(Protocol):
    async def consume(self, urls: Iterable[str]) -> DownloadSummary:
        ...


def _sanitize(part: str) -> str:
    return _UNSAFE_RE.sub("_", part)


def make_filename(url: str, preserve_path: bool = False) -> str:
    """Relative target path (``gifs/...``) for *url*."""
    try:
        parts = urlsplit(url)
        pathname = unquote(parts.path or "").lstrip("/")
        if not pathname:
            pathname = f"{parts.hostname}_file"
    except ValueError:
        name = url.rsplit("/", 1)[-1].split("?", 1)[0] or _FALLBACK_NAME
        return f"{_SUBDIR}/{_sanitize(name)}"

    segments = [_sanitize(p) for p in pathname.split("/")]
    # ".." must not walk out of the target directory
    segments = [s for s in segments if s not in ("", ".", "..")]
    if not segments:
        return f"{_SUBDIR}/{_FALLBACK_NAME}"
    if preserve_path:
        return f"{_SUBDIR}/" + "/".join(segments)
    return f"{_SUBDIR}/{segments[-1]}"


def _unique(target: Path) -> Path:
    """Next free "name (n).gif" when *target* already exists."""
    candidate = target
    n = 1
    while candidate.exists():
        candidate = target.with_name(f"{target.stem} ({n}){target.suffix}")
        n += 1
    return candidate


class GifDownloader:
    """Downloads each URL sequentially into ``config.output_dir``."""

    def __init__(self, session: ClientSession, config: DownloadConfig) -> None:
        self.session = session
        self.config = config

    async def consume(self, urls: Iterable[str]) -> DownloadSummary:
        ordered = sorted(set(urls))
        summary = DownloadSummary(found=len(ordered))
        if not ordered:
            logger.info(summary.message)
            return summary

        for index, url in enumerate(ordered):
            if index and self.config.gap > 0:
                await asyncio.sleep(self.config.gap)
            target = _unique(self.config.output_dir / make_filename(url, self.config.preserve_path))
            try:
                await self._download(url, target)
            except (ClientError, asyncio.TimeoutError, OSError) as exc:
                logger.warning("Download failed %s: %s", url, exc)
                summary.errors.append({"url": url, "error": str(exc) or type(exc).__name__})
            else:
                summary.started += 1
        logger.info(summary.message)
        return summary

    async def _download(self, url: str, target: Path) -> None:
        async with self.session.get(url, timeout=ClientTimeout(total=None)) as resp:
            resp.raise_for_status()
            data = await resp.read()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        logger.debug("Saved %s -> %s", url, target)
