# === FILE: gif_scout/parser/html_parser.py ===
"""HTML parsing for GifScout.

The crawler only needs a best-effort document tree: the stdlib-backed
``html.parser`` tree builder of BeautifulSoup never rejects markup, so a
broken page yields a partial (possibly empty) document rather than an error.
Everything that reads the tree (:mod:`gif_scout.crawler.extractor`) works on
the returned :class:`~bs4.BeautifulSoup` object directly.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from bs4 import BeautifulSoup

__all__: Sequence[str] = ("parse_html",)


def parse_html(markup: Union[str, bytes, BeautifulSoup]) -> BeautifulSoup:
    """Return a parsed document for *markup*.

    Parameters
    ----------
    markup
        Raw HTML text or bytes, or an already parsed document which is
        returned unchanged. Accepting both lets callers hand over the start
        page in whichever form they already hold.
    """
    if isinstance(markup, BeautifulSoup):
        return markup
    return BeautifulSoup(markup, "html.parser")
