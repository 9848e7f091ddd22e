# gif_scout/crawler/extractor.py
"""
GIF resource and link extraction from parsed pages.

Both functions are pure: they read a parsed document, resolve candidates
against the page URL and never touch the network.
"""
from __future__ import annotations

import re
from typing import Iterator, List, Set, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from gif_scout.utils import resolve_url, url_path

TARGET_EXTENSION = ".gif"

# background-image: url("a.gif"), url('a.gif') or url(a.gif)
_CSS_URL_RE = re.compile(r"""url\(\s*(['"]?)(.*?)\1\s*\)""", re.IGNORECASE)
_BACKGROUND_PROPS: Tuple[str, ...] = ("background-image", "background")


def matches_extension(url: str, extension: str = TARGET_EXTENSION) -> bool:
    """True if the path of *url* (query and fragment ignored) ends with *extension*."""
    path = url_path(url)
    return path is not None and path.lower().endswith(extension.lower())


def _attr(tag: Tag, name: str) -> str | None:
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value if isinstance(value, str) else None


def _style_urls(style: str) -> Iterator[str]:
    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        if not sep or prop.strip().lower() not in _BACKGROUND_PROPS:
            continue
        for match in _CSS_URL_RE.finditer(value):
            yield match.group(2)


def _candidates(document: BeautifulSoup) -> Iterator[str | None]:
    for img in document.find_all("img", src=True):
        yield _attr(img, "src")
    for anchor in document.find_all("a", href=True):
        yield _attr(anchor, "href")
    for element in document.find_all(style=True):
        style = _attr(element, "style")
        if style:
            yield from _style_urls(style)


def extract_resources(
    document: BeautifulSoup,
    base_url: str,
    extension: str = TARGET_EXTENSION,
) -> Set[str]:
    """
    Return absolute URLs of every resource in *document* whose path ends in *extension*.

    Scans ``<img src>``, ``<a href>`` and inline ``background``/``background-image``
    styles. Unresolvable candidates are dropped. Returned URLs keep their query string.
    """
    found: Set[str] = set()
    for raw in _candidates(document):
        absolute = resolve_url(raw, base_url)
        if absolute is not None and matches_extension(absolute, extension):
            found.add(absolute)
    return found


def extract_links(document: BeautifulSoup, base_url: str) -> List[str]:
    """Resolve every ``<a href>`` of *document* to an absolute URL, in document order."""
    links: List[str] = []
    for anchor in document.find_all("a", href=True):
        absolute = resolve_url(_attr(anchor, "href"), base_url)
        if absolute is not None:
            links.append(absolute)
    return links
