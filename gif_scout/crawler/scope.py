# gif_scout/crawler/scope.py
"""
Crawl scope: which discovered links may be followed.

A link is in scope when it shares the start page's origin (scheme, host,
port). With ``include_subdomains`` any host under the start host's base
domain is accepted as well. The base domain is simply the last two labels
of the hostname, so ``shop.example.co.uk`` yields ``co.uk``; there is no
public-suffix lookup.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import urlsplit

Origin = Tuple[str, str, int]

_DEFAULT_PORTS = {"http": 80, "https": 443}


def origin_of(url: str) -> Optional[Origin]:
    """Return ``(scheme, host, port)`` for an http(s) URL, None otherwise."""
    try:
        parts = urlsplit(url)
        scheme = parts.scheme.lower()
        host = (parts.hostname or "").lower()
        port = parts.port
    except ValueError:
        return None
    if scheme not in _DEFAULT_PORTS or not host:
        return None
    return scheme, host, port if port is not None else _DEFAULT_PORTS[scheme]


def base_domain(hostname: str) -> str:
    """Last two dot-separated labels of *hostname*."""
    return ".".join(hostname.lower().split(".")[-2:])


def in_scope(
    candidate_url: str,
    crawl_origin: Origin,
    domain: str,
    include_subdomains: bool,
) -> bool:
    """Decide whether *candidate_url* may be traversed. Parse failures give False."""
    origin = origin_of(candidate_url)
    if origin is None:
        return False
    if origin == crawl_origin:
        return True
    if include_subdomains:
        host = origin[1]
        return host == domain or host.endswith("." + domain)
    return False


@dataclass(slots=True, frozen=True)
class ScopePolicy:
    """Scope of one crawl, bound to its start URL."""

    origin: Origin
    domain: str
    include_subdomains: bool = False

    @classmethod
    def from_url(cls, start_url: str, include_subdomains: bool = False) -> ScopePolicy:
        origin = origin_of(start_url)
        if origin is None:
            raise ValueError(f"start URL must be an absolute http(s) URL: {start_url!r}")
        return cls(origin=origin, domain=base_domain(origin[1]), include_subdomains=include_subdomains)

    def allows(self, url: str) -> bool:
        return in_scope(url, self.origin, self.domain, self.include_subdomains)
