"""Redirect unwrapping and allow-list checks for result URLs."""

from __future__ import annotations

import html
import re
from typing import Iterable
from urllib.parse import unquote, urlparse

# DuckDuckGo wraps result links as /l/?uddg=<percent-encoded target>&rut=...
_REDIRECT_PARAM_RE = re.compile(r"[?&]uddg=([^&]+)")


def resolve_redirect(raw_href: str) -> str:
    """Return the destination of a redirect-wrapped link, or the link itself."""
    return unwrap_redirect(html.unescape(raw_href))


def unwrap_redirect(href: str) -> str:
    """Like :func:`resolve_redirect` for an href whose entities are already decoded."""
    match = _REDIRECT_PARAM_RE.search(href)
    if match:
        return unquote(match.group(1))
    return href


def _strip_www(host: str) -> str:
    return host[4:] if host.startswith("www.") else host


def normalize_domains(domains: Iterable[str]) -> frozenset[str]:
    """Build an allow-list from configured domain strings."""
    normalized = (_strip_www(d.strip().lower()) for d in domains if d and d.strip())
    return frozenset(d for d in normalized if d)


def is_allowed(url: str, allowed: frozenset[str]) -> bool:
    """
    Check a URL against the allow-list.

    An empty allow-list permits everything. Otherwise the URL must be absolute
    and its host (without a leading ``www.``) must equal an entry or be a
    subdomain of one.
    """
    if not allowed:
        return True

    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except ValueError:
        return False
    if not parsed.scheme or not host:
        return False

    host = _strip_www(host.lower())
    return any(host == domain or host.endswith("." + domain) for domain in allowed)


def site_filter(allowed: frozenset[str]) -> str:
    """Render search-engine ``site:`` operators for the allow-list."""
    if not allowed:
        return ""
    return " (" + " OR ".join(f"site:{domain}" for domain in sorted(allowed)) + ")"
