"""Search-result, feed and page text extraction."""

from webdigest.tools.websearch.client import (
    NO_CONTENT,
    NO_NEWS,
    TRUNCATION_MARKER,
    WebFetcher,
    fetch_content,
    render_content,
    search_news,
    search_web,
)
from webdigest.tools.websearch.errors import FeedParseError, WebFetchError, WebToolError
from webdigest.tools.websearch.feed import parse_feed
from webdigest.tools.websearch.formatter import NO_RESULTS, format_entries
from webdigest.tools.websearch.models import FeedItem, SearchResult
from webdigest.tools.websearch.results import parse_results
from webdigest.tools.websearch.text import normalize, strip_inline
from webdigest.tools.websearch.urls import (
    is_allowed,
    normalize_domains,
    resolve_redirect,
    site_filter,
    unwrap_redirect,
)

__all__ = [
    "FeedItem",
    "FeedParseError",
    "NO_CONTENT",
    "NO_NEWS",
    "NO_RESULTS",
    "SearchResult",
    "TRUNCATION_MARKER",
    "WebFetchError",
    "WebFetcher",
    "WebToolError",
    "fetch_content",
    "format_entries",
    "is_allowed",
    "normalize",
    "normalize_domains",
    "parse_feed",
    "parse_results",
    "render_content",
    "resolve_redirect",
    "search_news",
    "search_web",
    "site_filter",
    "strip_inline",
    "unwrap_redirect",
]
