"""Web tools: web_search, news_search and web_fetch."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger

from webdigest.tools.base import Tool
from webdigest.tools.websearch.client import WebFetcher, fetch_content, search_news, search_web
from webdigest.tools.websearch.errors import WebToolError
from webdigest.tools.websearch.safety import validate_fetch_url
from webdigest.tools.websearch.urls import normalize_domains

if TYPE_CHECKING:
    from webdigest.config.schema import NewsSearchConfig, WebFetchConfig, WebSearchConfig

_MAX_COUNT = 10


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _count_parameters(subject: str) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "query": {"type": "string", "minLength": 1, "description": f"{subject} query"},
            "count": {
                "type": "integer",
                "description": "Results (1-10)",
                "minimum": 1,
                "maximum": _MAX_COUNT,
            },
        },
        "required": ["query"],
    }


class WebSearchTool(Tool):
    """Search the web through the DuckDuckGo HTML endpoint."""

    name = "web_search"
    description = "Search the web. Returns titles, URLs and snippets."
    parameters = _count_parameters("Search")

    def __init__(
        self,
        web_search_config: WebSearchConfig | None = None,
        fetcher: WebFetcher | None = None,
    ):
        from webdigest.config.schema import WebSearchConfig

        self.config = web_search_config or WebSearchConfig()
        self.allowed_domains = normalize_domains(self.config.allowed_domains)
        self.fetcher = fetcher or WebFetcher()

    async def execute(self, query: str, count: int | None = None, **kwargs: Any) -> str:
        n = _clamp(count if count is not None else self.config.max_results, 1, _MAX_COUNT)
        try:
            return await search_web(
                self.fetcher,
                query,
                max_results=n,
                allowed=self.allowed_domains,
                base_url=self.config.base_url,
            )
        except WebToolError as e:
            logger.warning("web_search failed for '{}': {}", query, e)
            return f"Error: {e}"


class NewsSearchTool(Tool):
    """Search recent news through an RSS search feed."""

    name = "news_search"
    description = "Search recent news. Returns titles, URLs, sources and publish dates."
    parameters = _count_parameters("News")

    def __init__(
        self,
        news_search_config: NewsSearchConfig | None = None,
        fetcher: WebFetcher | None = None,
    ):
        from webdigest.config.schema import NewsSearchConfig

        self.config = news_search_config or NewsSearchConfig()
        self.fetcher = fetcher or WebFetcher()

    async def execute(self, query: str, count: int | None = None, **kwargs: Any) -> str:
        n = _clamp(count if count is not None else self.config.max_results, 1, _MAX_COUNT)
        try:
            return await search_news(
                self.fetcher,
                query,
                max_results=n,
                base_url=self.config.base_url,
                language=self.config.language,
                region=self.config.region,
            )
        except WebToolError as e:
            logger.warning("news_search failed for '{}': {}", query, e)
            return f"Error: {e}"


class WebFetchTool(Tool):
    """Fetch a page and return its readable text."""

    name = "web_fetch"
    description = "Fetch a web page and return its cleaned plain text."
    parameters = {
        "type": "object",
        "properties": {
            "url": {"type": "string", "minLength": 1, "description": "URL to fetch"},
            "maxChars": {"type": "integer", "minimum": 100, "maximum": 100000},
        },
        "required": ["url"],
    }

    def __init__(
        self,
        web_fetch_config: WebFetchConfig | None = None,
        fetcher: WebFetcher | None = None,
    ):
        from webdigest.config.schema import WebFetchConfig

        self.config = web_fetch_config or WebFetchConfig()
        self.fetcher = fetcher or WebFetcher()

    def _check_url(self, url: str) -> tuple[bool, str]:
        return validate_fetch_url(url, allow_private_network=self.config.allow_private_network)

    async def execute(self, url: str, maxChars: int | None = None, **kwargs: Any) -> str:
        ok, error = self._check_url(url)
        if not ok:
            return f"Error: {error}"

        max_chars = maxChars if maxChars is not None else self.config.max_chars
        try:
            return await fetch_content(
                self.fetcher, url, max_chars=max_chars, url_guard=self._check_url
            )
        except WebToolError as e:
            logger.warning("web_fetch failed for {}: {}", url, e)
            return f"Error: {e}"
