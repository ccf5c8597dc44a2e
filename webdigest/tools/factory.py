"""Tool registry factory for the web tools."""

from webdigest.config.schema import Config
from webdigest.tools.registry import ToolRegistry
from webdigest.tools.web import NewsSearchTool, WebFetchTool, WebSearchTool
from webdigest.tools.websearch.client import WebFetcher


def build_web_tool_registry(config: Config, fetcher: WebFetcher | None = None) -> ToolRegistry:
    """Build a registry of the web tools sharing a single fetcher."""
    web_config = config.tools.web
    shared = fetcher or WebFetcher(
        user_agent=web_config.http.user_agent,
        timeout=web_config.http.timeout,
    )

    registry = ToolRegistry()
    registry.register(WebSearchTool(web_search_config=web_config.search, fetcher=shared))
    registry.register(NewsSearchTool(news_search_config=web_config.news, fetcher=shared))
    registry.register(WebFetchTool(web_fetch_config=web_config.fetch, fetcher=shared))
    return registry
