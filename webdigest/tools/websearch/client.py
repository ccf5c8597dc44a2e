"""Document fetching and the search/fetch pipelines built on it."""

from __future__ import annotations

from typing import Any, Callable

import httpx
from loguru import logger

from webdigest.tools.websearch.errors import WebFetchError
from webdigest.tools.websearch.feed import parse_feed
from webdigest.tools.websearch.formatter import NO_RESULTS, format_entries
from webdigest.tools.websearch.results import parse_results
from webdigest.tools.websearch.text import normalize
from webdigest.tools.websearch.urls import site_filter

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_SEARCH_URL = "https://html.duckduckgo.com/html/"
DEFAULT_NEWS_URL = "https://news.google.com/rss/search"

NO_NEWS = "No news found."
NO_CONTENT = "No content found."
TRUNCATION_MARKER = "\n\n[Content truncated]"


UrlGuard = Callable[[str], tuple[bool, str]]


class WebFetcher:
    """Shared HTTP fetcher used by every web tool.

    A long-lived ``httpx.AsyncClient`` may be injected and is then reused for
    every request; otherwise each request opens and closes its own client.
    Redirects are followed here, hop by hop, so a URL guard sees every target.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
        max_redirects: int = 5,
    ):
        self._client = client
        self._headers = {"User-Agent": user_agent}
        self._timeout = timeout
        self._max_redirects = max_redirects

    async def get_text(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        url_guard: UrlGuard | None = None,
    ) -> str:
        """GET a document and return its decoded body.

        Raises:
            WebFetchError: On transport errors, non-2xx responses, too many
                redirects, or a redirect target rejected by ``url_guard``.
        """
        logger.debug("Fetching {} params={}", url, params)
        try:
            if self._client is not None:
                response = await self._follow(self._client, url, params, url_guard)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._follow(client, url, params, url_guard)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise WebFetchError(f"HTTP {status} from {url}", status_code=status) from e
        except httpx.HTTPError as e:
            raise WebFetchError(f"request to {url} failed: {e}") from e
        return response.text

    async def _follow(
        self,
        client: httpx.AsyncClient,
        url: str,
        params: dict[str, Any] | None,
        url_guard: UrlGuard | None,
    ) -> httpx.Response:
        response = await self._get(client, url, params)
        for _ in range(self._max_redirects):
            if not response.is_redirect:
                return response
            target = str(response.url.join(response.headers["Location"]))
            if url_guard is not None:
                ok, error = url_guard(target)
                if not ok:
                    raise WebFetchError(f"redirect to {target} blocked: {error}")
            logger.debug("Following redirect to {}", target)
            response = await self._get(client, target, None)

        if response.is_redirect:
            raise WebFetchError(f"too many redirects fetching {url}")
        return response

    async def _get(
        self,
        client: httpx.AsyncClient,
        url: str,
        params: dict[str, Any] | None,
    ) -> httpx.Response:
        return await client.get(
            url,
            params=params,
            headers=self._headers,
            timeout=self._timeout,
            follow_redirects=False,
        )


async def search_web(
    fetcher: WebFetcher,
    query: str,
    *,
    max_results: int,
    allowed: frozenset[str] = frozenset(),
    base_url: str = DEFAULT_SEARCH_URL,
) -> str:
    """Search the HTML results page and render the hits."""
    html = await fetcher.get_text(base_url, params={"q": query + site_filter(allowed)})
    results = parse_results(html, max_results, allowed)
    logger.debug("Web search '{}': {} result(s)", query, len(results))
    return format_entries(results, query, "result", NO_RESULTS)


def _news_params(query: str, language: str, region: str) -> dict[str, str]:
    lang = language.split("-")[0]
    return {"q": query, "hl": language, "gl": region, "ceid": f"{region}:{lang}"}


async def search_news(
    fetcher: WebFetcher,
    query: str,
    *,
    max_results: int,
    base_url: str = DEFAULT_NEWS_URL,
    language: str = "en-US",
    region: str = "US",
) -> str:
    """Search the news feed and render its items."""
    xml = await fetcher.get_text(base_url, params=_news_params(query, language, region))
    items = parse_feed(xml, max_results)
    logger.debug("News search '{}': {} item(s)", query, len(items))
    return format_entries(items, query, "article", NO_NEWS)


def render_content(html: str, max_chars: int) -> str:
    """Normalize a page to plain text, truncated to ``max_chars``."""
    text = normalize(html)
    if not text.strip():
        return NO_CONTENT
    if len(text) > max_chars:
        return text[:max_chars] + TRUNCATION_MARKER
    return text


async def fetch_content(
    fetcher: WebFetcher,
    url: str,
    *,
    max_chars: int,
    url_guard: UrlGuard | None = None,
) -> str:
    """Fetch a page and return its readable text.

    ``url_guard`` is applied to every redirect target before it is requested.
    """
    html = await fetcher.get_text(url, url_guard=url_guard)
    return render_content(html, max_chars)
