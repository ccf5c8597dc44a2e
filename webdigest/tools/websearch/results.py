"""HTML results-page parser for the DuckDuckGo HTML endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from html.parser import HTMLParser

from webdigest.tools.websearch.models import SearchResult
from webdigest.tools.websearch.urls import is_allowed, unwrap_redirect

CONTAINER_CLASS = "results_links"
LINK_CLASS = "result__a"
SNIPPET_CLASS = "result__snippet"


class _ScanComplete(Exception):
    """Raised inside the tokenizer once enough results were accepted."""


@dataclass
class _Container:
    href: str | None = None
    title: list[str] = field(default_factory=list)
    snippet: list[str] | None = None


def _has_class(attrs: list[tuple[str, str | None]], name: str) -> bool:
    for key, value in attrs:
        if key == "class" and value and name in value.split():
            return True
    return False


class _ResultScanner(HTMLParser):
    def __init__(self, max_results: int, allowed: frozenset[str]) -> None:
        super().__init__(convert_charrefs=True)
        self.results: list[SearchResult] = []
        self._max_results = max_results
        self._allowed = allowed
        self._container: _Container | None = None
        self._div_depth = 0
        self._capture: list[str] | None = None
        self._capture_tag = ""
        self._capture_depth = 0

    def _start_capture(self, tag: str, target: list[str]) -> None:
        self._capture = target
        self._capture_tag = tag
        self._capture_depth = 1

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        container = self._container
        if container is None:
            if tag == "div" and _has_class(attrs, CONTAINER_CLASS):
                self._container = _Container()
                self._div_depth = 1
            return

        if tag == "div":
            self._div_depth += 1
        if self._capture is not None:
            if tag == self._capture_tag:
                self._capture_depth += 1
            return

        if tag == "a" and container.href is None and _has_class(attrs, LINK_CLASS):
            container.href = dict(attrs).get("href") or ""
            self._start_capture(tag, container.title)
        elif container.snippet is None and _has_class(attrs, SNIPPET_CLASS):
            container.snippet = []
            self._start_capture(tag, container.snippet)

    def handle_endtag(self, tag: str) -> None:
        if self._container is None:
            return
        if self._capture is not None and tag == self._capture_tag:
            self._capture_depth -= 1
            if self._capture_depth == 0:
                self._capture = None
        if tag == "div":
            self._div_depth -= 1
            if self._div_depth == 0:
                self._finish_container()

    def handle_data(self, data: str) -> None:
        if self._capture is not None:
            self._capture.append(data)

    def close(self) -> None:
        super().close()
        if self._container is not None:
            self._finish_container()

    def _finish_container(self) -> None:
        container = self._container
        self._container = None
        self._capture = None
        if container is None or container.href is None:
            return

        url = unwrap_redirect(container.href)
        title = "".join(container.title).strip()
        if not title:
            return
        snippet = "".join(container.snippet).strip() if container.snippet else ""
        if not is_allowed(url, self._allowed):
            return

        self.results.append(SearchResult(title=title, url=url, snippet=snippet))
        if len(self.results) >= self._max_results:
            raise _ScanComplete


def parse_results(
    html: str,
    max_results: int,
    allowed: frozenset[str] = frozenset(),
) -> list[SearchResult]:
    """
    Extract search hits from an HTML results page in document order.

    Containers without a result link, with an empty title or whose URL falls
    outside ``allowed`` are skipped and do not count toward ``max_results``.
    Scanning stops as soon as ``max_results`` hits were accepted.
    """
    if max_results <= 0:
        return []

    scanner = _ResultScanner(max_results, allowed)
    try:
        scanner.feed(html)
        scanner.close()
    except _ScanComplete:
        pass
    return scanner.results
