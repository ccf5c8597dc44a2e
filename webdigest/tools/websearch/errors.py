"""Errors raised by the web extraction pipeline."""


class WebToolError(Exception):
    """Base error for web search, news search and page fetching."""


class WebFetchError(WebToolError):
    """Raised when a document cannot be fetched."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class FeedParseError(WebToolError):
    """Raised when a syndication feed is not well-formed."""
