"""Shared web search models."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SearchResult:
    """One hit parsed from an HTML results page."""

    title: str
    url: str
    snippet: str = ""

    def details(self) -> list[str]:
        return [self.snippet] if self.snippet else []


@dataclass(frozen=True, slots=True)
class FeedItem:
    """One item parsed from a syndication feed."""

    title: str
    link: str
    published: str = ""
    source: str = ""
    description: str = ""

    @property
    def url(self) -> str:
        return self.link

    def details(self) -> list[str]:
        lines: list[str] = []
        if self.source:
            lines.append(f"Source: {self.source}")
        if self.published:
            lines.append(f"Published: {self.published}")
        if self.description:
            lines.append(self.description)
        return lines
