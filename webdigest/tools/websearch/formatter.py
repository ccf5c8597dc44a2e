"""Plain-text rendering of search results and feed items."""

from __future__ import annotations

from typing import Protocol, Sequence

NO_RESULTS = "No results found."


class Entry(Protocol):
    title: str

    @property
    def url(self) -> str: ...

    def details(self) -> list[str]: ...


def format_entries(
    entries: Sequence[Entry],
    query: str,
    item_label: str = "result",
    empty_message: str = NO_RESULTS,
) -> str:
    """Render entries as a numbered report, or ``empty_message`` if there are none."""
    if not entries:
        return empty_message

    noun = item_label if len(entries) == 1 else f"{item_label}s"
    lines = [f"{len(entries)} {noun} for: {query}", ""]
    for i, entry in enumerate(entries, 1):
        lines.append(f"{i}. {entry.title}")
        lines.append(f"   URL: {entry.url}")
        lines.extend(f"   {detail}" for detail in entry.details())
        lines.append("")
    return "\n".join(lines)
