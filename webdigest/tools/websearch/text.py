"""Plain-text extraction from noisy HTML."""

from __future__ import annotations

import re
from html.parser import HTMLParser

NOISE_TAGS = frozenset({"script", "style", "nav", "header", "footer", "aside", "iframe"})
BLOCK_TAGS = frozenset(
    {"p", "div", "br", "h1", "h2", "h3", "h4", "h5", "h6", "li", "tr", "blockquote"}
)

_MULTI_SPACE_RE = re.compile(r" {2,}")


class _MarkupTextWriter(HTMLParser):
    """Tokenize markup and write its text, replacing tags with separators.

    Noise blocks are only dropped once their closing tag is seen, so a block
    left open at the end of the document is kept as ordinary text.
    """

    def __init__(self, *, block_aware: bool) -> None:
        super().__init__(convert_charrefs=True)
        self._block_aware = block_aware
        self._parts: list[str] = []
        self._noise_tag: str | None = None
        self._noise_depth = 0
        self._noise_start = 0

    def text(self) -> str:
        return "".join(self._parts)

    def _separator(self, tag: str | None = None) -> str:
        if not self._block_aware:
            return ""
        return "\n" if tag in BLOCK_TAGS else " "

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if self._block_aware:
            if self._noise_tag is None and tag in NOISE_TAGS:
                self._noise_tag = tag
                self._noise_depth = 1
                self._noise_start = len(self._parts)
            elif tag == self._noise_tag:
                self._noise_depth += 1
        self._parts.append(self._separator(tag))

    def handle_endtag(self, tag: str) -> None:
        self._parts.append(self._separator(tag))
        if tag != self._noise_tag:
            return
        self._noise_depth -= 1
        if self._noise_depth == 0:
            del self._parts[self._noise_start:]
            self._parts.append(" ")
            self._noise_tag = None

    def handle_data(self, data: str) -> None:
        self._parts.append(data)

    def handle_comment(self, data: str) -> None:
        self._parts.append(self._separator())

    def handle_decl(self, decl: str) -> None:
        self._parts.append(self._separator())

    def handle_pi(self, data: str) -> None:
        self._parts.append(self._separator())

    def unknown_decl(self, data: str) -> None:
        self._parts.append(self._separator())


def _write_text(markup: str, *, block_aware: bool) -> str:
    writer = _MarkupTextWriter(block_aware=block_aware)
    writer.feed(markup)
    writer.close()
    return writer.text()


def normalize(raw_markup: str) -> str:
    """
    Convert an HTML page into clean multi-line plain text.

    Noise blocks (scripts, styles, navigation, headers, footers, asides,
    iframes) are dropped with their content, block-level tags become line
    breaks, every other tag becomes a space and entities are decoded. Runs
    of spaces are collapsed, lines are trimmed and empty lines or lines
    holding a single stray symbol are dropped.
    """
    text = _write_text(raw_markup, block_aware=True)
    lines = (_MULTI_SPACE_RE.sub(" ", line).strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if _is_content_line(line))


def _is_content_line(line: str) -> bool:
    # A lone letter or digit is content; a lone "|" or "»" is layout debris.
    return len(line) > 1 or line.isalnum()


def strip_inline(fragment: str) -> str:
    """Strip tags and decode entities in a short fragment such as a title."""
    return _write_text(fragment, block_aware=False).strip()
