"""RSS feed parser for news search."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from webdigest.tools.websearch.errors import FeedParseError
from webdigest.tools.websearch.models import FeedItem
from webdigest.tools.websearch.text import strip_inline


def _child_text(item: ET.Element, tag: str) -> str:
    return (item.findtext(tag) or "").strip()


def _item_link(item: ET.Element) -> str:
    link = item.find("link")
    if link is not None:
        # Some feeds emit <link/> with the URL as a bare text node after it.
        bare = (link.tail or "").strip()
        if bare:
            return bare
        own = (link.text or "").strip()
        if own:
            return own
    return _child_text(item, "guid")


def _feed_items(root: ET.Element) -> list[ET.Element]:
    # <rss><channel><item>, or a bare <channel> root holding the items.
    return root.findall("./channel/item") or root.findall("./item")


def parse_feed(xml: str, max_results: int) -> list[FeedItem]:
    """
    Parse the first ``max_results`` items of an RSS document.

    Raises:
        FeedParseError: If the document is not well-formed XML.
    """
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as e:
        raise FeedParseError(f"invalid feed document: {e}") from e

    items: list[FeedItem] = []
    for item in _feed_items(root)[:max(max_results, 0)]:
        description = item.findtext("description")
        items.append(
            FeedItem(
                title=_child_text(item, "title"),
                link=_item_link(item),
                published=_child_text(item, "pubDate"),
                source=_child_text(item, "source"),
                description=strip_inline(description) if description else "",
            )
        )
    return items
