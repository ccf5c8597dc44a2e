import pytest

from webdigest.tools.websearch.errors import FeedParseError
from webdigest.tools.websearch.feed import parse_feed

FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>"ai" - News</title>
    <item>
      <title>First &amp; foremost</title>
      <link>https://news.example.com/1</link>
      <guid isPermaLink="false">g1</guid>
      <pubDate>Mon, 06 Jan 2025 10:00:00 GMT</pubDate>
      <description>&lt;a href="https://news.example.com/1"&gt;First&lt;/a&gt; &lt;font color="#6f6f6f"&gt;Example News&lt;/font&gt;</description>
      <source url="https://news.example.com">Example News</source>
    </item>
    <item>
      <title>Second</title>
      <link/>
        https://bare.example.com/story
      <guid>g2</guid>
    </item>
    <item>
      <guid>https://guid.example.com/3</guid>
    </item>
    <item>
      <title>No link at all</title>
    </item>
  </channel>
</rss>
"""


def test_parse_feed_reads_all_fields() -> None:
    first = parse_feed(FEED, 10)[0]

    assert first.title == "First & foremost"
    assert first.link == "https://news.example.com/1"
    assert first.published == "Mon, 06 Jan 2025 10:00:00 GMT"
    assert first.source == "Example News"
    assert first.description == "First Example News"


def test_parse_feed_bare_link_text_node() -> None:
    second = parse_feed(FEED, 10)[1]
    assert second.link == "https://bare.example.com/story"


def test_parse_feed_link_falls_back_to_guid_then_empty() -> None:
    items = parse_feed(FEED, 10)
    assert items[2].link == "https://guid.example.com/3"
    assert items[3].link == ""


def test_parse_feed_missing_fields_default_to_empty() -> None:
    third = parse_feed(FEED, 10)[2]
    assert third.title == ""
    assert third.published == ""
    assert third.source == ""
    assert third.description == ""


def test_parse_feed_takes_first_items_in_order_without_dropping() -> None:
    items = parse_feed(FEED, 3)
    assert [item.title for item in items] == ["First & foremost", "Second", ""]
    assert parse_feed(FEED, 0) == []


def test_parse_feed_rejects_malformed_documents() -> None:
    with pytest.raises(FeedParseError):
        parse_feed("<rss><channel><item>", 5)

    with pytest.raises(FeedParseError):
        parse_feed("<html><body>Not a feed<br></body></html>", 5)


def test_parse_feed_without_items() -> None:
    assert parse_feed("<rss><channel><title>empty</title></channel></rss>", 5) == []


def test_parse_feed_ignores_nested_item_elements() -> None:
    xml = """<rss><channel>
<item><title>Outer</title><media:group xmlns:media="http://search.yahoo.com/mrss/"><item><title>Inner</title></item></media:group></item>
<item><title>Next</title></item>
</channel></rss>"""

    assert [item.title for item in parse_feed(xml, 5)] == ["Outer", "Next"]


def test_parse_feed_channel_root() -> None:
    xml = "<channel><item><title>Only</title><link>https://a.example/</link></item></channel>"

    items = parse_feed(xml, 5)
    assert [(item.title, item.link) for item in items] == [("Only", "https://a.example/")]
