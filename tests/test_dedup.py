"""Tests for article deduplication."""

from newsdesk.data import Article
from newsdesk.dedup import dedup_key, deduplicate


def test_key_prefers_publisher_url() -> None:
    article = Article(title="t", google_news_url="https://g/1", publisher_url="https://p/1")
    assert dedup_key(article) == "https://p/1"


def test_key_falls_back_to_google_news_url() -> None:
    assert dedup_key(Article(title="t", google_news_url="https://g/1")) == "https://g/1"


def test_key_falls_back_to_title() -> None:
    assert dedup_key(Article(title="Only a title")) == "Only a title"


def test_keyless_articles_are_dropped() -> None:
    articles = [Article(title=""), Article(title="kept", google_news_url="https://g/1")]
    assert deduplicate(articles) == [articles[1]]


def test_same_resolved_url_keeps_first() -> None:
    first = Article(
        title="Fed cuts rates",
        google_news_url="https://news.google.com/rss/articles/a",
        publisher_url="https://reuters.com/fed",
    )
    second = Article(
        title="Fed cuts rates (syndicated)",
        google_news_url="https://news.google.com/rss/articles/b",
        publisher_url="https://reuters.com/fed",
    )
    assert deduplicate([first, second]) == [first]


def test_preserves_relative_order() -> None:
    articles = [
        Article(title="a", google_news_url="https://g/1"),
        Article(title="b", google_news_url="https://g/2"),
        Article(title="a again", google_news_url="https://g/1"),
        Article(title="c", google_news_url="https://g/3"),
    ]
    assert [a.title for a in deduplicate(articles)] == ["a", "b", "c"]


def test_unresolved_and_resolved_use_different_keys() -> None:
    resolved = Article(title="x", google_news_url="https://g/1", publisher_url="https://p/1")
    unresolved = Article(title="x", google_news_url="https://g/1")
    assert len(deduplicate([resolved, unresolved])) == 2


def test_idempotent() -> None:
    articles = [
        Article(title="a", google_news_url="https://g/1", publisher_url="https://p/1"),
        Article(title="b", google_news_url="https://g/2", publisher_url="https://p/1"),
        Article(title="c", google_news_url="https://g/3"),
        Article(title=""),
        Article(title="c"),
        Article(title="c"),
    ]
    once = deduplicate(articles)
    assert deduplicate(once) == once


def test_empty_input() -> None:
    assert deduplicate([]) == []
