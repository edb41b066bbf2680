"""Map raw feed entries onto canonical articles.

Pure functions with no I/O. Google News titles usually look like
``"Headline - Publisher"``; when they do not, the publisher comes from the
entry's ``<source>`` element.
"""

import calendar
import re
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from html import unescape
from typing import Any

from newsdesk.data import Article
from newsdesk.feed.base import RawEntry

TITLE_SEPARATOR = " - "

_HTML_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _strip_html(value: str) -> str:
    text = _HTML_TAG_RE.sub(" ", value)
    text = unescape(text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def split_title(raw_title: str) -> tuple[str, str | None]:
    """Split ``"Headline - Publisher"`` into its parts.

    Returns:
        Tuple of (title, publisher). Publisher is None when the title
        has no separator.
    """
    parts = raw_title.split(TITLE_SEPARATOR)
    if len(parts) >= 2:
        return TITLE_SEPARATOR.join(parts[:-1]).strip(), parts[-1].strip()
    return raw_title.strip(), None


def _source_publisher(entry: RawEntry) -> str:
    """Publisher from the structured ``<source>`` element, if any."""
    source = entry.get("source")
    if not isinstance(source, Mapping):
        return ""
    # feedparser exposes the element text as "title"; some producers
    # nest it under "value" instead.
    for key in ("title", "value"):
        value = source.get(key)
        if value:
            return _text(value).strip()
    return ""


def _published(entry: RawEntry) -> str:
    parsed = entry.get("published_parsed")
    if parsed:
        try:
            timestamp = calendar.timegm(parsed)
            return datetime.fromtimestamp(timestamp, tz=UTC).isoformat()
        except (TypeError, ValueError, OverflowError):
            pass
    return _text(entry.get("published")).strip()


def _snippet(entry: RawEntry) -> str:
    raw = entry.get("summary") or entry.get("description")
    if not raw:
        return ""
    return _strip_html(_text(raw))


def normalize_entry(entry: RawEntry) -> Article:
    """Build an ``Article`` from one raw feed entry."""
    title, publisher = split_title(_text(entry.get("title")))
    if publisher is None:
        publisher = _source_publisher(entry)

    return Article(
        title=title,
        publisher=publisher,
        published_date_time=_published(entry),
        google_news_url=_text(entry.get("link")).strip(),
        snippet=_snippet(entry),
    )


def normalize_entries(entries: Iterable[RawEntry]) -> list[Article]:
    """Normalize entries, preserving feed order."""
    return [normalize_entry(entry) for entry in entries]
