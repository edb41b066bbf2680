"""Feed retrieval and normalization."""

from newsdesk.feed.base import FeedFetcher, RawEntry
from newsdesk.feed.google_news import GoogleNewsFeedFetcher
from newsdesk.feed.normalize import normalize_entries, normalize_entry, split_title

__all__ = [
    "FeedFetcher",
    "GoogleNewsFeedFetcher",
    "RawEntry",
    "normalize_entries",
    "normalize_entry",
    "split_title",
]
