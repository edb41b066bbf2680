from newsdesk.query.builder import GOOGLE_NEWS_BASE_URL, build_feed_url, build_search_query

__all__ = ["GOOGLE_NEWS_BASE_URL", "build_feed_url", "build_search_query"]
