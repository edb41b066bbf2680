"""Google News search query construction."""

from urllib.parse import quote

GOOGLE_NEWS_BASE_URL = "https://news.google.com"

# Characters encodeURIComponent leaves alone beyond quote()'s defaults.
_URI_COMPONENT_SAFE = "!~*'()"


def build_search_query(
    keywords: str,
    date_from: str | None = None,
    date_to: str | None = None,
) -> str:
    """Compose a provider query string from keywords and date bounds.

    Google News honours ``after:`` and ``before:`` operators, but only
    loosely, so date filtering is best-effort.

    Args:
        keywords: User keywords (trimmed here).
        date_from: Optional ISO start date, passed through unvalidated.
        date_to: Optional ISO end date, passed through unvalidated.

    Returns:
        Keywords, then ``after:<date_from>``, then ``before:<date_to>``,
        space-joined.
    """
    parts = [keywords.strip()]
    if date_from:
        parts.append(f"after:{date_from}")
    if date_to:
        parts.append(f"before:{date_to}")
    return " ".join(parts)


def build_feed_url(
    query: str,
    *,
    base_url: str = GOOGLE_NEWS_BASE_URL,
    hl: str = "en-US",
    gl: str = "US",
    ceid: str = "US:en",
) -> str:
    """Build the RSS search endpoint URL for a query."""
    encoded = quote(query, safe=_URI_COMPONENT_SAFE)
    return f"{base_url.rstrip('/')}/rss/search?q={encoded}&hl={hl}&gl={gl}&ceid={ceid}"
