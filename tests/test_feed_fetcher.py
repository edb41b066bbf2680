"""Tests for GoogleNewsFeedFetcher."""

from unittest.mock import MagicMock

import httpx
import pytest

from newsdesk.errors import FetchError
from newsdesk.feed import GoogleNewsFeedFetcher

FEED_URL = "https://news.google.com/rss/search?q=tesla&hl=en-US&gl=US&ceid=US:en"

SAMPLE_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>"tesla" - Google News</title>
    <item>
      <title>Tesla misses estimates - Reuters</title>
      <link>https://news.google.com/rss/articles/one</link>
      <pubDate>Fri, 05 Jan 2024 12:00:00 GMT</pubDate>
      <source url="https://www.reuters.com">Reuters</source>
    </item>
    <item>
      <title>Tesla deliveries rise - CNBC</title>
      <link>https://news.google.com/rss/articles/two</link>
      <pubDate>Fri, 05 Jan 2024 13:00:00 GMT</pubDate>
      <source url="https://www.cnbc.com">CNBC</source>
    </item>
  </channel>
</rss>
"""

EMPTY_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"><channel><title>empty</title></channel></rss>
"""

TRUNCATED_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>"tesla" - Google News</title>
    <item>
      <title>One - Reuters</title>
      <link>https://news.google.com/rss/articles/one</link>
    </item>
    <item>
      <title>Two - BBC</title>
      <link>https://news.google.com/rss/articles/two</link>
    </item>
    <item>
      <title>Three - CNN</title>
      <link>https://news.google.com/rss/artic"""

LATIN1_FEED = (
    '<?xml version="1.0" encoding="ISO-8859-1"?>\n'
    '<rss version="2.0"><channel><title>caf\u00e9</title>'
    "<item><title>Caf\u00e9 prices climb - Le Monde</title>"
    "<link>https://news.google.com/rss/articles/cafe</link></item>"
    "</channel></rss>"
).encode("iso-8859-1")


def _mock_response(body: str | bytes) -> MagicMock:
    response = MagicMock()
    response.content = body.encode() if isinstance(body, str) else body
    response.raise_for_status = MagicMock()
    return response


class TestGoogleNewsFeedFetcher:
    """Tests for GoogleNewsFeedFetcher."""

    @pytest.fixture
    def fetcher(self) -> GoogleNewsFeedFetcher:
        return GoogleNewsFeedFetcher(timeout=5.0)

    async def test_fetch_returns_entries_in_order(
        self, fetcher: GoogleNewsFeedFetcher, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_get(self, url, **kwargs):
            return _mock_response(SAMPLE_FEED)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        entries = await fetcher.fetch(FEED_URL)

        assert len(entries) == 2
        assert entries[0]["link"] == "https://news.google.com/rss/articles/one"
        assert entries[1]["link"] == "https://news.google.com/rss/articles/two"

    async def test_fetch_requests_built_url(
        self, fetcher: GoogleNewsFeedFetcher, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        captured: dict = {}

        async def mock_get(self, url, **kwargs):
            captured["url"] = url
            captured.update(kwargs)
            return _mock_response(SAMPLE_FEED)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        await fetcher.fetch(FEED_URL)

        assert captured["url"] == FEED_URL
        assert captured["follow_redirects"] is True
        assert "User-Agent" in captured["headers"]

    async def test_empty_feed_is_not_an_error(
        self, fetcher: GoogleNewsFeedFetcher, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_get(self, url, **kwargs):
            return _mock_response(EMPTY_FEED)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        assert await fetcher.fetch(FEED_URL) == []

    async def test_network_error_is_fatal(
        self, fetcher: GoogleNewsFeedFetcher, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_get(self, url, **kwargs):
            raise httpx.ConnectError("connection refused")

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(FetchError, match="connection refused"):
            await fetcher.fetch(FEED_URL)

    async def test_error_status_is_fatal(
        self, fetcher: GoogleNewsFeedFetcher, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        request = httpx.Request("GET", FEED_URL)
        error_response = httpx.Response(503, request=request)

        async def mock_get(self, url, **kwargs):
            response = _mock_response("")
            response.raise_for_status = MagicMock(
                side_effect=httpx.HTTPStatusError(
                    "Service Unavailable", request=request, response=error_response
                )
            )
            return response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(FetchError):
            await fetcher.fetch(FEED_URL)

    async def test_malformed_document_is_fatal(
        self, fetcher: GoogleNewsFeedFetcher, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_get(self, url, **kwargs):
            return _mock_response("this is not a feed at all {")

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(FetchError):
            await fetcher.fetch(FEED_URL)

    async def test_html_page_is_fatal(
        self, fetcher: GoogleNewsFeedFetcher, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_get(self, url, **kwargs):
            return _mock_response("<html><body><p>Sorry, unusual traffic</p></body></html>")

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(FetchError):
            await fetcher.fetch(FEED_URL)

    async def test_truncated_document_is_fatal(
        self, fetcher: GoogleNewsFeedFetcher, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_get(self, url, **kwargs):
            return _mock_response(TRUNCATED_FEED)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(FetchError, match="Malformed feed document"):
            await fetcher.fetch(FEED_URL)

    async def test_declared_encoding_is_honoured(
        self, fetcher: GoogleNewsFeedFetcher, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_get(self, url, **kwargs):
            return _mock_response(LATIN1_FEED)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        entries = await fetcher.fetch(FEED_URL)

        assert len(entries) == 1
        assert entries[0]["title"] == "Café prices climb - Le Monde"
