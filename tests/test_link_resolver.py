"""Tests for RedirectLinkResolver."""

import asyncio
from unittest.mock import MagicMock

import httpx
import pytest

from newsdesk.data import Article
from newsdesk.resolver import RedirectLinkResolver


def _articles(n: int) -> list[Article]:
    return [
        Article(title=f"Story {i}", google_news_url=f"https://news.google.com/rss/articles/{i}")
        for i in range(n)
    ]


def _redirecting_handler(request: httpx.Request) -> httpx.Response:
    """Redirect every Google News permalink to a publisher page."""
    if request.url.host == "news.google.com":
        article_id = request.url.path.rsplit("/", 1)[-1]
        return httpx.Response(
            302, headers={"Location": f"https://publisher.example/story-{article_id}"}
        )
    return httpx.Response(200, text="<html>article</html>")


class TestRedirectLinkResolver:
    """Tests for RedirectLinkResolver."""

    async def test_resolves_prefix_to_final_url(self) -> None:
        resolver = RedirectLinkResolver(transport=httpx.MockTransport(_redirecting_handler))

        resolved, usage = await resolver.resolve(_articles(3), limit=8)

        assert [a.publisher_url for a in resolved] == [
            "https://publisher.example/story-0",
            "https://publisher.example/story-1",
            "https://publisher.example/story-2",
        ]
        assert usage.resolve_requests == 3

    async def test_remainder_passes_through_untouched(self) -> None:
        resolver = RedirectLinkResolver(transport=httpx.MockTransport(_redirecting_handler))
        articles = _articles(10)

        resolved, usage = await resolver.resolve(articles, limit=8)

        assert len(resolved) == 10
        assert all(a.publisher_url for a in resolved[:8])
        assert resolved[8:] == articles[8:]
        assert all(a.publisher_url == "" for a in resolved[8:])
        assert usage.resolve_requests == 8

    async def test_preserves_order_and_other_fields(self) -> None:
        resolver = RedirectLinkResolver(transport=httpx.MockTransport(_redirecting_handler))
        articles = _articles(4)

        resolved, _ = await resolver.resolve(articles, limit=4)

        assert [a.title for a in resolved] == [a.title for a in articles]
        assert [a.google_news_url for a in resolved] == [a.google_news_url for a in articles]

    async def test_does_not_mutate_input(self) -> None:
        resolver = RedirectLinkResolver(transport=httpx.MockTransport(_redirecting_handler))
        articles = _articles(2)
        snapshot = list(articles)

        await resolver.resolve(articles, limit=2)

        assert articles == snapshot

    async def test_failed_link_falls_back_to_original(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/1"):
                raise httpx.ConnectError("unreachable", request=request)
            return _redirecting_handler(request)

        resolver = RedirectLinkResolver(transport=httpx.MockTransport(handler))

        resolved, _ = await resolver.resolve(_articles(3), limit=3)

        assert resolved[0].publisher_url == "https://publisher.example/story-0"
        assert resolved[1].publisher_url == "https://news.google.com/rss/articles/1"
        assert resolved[2].publisher_url == "https://publisher.example/story-2"

    async def test_slow_link_times_out_and_falls_back(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/0"):
                await asyncio.sleep(5)
            return _redirecting_handler(request)

        resolver = RedirectLinkResolver(timeout=0.05, transport=httpx.MockTransport(handler))

        resolved, _ = await resolver.resolve(_articles(2), limit=2)

        assert resolved[0].publisher_url == "https://news.google.com/rss/articles/0"
        assert resolved[1].publisher_url == "https://publisher.example/story-1"

    async def test_empty_permalink_stays_empty(self) -> None:
        resolver = RedirectLinkResolver(transport=httpx.MockTransport(_redirecting_handler))
        articles = [Article(title="No link"), *_articles(1)]

        resolved, usage = await resolver.resolve(articles, limit=2)

        assert resolved[0].publisher_url == ""
        assert resolved[1].publisher_url == "https://publisher.example/story-0"
        assert usage.resolve_requests == 1

    async def test_error_status_still_uses_landed_url(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "news.google.com":
                return httpx.Response(301, headers={"Location": "https://paywalled.example/a"})
            return httpx.Response(403)

        resolver = RedirectLinkResolver(transport=httpx.MockTransport(handler))

        resolved, _ = await resolver.resolve(_articles(1), limit=1)

        assert resolved[0].publisher_url == "https://paywalled.example/a"

    async def test_resolutions_run_concurrently(self) -> None:
        in_flight = 0
        peak = 0

        async def handler(request: httpx.Request) -> httpx.Response:
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return httpx.Response(200)

        resolver = RedirectLinkResolver(transport=httpx.MockTransport(handler))

        await resolver.resolve(_articles(8), limit=8)

        assert peak == 8

    async def test_zero_limit_resolves_nothing(self) -> None:
        resolver = RedirectLinkResolver(transport=httpx.MockTransport(_redirecting_handler))
        articles = _articles(3)

        resolved, usage = await resolver.resolve(articles, limit=0)

        assert resolved == articles
        assert usage.resolve_requests == 0

    async def test_monkeypatched_client_get(self, monkeypatch: pytest.MonkeyPatch) -> None:
        async def mock_get(self, url, **kwargs):
            assert kwargs["follow_redirects"] is True
            response = MagicMock()
            response.url = httpx.URL("https://landed.example/final")
            return response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        resolved, _ = await RedirectLinkResolver().resolve(_articles(1), limit=1)

        assert resolved[0].publisher_url == "https://landed.example/final"
