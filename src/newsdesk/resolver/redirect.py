"""Redirect-following link resolution."""

import asyncio
import dataclasses
import logging

import httpx

from newsdesk.data import Article, Resolution, Usage

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; newsdesk/0.1)"


class RedirectLinkResolver:
    """Resolve Google News permalinks by following their redirects.

    Every article in the prefix is resolved concurrently and the call only
    returns once all of them have finished. A failed attempt never raises:
    the article keeps its original permalink as ``publisher_url``.

    Args:
        timeout: Upper bound in seconds for one resolution, redirects included.
        user_agent: User-Agent header sent with each request.
        transport: Optional httpx transport (mainly for tests).
    """

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._user_agent = user_agent
        self._transport = transport

    async def resolve(
        self,
        articles: list[Article],
        *,
        limit: int,
    ) -> tuple[list[Article], Usage]:
        prefix = articles[: max(limit, 0)]
        remainder = articles[len(prefix) :]
        if not prefix:
            return (list(articles), Usage())

        async with httpx.AsyncClient(
            timeout=self._timeout,
            headers={"User-Agent": self._user_agent},
            transport=self._transport,
        ) as client:
            tasks = [self._resolve_single(client, a.google_news_url) for a in prefix]
            results = await asyncio.gather(*tasks, return_exceptions=True)

        resolutions: list[Resolution] = []
        for article, result in zip(prefix, results, strict=True):
            if isinstance(result, BaseException):
                logger.debug(
                    "Could not resolve %s, keeping original. Error: %r",
                    article.google_news_url,
                    result,
                )
                url = article.google_news_url
                resolutions.append(Resolution(original_url=url, final_url=url, degraded=True))
                continue
            resolutions.append(result)

        resolved = [
            dataclasses.replace(article, publisher_url=resolution.url)
            for article, resolution in zip(prefix, resolutions, strict=True)
        ]

        degraded = sum(1 for r in resolutions if r.degraded)
        logger.info(
            "Resolved %d of %d links (%d fell back to the feed permalink)",
            len(resolutions) - degraded,
            len(resolutions),
            degraded,
        )
        usage = Usage(resolve_requests=sum(1 for a in prefix if a.google_news_url))
        return (resolved + list(remainder), usage)

    async def _resolve_single(self, client: httpx.AsyncClient, url: str) -> Resolution:
        """Follow redirects from ``url`` and report where they land."""
        if not url:
            return Resolution(original_url=url, final_url=url, degraded=True)

        response = await asyncio.wait_for(
            client.get(url, follow_redirects=True),
            timeout=self._timeout,
        )
        return Resolution(original_url=url, final_url=str(response.url))
