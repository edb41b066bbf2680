"""Google News RSS retrieval using httpx and feedparser."""

import logging

import feedparser
import httpx

from newsdesk.errors import FetchError
from newsdesk.feed.base import RawEntry

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "newsdesk/0.1 (+https://news.google.com/rss)"


class GoogleNewsFeedFetcher:
    """Fetch a Google News RSS document and parse it into raw entries.

    Any transport error, non-success status, or malformed document is
    fatal; there is no partial-feed recovery.

    Args:
        timeout: Request timeout in seconds.
        user_agent: User-Agent header sent with the request.
    """

    def __init__(
        self,
        *,
        timeout: float = 15.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._timeout = timeout
        self._user_agent = user_agent

    async def fetch(self, url: str) -> list[RawEntry]:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(
                    url,
                    headers={"User-Agent": self._user_agent},
                    follow_redirects=True,
                )
                response.raise_for_status()
                body = response.content
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch feed {url}: {e}") from e

        parsed = feedparser.parse(body)
        entries = list(parsed.get("entries") or [])

        # Encoding overrides are notices; anything else means a broken document.
        bozo_exception = parsed.get("bozo_exception")
        if parsed.get("bozo") and not isinstance(
            bozo_exception, feedparser.CharacterEncodingOverride
        ):
            raise FetchError(f"Malformed feed document: {bozo_exception}")
        if not parsed.get("version"):
            raise FetchError("Response is not a recognized syndication document")

        logger.info("Fetched %d feed entries", len(entries))
        return entries
