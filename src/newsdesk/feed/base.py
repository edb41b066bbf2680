from collections.abc import Mapping
from typing import Any, Protocol

RawEntry = Mapping[str, Any]


class FeedFetcher(Protocol):
    """Interface for retrieving a syndication feed as raw entries."""

    async def fetch(self, url: str) -> list[RawEntry]:
        """Fetch and parse the feed at ``url``.

        Args:
            url: Fully built feed URL.

        Returns:
            Raw entries in feed order.

        Raises:
            FetchError: If the feed cannot be retrieved or parsed.
        """
        ...
