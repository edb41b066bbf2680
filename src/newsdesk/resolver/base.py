from typing import Protocol

from newsdesk.data import Article, Usage


class LinkResolver(Protocol):
    """Interface for resolving feed permalinks to publisher URLs."""

    async def resolve(
        self,
        articles: list[Article],
        *,
        limit: int,
    ) -> tuple[list[Article], Usage]:
        """Resolve ``publisher_url`` for the first ``limit`` articles.

        Args:
            articles: Normalized articles in feed order.
            limit: Size of the leading prefix to resolve.

        Returns:
            Tuple of (resolved prefix followed by the untouched remainder, usage).
        """
        ...
