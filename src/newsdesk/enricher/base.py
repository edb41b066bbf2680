"""Protocol for article enrichment."""

from typing import Protocol

from newsdesk.data import Article, EnrichmentResult, Usage


class Enricher(Protocol):
    """Interface for scoring and summarizing articles."""

    async def enrich(
        self,
        articles: list[Article],
        keywords: str,
    ) -> tuple[EnrichmentResult, Usage]:
        """Score and summarize articles against the user's keywords.

        Args:
            articles: Deduplicated, capped articles in current order.
            keywords: The user's search keywords.

        Returns:
            Tuple of (possibly reordered articles with overall summary, usage).
        """
        ...
