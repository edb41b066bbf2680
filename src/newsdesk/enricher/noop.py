"""No-op enricher that passes articles through untouched."""

from newsdesk.data import Article, EnrichmentResult, Usage


class NoOpEnricher:
    """Enricher that returns its input unchanged with no summary.

    No API calls are made. Deep-research searches then differ from standard
    ones only in their larger caps.
    """

    async def enrich(
        self,
        articles: list[Article],
        keywords: str,
    ) -> tuple[EnrichmentResult, Usage]:
        return (EnrichmentResult(articles=list(articles)), Usage())
