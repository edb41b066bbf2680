"""Keyword search pipeline implementation."""

import logging
import time

from newsdesk.data import Article, SearchRequest, SearchResponse, Usage
from newsdesk.dedup import deduplicate
from newsdesk.enricher.base import Enricher
from newsdesk.errors import KeywordValidationError
from newsdesk.feed.base import FeedFetcher
from newsdesk.feed.normalize import normalize_entries
from newsdesk.query.builder import GOOGLE_NEWS_BASE_URL, build_feed_url, build_search_query
from newsdesk.resolver.base import LinkResolver
from newsdesk.run_logger import RunLogger

logger = logging.getLogger(__name__)

MIN_KEYWORD_LENGTH = 2


def validate_keywords(keywords: str | None) -> str:
    """Return trimmed keywords or raise if they are too short."""
    if not isinstance(keywords, str) or len(keywords.strip()) < MIN_KEYWORD_LENGTH:
        raise KeywordValidationError(f"Please enter keywords ({MIN_KEYWORD_LENGTH}+ chars).")
    return keywords.strip()


def count_sources(articles: list[Article]) -> int:
    """Number of distinct publishers, case-insensitive, blanks excluded."""
    return len({a.publisher.strip().lower() for a in articles if a.publisher.strip()})


def default_search_summary(
    keywords: str,
    date_from: str | None = None,
    date_to: str | None = None,
) -> str:
    """Human-readable summary used when enrichment produced none."""
    prefix = f'Showing results for "{keywords}"'
    if date_from and date_to:
        return f"{prefix} from {date_from} to {date_to}."
    if date_from:
        return f"{prefix} since {date_from}."
    if date_to:
        return f"{prefix} until {date_to}."
    return f"{prefix} (recent-first)."


class SearchPipeline:
    """Fetch, normalize, resolve, deduplicate and optionally enrich news.

    Flow:
    1. Validate keywords and build the feed URL
    2. Fetch and normalize the feed (fatal on failure)
    3. Resolve publisher links for a leading prefix concurrently
    4. Deduplicate and truncate to the mode's cap
    5. In deep-research mode, score/summarize and re-rank

    Args:
        fetcher: Feed fetcher.
        resolver: Link resolver.
        enricher: Enricher used in deep-research mode.
        standard_resolve_limit: Links resolved in standard mode.
        deep_resolve_limit: Links resolved in deep-research mode.
        standard_cap: Max articles returned in standard mode.
        deep_cap: Max articles returned in deep-research mode.
        feed_base_url: Feed provider base URL.
        hl: Interface language parameter.
        gl: Country parameter.
        ceid: Edition parameter.
        run_logger: Optional RunLogger for intermediate result logging.
    """

    def __init__(
        self,
        fetcher: FeedFetcher,
        resolver: LinkResolver,
        enricher: Enricher,
        *,
        standard_resolve_limit: int = 8,
        deep_resolve_limit: int = 12,
        standard_cap: int = 12,
        deep_cap: int = 20,
        feed_base_url: str = GOOGLE_NEWS_BASE_URL,
        hl: str = "en-US",
        gl: str = "US",
        ceid: str = "US:en",
        run_logger: RunLogger | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._resolver = resolver
        self._enricher = enricher
        self._standard_resolve_limit = standard_resolve_limit
        self._deep_resolve_limit = deep_resolve_limit
        self._standard_cap = standard_cap
        self._deep_cap = deep_cap
        self._feed_base_url = feed_base_url
        self._hl = hl
        self._gl = gl
        self._ceid = ceid
        self._run_logger = run_logger

    async def run(self, request: SearchRequest) -> tuple[SearchResponse, Usage]:
        """Execute a search.

        Args:
            request: Keywords, optional date bounds and research mode.

        Returns:
            Tuple of (response, usage).

        Raises:
            KeywordValidationError: Keywords shorter than two characters.
            FetchError: The feed could not be retrieved or parsed.
            EnrichmentServiceError: The enrichment call failed in deep mode.
        """
        keywords = validate_keywords(request.keywords)
        deep = request.deep_research

        if self._run_logger:
            self._run_logger.start_run("search", request)

        total_usage = Usage()

        # Step 1: Build query and fetch the feed
        query = build_search_query(keywords, request.date_from, request.date_to)
        url = build_feed_url(
            query, base_url=self._feed_base_url, hl=self._hl, gl=self._gl, ceid=self._ceid
        )
        logger.info(f"Searching feed for: {query}")

        t0 = time.monotonic()
        entries = await self._fetcher.fetch(url)
        total_usage += Usage(feed_requests=1)
        self._log_stage(
            "fetch", self._fetcher, {"url": url}, {"entry_count": len(entries)}, None, t0
        )

        # Step 2: Normalize
        t0 = time.monotonic()
        articles = normalize_entries(entries)
        self._log_stage(
            "normalize", "normalize_entries", {"entry_count": len(entries)}, articles, None, t0
        )

        # Step 3: Resolve publisher links for the leading prefix
        limit = self._deep_resolve_limit if deep else self._standard_resolve_limit
        t0 = time.monotonic()
        articles, resolve_usage = await self._resolver.resolve(articles, limit=limit)
        total_usage += resolve_usage
        self._log_stage(
            "resolve", self._resolver, {"limit": limit}, articles, resolve_usage, t0
        )

        # Step 4: Deduplicate and cap
        cap = self._deep_cap if deep else self._standard_cap
        t0 = time.monotonic()
        pre_dedup_count = len(articles)
        articles = deduplicate(articles)[:cap]
        self._log_stage(
            "deduplicate",
            "deduplicate",
            {"article_count": pre_dedup_count, "cap": cap},
            {"article_count": len(articles)},
            None,
            t0,
        )

        total_sources = count_sources(articles)
        search_summary = ""

        # Step 5: Enrich (deep research only)
        if deep and articles:
            t0 = time.monotonic()
            result, enrich_usage = await self._enricher.enrich(articles, keywords)
            total_usage += enrich_usage
            articles = result.articles
            search_summary = result.search_summary
            total_sources = count_sources(articles)
            self._log_stage(
                "enrich",
                self._enricher,
                {"article_count": len(articles)},
                {"search_summary": search_summary, "articles": articles},
                enrich_usage,
                t0,
            )

        if not search_summary:
            search_summary = default_search_summary(keywords, request.date_from, request.date_to)

        logger.info(f"Returning {len(articles)} articles from {total_sources} sources")

        if self._run_logger:
            self._run_logger.finish_run(articles, total_usage)

        response = SearchResponse(
            articles=articles,
            search_summary=search_summary,
            total_sources=total_sources,
        )
        return (response, total_usage)

    def _log_stage(
        self,
        stage: str,
        component: object,
        input_data: object,
        output_data: object,
        usage: Usage | None,
        started: float,
    ) -> None:
        if not self._run_logger:
            return
        name = component if isinstance(component, str) else type(component).__name__
        self._run_logger.log_stage(
            stage=stage,
            component=name,
            input_data=input_data,
            output_data=output_data,
            usage=usage,
            duration_seconds=time.monotonic() - started,
        )
