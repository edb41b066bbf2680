"""Core data models for newsdesk."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SearchRequest:
    """A keyword search with optional date bounds."""

    keywords: str
    date_from: str | None = None
    date_to: str | None = None
    deep_research: bool = False


@dataclass(frozen=True)
class Article:
    """A normalized news article.

    ``publisher_url`` stays empty until link resolution; ``summary`` and
    ``relevance_score`` stay empty until enrichment.
    """

    title: str
    publisher: str = ""
    published_date_time: str = ""
    google_news_url: str = ""
    publisher_url: str = ""
    snippet: str = ""
    summary: str = ""
    relevance_score: float | None = None

    @property
    def link(self) -> str:
        """Best known URL: the resolved publisher URL, else the feed permalink."""
        return self.publisher_url or self.google_news_url

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": str(self.title or ""),
            "publisher": str(self.publisher or ""),
            "publishedDateTime": str(self.published_date_time or ""),
            "publisherUrl": str(self.publisher_url or ""),
            "googleNewsUrl": str(self.google_news_url or ""),
            "snippet": str(self.snippet or ""),
            "summary": str(self.summary or ""),
            "relevanceScore": (
                None if self.relevance_score is None else float(self.relevance_score)
            ),
        }


@dataclass(frozen=True)
class SearchResponse:
    """Final pipeline output."""

    articles: list[Article]
    search_summary: str
    total_sources: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "articles": [a.to_dict() for a in self.articles],
            "searchSummary": self.search_summary,
            "totalSources": self.total_sources,
        }


@dataclass(frozen=True)
class Resolution:
    """Outcome of one redirect resolution attempt.

    ``degraded`` marks a failed attempt whose ``final_url`` is just the
    original URL.
    """

    original_url: str
    final_url: str
    degraded: bool = False

    @property
    def url(self) -> str:
        return self.final_url


@dataclass(frozen=True)
class EnrichmentRecord:
    """Per-URL score and summary returned by the enrichment service."""

    url: str
    relevance_score: float | None = None
    summary: str | None = None


@dataclass(frozen=True)
class EnrichmentResult:
    """Articles after enrichment plus the service's overall summary."""

    articles: list[Article]
    search_summary: str = ""


@dataclass(frozen=True)
class APICallUsage:
    """Usage from a single API call, with the model for reporting."""

    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    cache_creation_input_tokens: int = 0
    cache_read_input_tokens: int = 0


@dataclass
class Usage:
    """Accumulated external usage across pipeline stages."""

    api_calls: list[APICallUsage] = field(default_factory=list)
    feed_requests: int = 0
    resolve_requests: int = 0

    @property
    def input_tokens(self) -> int:
        return sum(c.input_tokens for c in self.api_calls)

    @property
    def output_tokens(self) -> int:
        return sum(c.output_tokens for c in self.api_calls)

    @property
    def cache_creation_input_tokens(self) -> int:
        return sum(c.cache_creation_input_tokens for c in self.api_calls)

    @property
    def cache_read_input_tokens(self) -> int:
        return sum(c.cache_read_input_tokens for c in self.api_calls)

    def __add__(self, other: "Usage") -> "Usage":
        return Usage(
            api_calls=self.api_calls + other.api_calls,
            feed_requests=self.feed_requests + other.feed_requests,
            resolve_requests=self.resolve_requests + other.resolve_requests,
        )

    def __iadd__(self, other: "Usage") -> "Usage":
        self.api_calls.extend(other.api_calls)
        self.feed_requests += other.feed_requests
        self.resolve_requests += other.resolve_requests
        return self
