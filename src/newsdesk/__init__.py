"""newsdesk: keyword news search over Google News with optional AI enrichment."""

from newsdesk.config import NewsdeskConfig, create_from_config, load_config
from newsdesk.data import (
    APICallUsage,
    Article,
    EnrichmentRecord,
    EnrichmentResult,
    Resolution,
    SearchRequest,
    SearchResponse,
    Usage,
)
from newsdesk.dedup import dedup_key, deduplicate
from newsdesk.enricher import ClaudeEnricher, Enricher, NoOpEnricher, extract_json_object
from newsdesk.errors import (
    EnrichmentServiceError,
    FetchError,
    KeywordValidationError,
    NewsdeskError,
)
from newsdesk.feed import FeedFetcher, GoogleNewsFeedFetcher, normalize_entries, normalize_entry
from newsdesk.pipeline import Pipeline, SearchPipeline
from newsdesk.query import build_feed_url, build_search_query
from newsdesk.resolver import LinkResolver, RedirectLinkResolver
from newsdesk.run_logger import RunLogger

__all__ = [
    # Models
    "APICallUsage",
    "Article",
    "EnrichmentRecord",
    "EnrichmentResult",
    "Resolution",
    "SearchRequest",
    "SearchResponse",
    "Usage",
    # Errors
    "EnrichmentServiceError",
    "FetchError",
    "KeywordValidationError",
    "NewsdeskError",
    # Functions
    "build_feed_url",
    "build_search_query",
    "dedup_key",
    "deduplicate",
    "extract_json_object",
    "normalize_entries",
    "normalize_entry",
    # Protocols
    "Enricher",
    "FeedFetcher",
    "LinkResolver",
    "Pipeline",
    # Components
    "ClaudeEnricher",
    "GoogleNewsFeedFetcher",
    "NoOpEnricher",
    "RedirectLinkResolver",
    "SearchPipeline",
    # Logging
    "RunLogger",
    # Config
    "NewsdeskConfig",
    "create_from_config",
    "load_config",
]
