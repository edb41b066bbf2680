"""Data models for newsdesk."""

from newsdesk.data.models import (
    APICallUsage,
    Article,
    EnrichmentRecord,
    EnrichmentResult,
    Resolution,
    SearchRequest,
    SearchResponse,
    Usage,
)

__all__ = [
    "APICallUsage",
    "Article",
    "EnrichmentRecord",
    "EnrichmentResult",
    "Resolution",
    "SearchRequest",
    "SearchResponse",
    "Usage",
]
