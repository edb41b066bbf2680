"""Pipeline module for keyword news search."""

from newsdesk.pipeline.base import Pipeline
from newsdesk.pipeline.search import (
    SearchPipeline,
    count_sources,
    default_search_summary,
    validate_keywords,
)

__all__ = [
    "Pipeline",
    "SearchPipeline",
    "count_sources",
    "default_search_summary",
    "validate_keywords",
]
