"""Article enrichment module."""

from newsdesk.enricher.base import Enricher
from newsdesk.enricher.claude import ClaudeEnricher
from newsdesk.enricher.json_extract import extract_json_object, find_json_object
from newsdesk.enricher.merge import apply_enrichment, parse_records, rank_by_relevance
from newsdesk.enricher.noop import NoOpEnricher

__all__ = [
    "ClaudeEnricher",
    "Enricher",
    "NoOpEnricher",
    "apply_enrichment",
    "extract_json_object",
    "find_json_object",
    "parse_records",
    "rank_by_relevance",
]
