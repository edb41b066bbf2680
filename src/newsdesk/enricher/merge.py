"""Merge enrichment records back into articles and rank them."""

import dataclasses
import math
from collections.abc import Mapping
from typing import Any

from newsdesk.data import Article, EnrichmentRecord


def _parse_score(value: Any) -> float | None:
    """Coerce a score to a finite float; reject bools, None and junk."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        score = float(value)
    elif isinstance(value, str):
        try:
            score = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return score if math.isfinite(score) else None


def parse_records(payload: Mapping[str, Any]) -> dict[str, EnrichmentRecord]:
    """Index the payload's ``items`` by URL.

    Items that are not objects or carry no URL are skipped. A repeated URL
    keeps its last record.
    """
    records: dict[str, EnrichmentRecord] = {}
    items = payload.get("items")
    if not isinstance(items, list):
        return records
    for item in items:
        if not isinstance(item, dict) or not item.get("url"):
            continue
        url = str(item["url"])
        summary = item.get("summary")
        records[url] = EnrichmentRecord(
            url=url,
            relevance_score=_parse_score(item.get("relevanceScore")),
            summary=summary if isinstance(summary, str) else None,
        )
    return records


def rank_by_relevance(articles: list[Article]) -> list[Article]:
    """Stable sort, highest score first; unscored articles count as 0."""
    return sorted(articles, key=lambda a: a.relevance_score or 0.0, reverse=True)


def apply_enrichment(articles: list[Article], payload: Mapping[str, Any]) -> list[Article]:
    """Apply scores and summaries to every matching article, then rank.

    Matching uses each article's own link, so articles outside the
    enrichment batch can still pick up a record.
    """
    records = parse_records(payload)
    merged: list[Article] = []
    for article in articles:
        record = records.get(article.link) if article.link else None
        if record is None:
            merged.append(article)
            continue
        changes: dict[str, Any] = {}
        if record.relevance_score is not None:
            changes["relevance_score"] = record.relevance_score
        if record.summary is not None:
            changes["summary"] = record.summary
        merged.append(dataclasses.replace(article, **changes))
    return rank_by_relevance(merged)


def search_summary_from(payload: Mapping[str, Any]) -> str:
    value = payload.get("searchSummary")
    return str(value) if value else ""
