"""Claude-based relevance scoring and summarization."""

import json
import logging
import os

import anthropic

from newsdesk.data import APICallUsage, Article, EnrichmentResult, Usage
from newsdesk.enricher.json_extract import extract_json_object
from newsdesk.enricher.merge import apply_enrichment, search_summary_from
from newsdesk.errors import EnrichmentServiceError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are a news research assistant. Given the user's keywords and a list of \
articles (title, publisher, publishedDateTime, snippet, url), produce:
1) A relevanceScore from 0 to 100 for each article, based on the user's keywords.
2) A 1-2 sentence summary for each article.

Return ONLY JSON in this shape:
{
  "searchSummary": "string",
  "items": [
    {"url": "string", "relevanceScore": number, "summary": "string"}
  ]
}

Rules:
- JSON only, no commentary.
- Copy each url exactly as given.
- Keep summaries factual and short.
- If a snippet is weak, infer carefully from the title and publisher only.\
"""


def _article_to_payload(article: Article) -> dict[str, str]:
    return {
        "title": article.title,
        "publisher": article.publisher,
        "publishedDateTime": article.published_date_time,
        "url": article.link,
        "snippet": article.snippet or "",
    }


class ClaudeEnricher:
    """Score and summarize the leading articles with a single Claude call.

    Without an API key the enricher is a no-op. An unparseable response
    leaves the articles untouched; a failed API call raises
    ``EnrichmentServiceError``.

    Args:
        model: Anthropic model to use.
        api_key: API key (defaults to CLAUDE_API_KEY env var).
        batch_size: Number of leading articles sent to the model.
        max_tokens: Response token limit.
    """

    def __init__(
        self,
        model: str = "claude-haiku-4-5-20251001",
        api_key: str | None = None,
        batch_size: int = 12,
        max_tokens: int = 4096,
    ) -> None:
        resolved_key = api_key or os.environ.get("CLAUDE_API_KEY")
        self._client = anthropic.AsyncAnthropic(api_key=resolved_key) if resolved_key else None
        self._model = model
        self._batch_size = batch_size
        self._max_tokens = max_tokens

    @property
    def enabled(self) -> bool:
        """Whether a credential is configured."""
        return self._client is not None

    async def enrich(
        self,
        articles: list[Article],
        keywords: str,
    ) -> tuple[EnrichmentResult, Usage]:
        if self._client is None:
            logger.info("No CLAUDE_API_KEY configured, skipping enrichment")
            return (EnrichmentResult(articles=list(articles)), Usage())
        if not articles:
            return (EnrichmentResult(articles=[]), Usage())

        batch = articles[: self._batch_size]
        user_input = {
            "keywords": keywords,
            "articles": [_article_to_payload(a) for a in batch],
        }
        user_prompt = f"INPUT:\n{json.dumps(user_input, ensure_ascii=False)}"

        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except anthropic.APIError as e:
            raise EnrichmentServiceError(f"Enrichment call failed: {e}") from e

        usage = Usage(
            api_calls=[
                APICallUsage(
                    model=self._model,
                    input_tokens=response.usage.input_tokens,
                    output_tokens=response.usage.output_tokens,
                    cache_creation_input_tokens=getattr(
                        response.usage, "cache_creation_input_tokens", 0
                    )
                    or 0,
                    cache_read_input_tokens=getattr(response.usage, "cache_read_input_tokens", 0)
                    or 0,
                ),
            ],
        )

        response_text = ""
        for block in response.content:
            if hasattr(block, "text"):
                response_text += block.text

        payload = extract_json_object(response_text)
        if payload is None:
            return (EnrichmentResult(articles=list(articles)), usage)

        enriched = apply_enrichment(articles, payload)
        return (
            EnrichmentResult(articles=enriched, search_summary=search_summary_from(payload)),
            usage,
        )
