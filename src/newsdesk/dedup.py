"""Article deduplication."""

from collections.abc import Iterable

from newsdesk.data import Article


def dedup_key(article: Article) -> str:
    """Identity key: publisher URL, else feed permalink, else title.

    An empty string means the article has no usable key.
    """
    return article.publisher_url or article.google_news_url or article.title


def deduplicate(articles: Iterable[Article]) -> list[Article]:
    """Keep the first article per key and drop keyless ones, preserving order.

    Runs after link resolution so that distinct permalinks landing on the
    same publisher URL collapse into one article.
    """
    seen: set[str] = set()
    unique: list[Article] = []
    for article in articles:
        key = dedup_key(article)
        if not key or key in seen:
            continue
        seen.add(key)
        unique.append(article)
    return unique
