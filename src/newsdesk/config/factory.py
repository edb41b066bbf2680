"""Factory functions to create components from configuration."""

from pathlib import Path

from newsdesk.config.models import (
    ClaudeEnricherConfig,
    EnricherConfig,
    FeedConfig,
    NewsdeskConfig,
    NoOpEnricherConfig,
    ResolverConfig,
)
from newsdesk.enricher.base import Enricher
from newsdesk.enricher.claude import ClaudeEnricher
from newsdesk.enricher.noop import NoOpEnricher
from newsdesk.feed.google_news import GoogleNewsFeedFetcher
from newsdesk.pipeline.search import SearchPipeline
from newsdesk.resolver.redirect import RedirectLinkResolver
from newsdesk.run_logger import RunLogger


def create_fetcher(config: FeedConfig) -> GoogleNewsFeedFetcher:
    return GoogleNewsFeedFetcher(timeout=config.timeout_seconds, user_agent=config.user_agent)


def create_resolver(config: ResolverConfig) -> RedirectLinkResolver:
    return RedirectLinkResolver(timeout=config.timeout_seconds, user_agent=config.user_agent)


def create_enricher(config: EnricherConfig) -> Enricher:
    """Create an enricher from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, ClaudeEnricherConfig):
        return ClaudeEnricher(
            model=config.model,
            batch_size=config.batch_size,
            max_tokens=config.max_tokens,
        )
    if isinstance(config, NoOpEnricherConfig):
        return NoOpEnricher()
    msg = f"Unknown enricher config type: {type(config)}"
    raise ValueError(msg)


def create_pipeline(
    config: NewsdeskConfig,
    run_logger: RunLogger | None = None,
) -> SearchPipeline:
    """Create the search pipeline from root config."""
    return SearchPipeline(
        fetcher=create_fetcher(config.feed),
        resolver=create_resolver(config.resolver),
        enricher=create_enricher(config.enricher),
        standard_resolve_limit=config.resolver.standard_limit,
        deep_resolve_limit=config.resolver.deep_limit,
        standard_cap=config.pipeline.standard_cap,
        deep_cap=config.pipeline.deep_cap,
        feed_base_url=config.feed.base_url,
        hl=config.feed.hl,
        gl=config.feed.gl,
        ceid=config.feed.ceid,
        run_logger=run_logger,
    )


def create_from_config(
    config: NewsdeskConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[SearchPipeline, RunLogger | None]:
    """Create a complete pipeline from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (pipeline, run_logger). run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    pipeline = create_pipeline(config, run_logger=run_logger)
    return (pipeline, run_logger)
