"""Pydantic configuration models for newsdesk components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from newsdesk.feed.google_news import DEFAULT_USER_AGENT as FEED_USER_AGENT
from newsdesk.query.builder import GOOGLE_NEWS_BASE_URL
from newsdesk.resolver.redirect import DEFAULT_USER_AGENT as RESOLVER_USER_AGENT

# ============================================================
# Feed Config
# ============================================================


class FeedConfig(BaseModel):
    """Configuration for the Google News feed fetcher."""

    base_url: str = GOOGLE_NEWS_BASE_URL
    hl: str = "en-US"
    gl: str = "US"
    ceid: str = "US:en"
    timeout_seconds: float = Field(default=15.0, gt=0)
    user_agent: str = FEED_USER_AGENT

    model_config = {"frozen": True}


# ============================================================
# Resolver Config
# ============================================================


class ResolverConfig(BaseModel):
    """Configuration for redirect link resolution."""

    standard_limit: int = Field(default=8, ge=0)
    deep_limit: int = Field(default=12, ge=0)
    timeout_seconds: float = Field(default=10.0, gt=0)
    user_agent: str = RESOLVER_USER_AGENT

    model_config = {"frozen": True}


# ============================================================
# Enricher Configs
# ============================================================


class ClaudeEnricherConfig(BaseModel):
    """Configuration for ClaudeEnricher."""

    type: Literal["claude"] = "claude"
    model: str = "claude-haiku-4-5-20251001"
    batch_size: int = Field(default=12, gt=0)
    max_tokens: int = Field(default=4096, gt=0)

    model_config = {"frozen": True}


class NoOpEnricherConfig(BaseModel):
    """Pass-through enricher (no scoring or summaries)."""

    type: Literal["noop"] = "noop"

    model_config = {"frozen": True}


EnricherConfig = Annotated[
    ClaudeEnricherConfig | NoOpEnricherConfig,
    Field(discriminator="type"),
]


# ============================================================
# Pipeline Config
# ============================================================


class PipelineConfig(BaseModel):
    """Result caps for each research mode."""

    standard_cap: int = Field(default=12, gt=0)
    deep_cap: int = Field(default=20, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for intermediate pipeline logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsdeskConfig(BaseModel):
    """Root configuration for newsdesk."""

    feed: FeedConfig = Field(default_factory=FeedConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    enricher: ClaudeEnricherConfig | NoOpEnricherConfig = Field(
        default_factory=ClaudeEnricherConfig, discriminator="type"
    )
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
