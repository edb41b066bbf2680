"""Configuration module for newsdesk."""

from newsdesk.config.factory import create_from_config
from newsdesk.config.loader import get_default_config_path, load_config
from newsdesk.config.models import (
    ClaudeEnricherConfig,
    EnricherConfig,
    FeedConfig,
    LoggingConfig,
    NewsdeskConfig,
    NoOpEnricherConfig,
    PipelineConfig,
    ResolverConfig,
)

__all__ = [
    "ClaudeEnricherConfig",
    "EnricherConfig",
    "FeedConfig",
    "LoggingConfig",
    "NewsdeskConfig",
    "NoOpEnricherConfig",
    "PipelineConfig",
    "ResolverConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
