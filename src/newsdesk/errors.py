"""Exceptions raised by the search pipeline.

Only fatal conditions are exceptions. Per-link resolution failures and
unparseable enrichment output degrade silently and show up in the data.
"""


class NewsdeskError(Exception):
    """Base class for fatal pipeline errors."""


class KeywordValidationError(NewsdeskError, ValueError):
    """Keywords are missing or shorter than the minimum length."""


class FetchError(NewsdeskError):
    """The feed could not be retrieved or parsed."""


class EnrichmentServiceError(NewsdeskError):
    """The call to the enrichment service itself failed."""
