"""Publisher link resolution."""

from newsdesk.resolver.base import LinkResolver
from newsdesk.resolver.redirect import RedirectLinkResolver

__all__ = ["LinkResolver", "RedirectLinkResolver"]
