"""Pipeline protocol for keyword news search."""

from typing import Protocol

from newsdesk.data import SearchRequest, SearchResponse, Usage


class Pipeline(Protocol):
    """Interface for end-to-end news search pipelines."""

    async def run(self, request: SearchRequest) -> tuple[SearchResponse, Usage]:
        """Execute a search.

        Args:
            request: Keywords, optional date bounds and research mode.

        Returns:
            Tuple of (ranked, capped response, usage).
        """
        ...
