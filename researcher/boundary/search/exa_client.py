"""
Exa search client.

Async facade over the synchronous exa_py SDK. Blocking SDK calls are pushed
to the threadpool; SDK failures are re-raised as SearchProviderError.

Dependencies: exa_py, fastapi.concurrency
System role: Web search boundary
"""

import logging
from typing import Any

from exa_py import Exa
from fastapi.concurrency import run_in_threadpool

from researcher.boundary.search.search_schemas import SearchHit
from researcher.core.exceptions import SearchProviderError

logger = logging.getLogger(__name__)


class ExaSearchClient:
    """Thin async wrapper around the Exa SDK."""

    def __init__(self, api_key: str | None, client: Exa | None = None) -> None:
        """
        Initialize the client.

        Args:
            api_key: Exa API key
            client: Optional prebuilt SDK client (tests inject a mock)
        """
        self._api_key = api_key
        self._client = client

    @property
    def client(self) -> Exa:
        """SDK client, created on first use so a missing key fails per request."""
        if self._client is None:
            if not self._api_key:
                raise SearchProviderError("EXA_API_KEY is not configured", operation="init")
            self._client = Exa(api_key=self._api_key)
        return self._client

    async def search(self, query: str, **options: Any) -> list[SearchHit]:
        """
        Run a search without page contents.

        Args:
            query: Search query
            **options: Provider options (type, num_results, include_domains, ...)

        Returns:
            list[SearchHit]: Search hits
        """
        return await self._call("search", query, **options)

    async def search_and_contents(self, query: str, **options: Any) -> list[SearchHit]:
        """
        Run a search that also returns text and/or structured summaries.

        Args:
            query: Search query
            **options: Provider options (text, summary, category, ...)

        Returns:
            list[SearchHit]: Search hits with contents
        """
        return await self._call("search_and_contents", query, **options)

    async def find_similar_and_contents(self, url: str, **options: Any) -> list[SearchHit]:
        """
        Find pages similar to a URL, with contents.

        Args:
            url: Reference page URL
            **options: Provider options

        Returns:
            list[SearchHit]: Similar pages
        """
        return await self._call("find_similar_and_contents", url, **options)

    async def _call(self, operation: str, argument: str, **options: Any) -> list[SearchHit]:
        logger.info(f"{__name__}:{operation} - START argument={argument!r}")
        client = self.client
        try:
            response = await run_in_threadpool(getattr(client, operation), argument, **options)
        except Exception as e:
            logger.error(f"{__name__}:{operation} - {type(e).__name__}: {e}")
            raise SearchProviderError(str(e), operation=operation) from e

        hits = [SearchHit.from_result(result) for result in response.results or []]
        logger.info(f"{__name__}:{operation} - returned {len(hits)} results")
        return hits
