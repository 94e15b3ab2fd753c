import aiohttp
import asyncio
import logging
from typing import Any, Dict

from trending_repos.domain.exceptions import (
    MalformedResponse,
    UpstreamHttpError,
    UpstreamUnreachable,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
SEARCH_PATH = "/search/repositories"
REQUEST_TIMEOUT = aiohttp.ClientTimeout(total=10)
USER_AGENT = "trending-repos-cli"


class GitHubSearchClient:
    """
    Client for the GitHub REST repository search endpoint.
    Issues exactly one request per call; failures are mapped to domain errors, never retried.
    """

    def __init__(self, api_url: str = DEFAULT_API_URL):
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": USER_AGENT,
        }
        self.api_url = api_url.rstrip("/")

    @property
    def search_url(self) -> str:
        return f"{self.api_url}{SEARCH_PATH}"

    async def search_repositories(
        self,
        session: aiohttp.ClientSession,
        query: str,
        sort: str = "stars",
        order: str = "desc",
        per_page: int = 10,
    ) -> Dict[str, Any]:
        """
        Runs a single page of a repository search.

        Returns:
            The decoded JSON payload, unvalidated.

        Raises:
            UpstreamHttpError: GitHub answered with a non-success status.
            UpstreamUnreachable: No response arrived (network failure or timeout).
            MalformedResponse: The body was not JSON.
        """
        params = {
            "q": query,
            "sort": sort,
            "order": order,
            "per_page": str(per_page),
        }

        try:
            async with session.get(
                self.search_url, params=params, headers=self.headers, timeout=REQUEST_TIMEOUT
            ) as response:
                if response.status >= 400:
                    message = await self._error_message(response)
                    logger.warning(f"GitHub search failed with status {response.status}: {message}")
                    raise UpstreamHttpError(response.status, message)

                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    logger.warning(f"GitHub search returned a non-JSON body: {e}")
                    raise MalformedResponse() from e

        except asyncio.TimeoutError as e:
            logger.warning(f"GitHub search timed out after {REQUEST_TIMEOUT.total:.0f}s.")
            raise UpstreamUnreachable(f"Request timed out after {REQUEST_TIMEOUT.total:.0f} seconds.") from e
        except aiohttp.ClientError as e:
            logger.warning(f"GitHub search request failed: {e}")
            raise UpstreamUnreachable(str(e)) from e

    @staticmethod
    async def _error_message(response) -> str:
        # GitHub error bodies look like {"message": "...", "documentation_url": "..."}
        try:
            data = await response.json(content_type=None)
        except (ValueError, aiohttp.ClientError):
            data = None

        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return response.reason or "Unknown error"
