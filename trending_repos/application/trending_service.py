import logging
from datetime import date, datetime, timezone
from typing import Callable, List
import aiohttp

from trending_repos.application.date_window import cutoff_date, format_cutoff
from trending_repos.domain.models import RepositorySummary
from trending_repos.domain.validation import validate_query
from trending_repos.infrastructure.acl import GitHubTranslator
from trending_repos.infrastructure.github_client import GitHubSearchClient

logger = logging.getLogger(__name__)

SORT_KEY = "stars"
SORT_ORDER = "desc"


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class TrendingService:
    """
    Looks up the most-starred repositories created within a recent window.

    One validated query maps to exactly one outbound search request: no
    pagination, no retries, no caching.
    """

    def __init__(
            self,
            github_client: GitHubSearchClient,
            clock: Callable[[], date] = _utc_today,
    ):
        self.github_client = github_client
        self.clock = clock

    @staticmethod
    def _build_search_query(cutoff: str) -> str:
        return f"created:>{cutoff}"

    async def fetch(self, duration="week", limit=10) -> List[RepositorySummary]:
        """
        Fetches up to `limit` repositories created after the cutoff for `duration`,
        sorted by stars descending.

        Raises:
            QueryValidationError: Before any network I/O, for a bad duration or limit.
            UpstreamError: When GitHub fails or answers with an unexpected shape.
        """
        query = validate_query(duration, limit)
        cutoff = format_cutoff(cutoff_date(query.duration, today=self.clock()))
        search_query = self._build_search_query(cutoff)

        logger.info(f"Searching '{search_query}' (limit {query.limit}).")

        async with aiohttp.ClientSession() as session:
            payload = await self.github_client.search_repositories(
                session,
                query=search_query,
                sort=SORT_KEY,
                order=SORT_ORDER,
                per_page=query.limit,
            )

        repositories = GitHubTranslator.items_from_payload(payload)
        logger.info(f"Found {len(repositories)} repositories created after {cutoff}.")
        return repositories
