from typing import Any, Dict, List

from pydantic import ValidationError

from trending_repos.domain.exceptions import MalformedResponse
from trending_repos.domain.models import RepositorySummary


class GitHubTranslator:
    """
    Anti-corruption layer that translates raw GitHub search responses into RepositorySummary instances.
    """

    @staticmethod
    def to_domain(raw_item: Dict[str, Any]) -> RepositorySummary:
        """
        Transforms a raw search item into a RepositorySummary.

        Args:
            raw_item (Dict[str, Any]): One element of the `items` array of a search response.

        Returns:
            RepositorySummary: The external-facing view of the repository.
        """
        if not isinstance(raw_item, dict):
            raise MalformedResponse()

        try:
            return RepositorySummary(
                full_name=raw_item.get('full_name'),
                html_url=raw_item.get('html_url'),
                stargazers_count=raw_item.get('stargazers_count') or 0,
                forks_count=raw_item.get('forks_count') or 0,
                language=raw_item.get('language'),
                description=raw_item.get('description'),
            )
        except ValidationError as e:
            raise MalformedResponse(
                f"Unexpected repository format from GitHub API: {e.error_count()} invalid field(s)."
            ) from e

    @classmethod
    def items_from_payload(cls, payload: Any) -> List[RepositorySummary]:
        """An empty `items` list is a valid result; a missing or non-list one is not."""
        if not isinstance(payload, dict):
            raise MalformedResponse()

        items = payload.get('items')
        if not isinstance(items, list):
            raise MalformedResponse()

        return [cls.to_domain(item) for item in items]
