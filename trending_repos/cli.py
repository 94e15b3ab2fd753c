import argparse
import asyncio
import sys
from typing import List, Optional, Sequence

from rich.console import Console
from rich.text import Text

from trending_repos.application.trending_service import TrendingService
from trending_repos.config import configure_logging, load_client_settings
from trending_repos.domain.exceptions import TrendingReposException
from trending_repos.domain.models import Duration, RepositorySummary
from trending_repos.domain.validation import validate_query
from trending_repos.infrastructure.github_client import GitHubSearchClient

DEFAULT_DURATION = Duration.WEEK.value
DEFAULT_LIMIT = 10


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trending-repos",
        usage="trending-repos [options]",
        description="Show the most-starred GitHub repositories created recently.",
    )
    parser.add_argument(
        "-d", "--duration",
        default=DEFAULT_DURATION,
        help=f"Duration to fetch trending repositories for ({'|'.join(Duration.values())})",
    )
    # Kept as a string so the shared validator reports bad values with its own message
    parser.add_argument(
        "-l", "--limit",
        default=str(DEFAULT_LIMIT),
        help="Number of repositories to display (1-100)",
    )
    return parser


def render_repositories(console: Console, repositories: List[RepositorySummary]) -> None:
    if not repositories:
        console.print("No repositories found for this duration.", style="yellow")
        return

    console.print("Trending Repositories:\n", style="bold green")

    for rank, repo in enumerate(repositories, start=1):
        console.print(
            Text.assemble(
                (f"{rank}. {repo.full_name}", "bold"),
                (f"  ⭐ {repo.stargazers_count}  🍴 {repo.forks_count}", "bright_black"),
            ),
            soft_wrap=True,
        )
        description = (
            Text(repo.description) if repo.description
            else Text("No description", style="bright_black")
        )
        console.print(Text("   ") + description, soft_wrap=True)
        console.print(
            Text.assemble(
                "   ",
                (repo.html_url, "cyan"),
                "  ",
                (repo.language or "Unknown", "magenta"),
            ),
            soft_wrap=True,
        )
        console.print()


async def run(service: TrendingService, duration: str, limit: int, console: Console) -> None:
    console.print(
        f"\nFetching trending repositories (duration: {duration}, limit: {limit})...\n",
        style="blue",
        highlight=False,
    )
    repositories = await service.fetch(duration, limit)
    render_repositories(console, repositories)


def main(argv: Optional[Sequence[str]] = None, service: Optional[TrendingService] = None) -> int:
    """Runs the CLI and returns the process exit code."""
    args = build_parser().parse_args(argv)
    console = Console(highlight=False)
    err_console = Console(stderr=True, highlight=False)

    try:
        query = validate_query(args.duration, args.limit)
    except TrendingReposException as e:
        err_console.print(str(e), style="red", markup=False)
        return 1

    if service is None:
        settings = load_client_settings()
        configure_logging(settings.log_level or "WARNING", stream=sys.stderr)
        service = TrendingService(github_client=GitHubSearchClient(api_url=settings.github_api_url))

    try:
        asyncio.run(run(service, query.duration.value, query.limit, console))
    except TrendingReposException as e:
        err_console.print(str(e), style="red", markup=False)
        return 1
    except KeyboardInterrupt:
        err_console.print("Interrupted by user.", style="yellow", markup=False)
        return 1

    return 0


def entrypoint() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entrypoint()
