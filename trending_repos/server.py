import logging
import sys
from typing import Optional

from aiohttp import web

from trending_repos.application.trending_service import TrendingService
from trending_repos.config import ConfigurationError, configure_logging, load_settings
from trending_repos.domain.exceptions import QueryValidationError, TrendingReposException
from trending_repos.domain.validation import validate_query
from trending_repos.infrastructure.github_client import GitHubSearchClient

logger = logging.getLogger(__name__)

SERVICE_KEY = web.AppKey("trending_service", TrendingService)

DEFAULT_DURATION = "week"
DEFAULT_LIMIT = "10"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,HEAD,OPTIONS",
}


@web.middleware
async def cors_middleware(request: web.Request, handler):
    """Allows cross-origin requests from any origin, including preflights."""
    if request.method == "OPTIONS":
        response = web.Response(status=204)
        requested = request.headers.get("Access-Control-Request-Headers")
        if requested:
            response.headers["Access-Control-Allow-Headers"] = requested
    else:
        try:
            response = await handler(request)
        except web.HTTPException as e:
            # Not-found and method-not-allowed responses still need the CORS headers
            e.headers.update(CORS_HEADERS)
            raise

    response.headers.update(CORS_HEADERS)
    return response


async def get_trending(request: web.Request) -> web.Response:
    duration = request.query.get("duration") or DEFAULT_DURATION
    limit = request.query.get("limit") or DEFAULT_LIMIT

    try:
        query = validate_query(duration, limit)
    except QueryValidationError as e:
        return web.json_response({"error": str(e)}, status=400)

    service = request.app[SERVICE_KEY]
    try:
        repositories = await service.fetch(query.duration.value, query.limit)
    except QueryValidationError as e:
        return web.json_response({"error": str(e)}, status=400)
    except TrendingReposException as e:
        logger.error(str(e))
        return web.json_response({"error": str(e)}, status=500)
    except Exception:
        logger.exception("Unexpected error while fetching trending repositories.")
        return web.json_response({"error": "Internal server error"}, status=500)

    return web.json_response({
        "duration": query.duration.value,
        "limit": query.limit,
        "count": len(repositories),
        "items": [repo.model_dump() for repo in repositories],
    })


def create_app(service: Optional[TrendingService] = None) -> web.Application:
    app = web.Application(middlewares=[cors_middleware])
    app[SERVICE_KEY] = service or TrendingService(github_client=GitHubSearchClient())
    app.router.add_get("/api/trending", get_trending)
    return app


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        configure_logging()
        logger.error(str(e))
        sys.exit(1)

    configure_logging(settings.log_level)

    service = TrendingService(github_client=GitHubSearchClient(api_url=settings.github_api_url))
    app = create_app(service)

    logger.info(f"Server is running on http://localhost:{settings.port}")
    web.run_app(app, host=settings.host, port=settings.port, print=None)


if __name__ == "__main__":
    main()
