import math
import re
from typing import Any

from trending_repos.domain.exceptions import InvalidDuration, InvalidLimit
from trending_repos.domain.models import Duration, TrendingQuery

MIN_LIMIT = 1
MAX_LIMIT = 100

# ASCII digits with an optional minus sign
LIMIT_PATTERN = re.compile(r"-?[0-9]+", re.ASCII)


def validate_duration(value: Any) -> Duration:
    """Normalizes a duration token to lowercase and checks it against `Duration`."""
    if not isinstance(value, str):
        raise InvalidDuration(value, Duration.values())

    normalized = value.strip().lower()
    if normalized not in Duration.values():
        raise InvalidDuration(normalized, Duration.values())
    return Duration(normalized)


def validate_limit(value: Any) -> int:
    """
    Accepts an int, or a string holding a base-10 integer, in [MIN_LIMIT, MAX_LIMIT].

    Floats are rejected even when integral; booleans are not treated as ints.
    """
    if isinstance(value, bool):
        raise InvalidLimit(value)

    if isinstance(value, int):
        limit = value
    elif isinstance(value, str):
        text = value.strip()
        if not LIMIT_PATTERN.fullmatch(text):
            raise InvalidLimit(value)
        limit = int(text, 10)
    else:
        if isinstance(value, float) and math.isnan(value):
            raise InvalidLimit("NaN")
        raise InvalidLimit(value)

    if limit < MIN_LIMIT or limit > MAX_LIMIT:
        raise InvalidLimit(limit)
    return limit


def validate_query(duration: Any, limit: Any) -> TrendingQuery:
    return TrendingQuery(
        duration=validate_duration(duration),
        limit=validate_limit(limit),
    )
