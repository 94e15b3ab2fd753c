class TrendingReposException(Exception):
    """Base exception for all trending-repos errors."""
    pass


class QueryValidationError(TrendingReposException):
    """Raised when the caller supplied an unusable duration or limit."""
    pass


class InvalidDuration(QueryValidationError):
    def __init__(self, duration, valid_options):
        self.duration = duration
        super().__init__(
            f"Invalid duration: {duration}. Valid options are: {', '.join(valid_options)}"
        )


class InvalidLimit(QueryValidationError):
    def __init__(self, limit):
        self.limit = limit
        super().__init__(f"Invalid limit: {limit}. It must be between 1 and 100.")


class UpstreamError(TrendingReposException):
    """Raised when the GitHub search API could not produce a usable result."""
    pass


class UpstreamHttpError(UpstreamError):
    """Raised when GitHub answers with a non-success status."""
    def __init__(self, status: int, message: str):
        self.status = status
        super().__init__(f"GitHub API error ({status}): {message}")


class UpstreamUnreachable(UpstreamError):
    """Raised when no response was received (connection failure or timeout)."""
    def __init__(self, reason: str = ""):
        self.reason = reason
        message = "No response received from GitHub API."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class MalformedResponse(UpstreamError):
    def __init__(self, message: str = "Unexpected response format from GitHub API."):
        super().__init__(message)
