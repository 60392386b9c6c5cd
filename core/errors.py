from typing import Optional


class SearchError(Exception):
    """Base class for every failure the search pipeline can report."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RateLimitExceeded(SearchError):
    """GitHub reported no query budget left for this token."""

    def __init__(self, message: str = "GitHub rate limit exceeded", reset_at: Optional[str] = None):
        super().__init__(message)
        self.reset_at = reset_at


class EmptyResult(SearchError):
    """The search matched zero repositories."""

    def __init__(self, message: str = "Query returned 0 results"):
        super().__init__(message)


class ProviderError(SearchError):
    """The reply carried an error message or no result set at all."""

    def __init__(self, message: str = "GitHub Error"):
        super().__init__(message)


class TransportError(SearchError):
    """Network or decode failure while talking to the GraphQL endpoint."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error is not None:
            return f"{self.message} (Original: {self.original_error})"
        return self.message
