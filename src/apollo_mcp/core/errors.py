"""Apollo API failures, classified from the HTTP status code."""

from __future__ import annotations

from typing import Optional


class ApolloError(Exception):
    """Base class for every failure reported by the Apollo API."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ApolloAuthError(ApolloError):
    """HTTP 401: the API key is missing or invalid."""

    MESSAGE = "Unauthorized: invalid or missing APOLLO_API_KEY"

    def __init__(self):
        super().__init__(self.MESSAGE, 401)


class ApolloRateLimitError(ApolloError):
    """HTTP 429. Reported as-is, never retried."""

    def __init__(self, retry_after: Optional[str] = None):
        message = "Rate limited by Apollo (429)."
        if retry_after:
            message += f" Retry after {retry_after}s."
        super().__init__(message, 429)
        self.retry_after = retry_after


class ApolloHTTPError(ApolloError):
    """Any other status >= 400, with the raw response body attached."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Apollo error {status_code}: {body}", status_code)
        self.body = body
