# src/fxconvert/domain/errors.py
"""
Domain Errors - Fetch and Input Failures

This module defines the failure taxonomy shared by both fetchers and the
conversion coordinator. Fetch errors are raised inside the adapters and
caught at the fetcher boundary, where they become a Failure result.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class FetchError(DomainError):
    """
    Base class for failures while fetching from the rate service.

    The exception message is the human-readable text shown to the user.
    """

    @property
    def message(self) -> str:
        return str(self)


class NetworkFailure(FetchError):
    """Raised on a transport error before any response arrived (incl. timeouts)."""
    pass


class ResponseFailure(FetchError):
    """Raised when the service answered with a non-success status or an unusable body."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class EmptyBodyFailure(FetchError):
    """Raised when a successful response carries no body."""
    pass


class ParseFailure(FetchError):
    """Raised when the body is not valid JSON or lacks the expected fields."""
    pass


class InvalidInput(DomainError):
    """Raised when user input cannot form a conversion request."""
    pass
