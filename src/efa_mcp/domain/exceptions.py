from __future__ import annotations


class EfaMcpError(Exception):
    """Base exception for all EFA real-time monitor errors."""


class ApiError(EfaMcpError):
    """Raised when a request to the EFA API fails.

    Carries the HTTP status code and status text of the failed response. Network
    and decoding failures are normalised to status 500.
    """

    def __init__(self, status_code: int, status_text: str = "", message: str = "") -> None:
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(message or f"API request failed: {status_text or status_code}")


class InvalidResponseError(ApiError):
    """Raised when an EFA payload lacks the structure a service needs."""

    def __init__(self, message: str) -> None:
        super().__init__(500, "Invalid Response", message)


class ValidationError(EfaMcpError):
    """Raised when input parameters fail validation before any network call."""
