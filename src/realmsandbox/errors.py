"""Error hierarchy for the realmsandbox client."""

from __future__ import annotations

from .constants import DEFAULT_ERROR_MESSAGE


class RealmSandboxError(Exception):
    """Base exception for all realmsandbox errors."""

    pass


class ApiError(RealmSandboxError):
    """Backend answered with an error status.

    Raised by the transport and consumed by the request policy; it never
    reaches callers of the resource clients.

    Attributes:
        status_code: The HTTP status code.
        body: The raw response body.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API Error ({status_code}): {body}")


class NetworkError(RealmSandboxError):
    """Network communication failure."""

    pass


class RequestFailedError(RealmSandboxError):
    """A request failed after all attempts.

    Carries no status code, body or cause. Diagnostic detail is only logged.
    """

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGE) -> None:
        self.message = message
        super().__init__(message)
