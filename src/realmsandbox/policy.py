"""Retry and error normalization applied to every outbound request."""

from __future__ import annotations

import logging
from typing import Any

from .constants import DEFAULT_MAX_RETRIES
from .errors import ApiError, RequestFailedError
from .types import RequestThunk


class RequestPolicy:
    """Bounded retry followed by error normalization.

    Every failure is retried the same way, immediately, whatever its cause:
    a 404 gets the same treatment as a dropped connection. Once the attempts
    are used up the last error is logged and replaced by a
    ``RequestFailedError`` that carries no detail.

    Attributes:
        max_retries: Additional attempts after the first one.
    """

    def __init__(
        self,
        max_retries: int = DEFAULT_MAX_RETRIES,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        if max_retries < 0:
            raise ValueError("max_retries cannot be negative")
        self.max_retries = max_retries
        self._logger = logger if logger is not None else logging.getLogger("realmsandbox")

    async def execute_with_policy(self, request_thunk: RequestThunk) -> Any:
        """Run a request, retrying it on failure.

        Args:
            request_thunk: Zero-argument callable returning an awaitable
                transport call. It is invoked once per attempt.

        Returns:
            Whatever the first successful attempt returned.

        Raises:
            RequestFailedError: If every attempt failed.
        """
        last_error: Exception | None = None

        for attempt in range(self.max_retries + 1):
            try:
                return await request_thunk()
            except Exception as e:
                last_error = e
                if attempt < self.max_retries:
                    self._logger.debug(
                        "Attempt %d of %d failed: %s", attempt + 1, self.max_retries + 1, e
                    )

        self._log_failure(last_error)
        raise RequestFailedError() from None

    def _log_failure(self, error: Exception | None) -> None:
        """Log the terminal failure of a request.

        Args:
            error: The error raised by the last attempt.
        """
        if isinstance(error, ApiError):
            self._logger.error(
                "Backend returned code %s, body was: %s", error.status_code, error.body
            )
        else:
            self._logger.error("An error occurred: %s", error)
