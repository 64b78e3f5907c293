"""httpx-backed transport for the realmsandbox client."""

from __future__ import annotations

import json
from typing import Any

import httpx

from ..errors import ApiError, NetworkError
from ..types import ClientConfig, RequestDescriptor


class HttpTransport:
    """Sends single requests over a shared ``httpx.AsyncClient``.

    The transport performs no retries of its own; failures are raised as
    ``NetworkError`` or ``ApiError`` for the request policy to handle.

    Attributes:
        config: Client configuration.
    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize the transport.

        Args:
            config: Client configuration with base URL, timeout and headers.
        """
        self.config = config
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client.

        Returns:
            The HTTP client instance.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers={
                    **self.config.headers,
                    "Content-Type": "application/json",
                },
                timeout=httpx.Timeout(self.config.timeout / 1000),
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def send(self, request: RequestDescriptor) -> Any:
        """Send one request.

        Args:
            request: The request to send.

        Returns:
            The decoded response body: parsed JSON, raw text if the body is
            not JSON, or None if it is empty.

        Raises:
            NetworkError: If the request never got a response.
            ApiError: If the backend answered with status 400 or above.
        """
        client = await self._get_client()
        try:
            response = await client.request(
                request.method,
                request.path,
                params=dict(request.params) if request.params is not None else None,
                json=request.json,
            )
        except httpx.HTTPError as e:
            raise NetworkError(f"Network error: {e}") from e

        if response.status_code >= 400:
            raise ApiError(response.status_code, response.text)

        return self._decode_body(response)

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except (ValueError, json.JSONDecodeError):
            return response.text
