"""Base resource client for the realmsandbox API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..constants import DEFAULT_BASE_PATH
from ..policy import RequestPolicy
from ..types import HttpMethod, RequestDescriptor
from .transport import HttpTransport


class BaseApiClient:
    """Common request plumbing shared by all resource clients.

    Paths are built by plain concatenation of the base path, the resource
    segment and the identifiers passed in. Identifiers are neither escaped
    nor validated.

    Attributes:
        transport: Transport that performs the network calls.
        policy: Retry and error normalization applied to every call.
        base_path: Path prefix, always ending with ``/``.
    """

    # Path segment below the base path; empty for top-level endpoints
    resource = ""

    def __init__(
        self,
        transport: HttpTransport,
        policy: RequestPolicy,
        base_path: str = DEFAULT_BASE_PATH,
    ) -> None:
        """Initialize the resource client.

        Args:
            transport: Transport shared with the other resource clients.
            policy: Request policy shared with the other resource clients.
            base_path: Path prefix for every resource path.
        """
        self.transport = transport
        self.policy = policy
        self.base_path = base_path if base_path.endswith("/") else base_path + "/"

    def _path(self, *segments: str) -> str:
        """Build a path below this client's resource.

        Args:
            segments: Path segments appended in order.

        Returns:
            The resource path.
        """
        parts = [self.resource, *segments] if self.resource else list(segments)
        return self.base_path + "/".join(parts)

    async def _request(
        self,
        method: HttpMethod,
        path: str,
        *,
        json: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request through the request policy.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE).
            path: API path.
            json: JSON body for the request.
            params: Query parameters.

        Returns:
            The decoded response body.

        Raises:
            RequestFailedError: If the request failed after all attempts.
        """
        request = RequestDescriptor(method=method, path=path, params=params, json=json)
        return await self.policy.execute_with_policy(lambda: self.transport.send(request))
