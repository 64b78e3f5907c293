"""RealmSandboxClient - Main entry point for the realmsandbox client."""

from __future__ import annotations

from typing import Any

from .constants import DEFAULT_BASE_PATH, DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT_MS
from .http import CommonApiClient, HttpTransport, RealmApiClient, SandboxApiClient
from .policy import RequestPolicy
from .types import ClientConfig


class RealmSandboxClient:
    """Main client for the realm and sandbox management API.

    Groups the resource clients around one transport and one request policy.

    Example:
        ```python
        async with RealmSandboxClient(base_url="https://admin.example.com/api/v1") as client:
            sandboxes = await client.sandboxes.get_sandboxes(include_deleted=False)
            await client.sandboxes.run_sandbox_operation(sandbox_id, operation_request)
        ```

    Attributes:
        common: Service, user and system metadata.
        realms: Realm operations.
        sandboxes: Sandbox operations.
    """

    def __init__(
        self,
        *,
        base_url: str,
        base_path: str = DEFAULT_BASE_PATH,
        timeout: int = DEFAULT_TIMEOUT_MS,
        max_retries: int = DEFAULT_MAX_RETRIES,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Scheme and host of the API server, optionally with a prefix.
            base_path: Path prefix for every resource path.
            timeout: HTTP request timeout in milliseconds.
            max_retries: Additional attempts after a failed request.
            headers: Extra headers sent with every request, e.g. a session cookie.
        """
        self._config = ClientConfig(
            base_url=base_url,
            base_path=base_path,
            timeout=timeout,
            max_retries=max_retries,
            headers=dict(headers or {}),
        )
        self._transport = HttpTransport(self._config)
        self._policy = RequestPolicy(self._config.max_retries)
        self.common = CommonApiClient(self._transport, self._policy, self._config.base_path)
        self.realms = RealmApiClient(self._transport, self._policy, self._config.base_path)
        self.sandboxes = SandboxApiClient(self._transport, self._policy, self._config.base_path)

    async def __aenter__(self) -> RealmSandboxClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the client and release the HTTP connection pool."""
        await self._transport.close()

    async def get_api(self) -> Any:
        """Get API version information."""
        return await self.common.get_api()

    async def get_user(self) -> Any:
        """Get metadata about the authenticated API user."""
        return await self.common.get_user()

    async def get_system(self) -> Any:
        """Get information about the system the user is interacting with."""
        return await self.common.get_system()
