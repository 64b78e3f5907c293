"""Service metadata API client."""

from __future__ import annotations

from typing import Any

from .base_client import BaseApiClient


class CommonApiClient(BaseApiClient):
    """API client for service, user and system metadata."""

    async def get_api(self) -> Any:
        """Get API version information."""
        return await self._request("GET", self._path())

    async def get_user(self) -> Any:
        """Get metadata about the authenticated API user."""
        return await self._request("GET", self._path("me"))

    async def get_system(self) -> Any:
        """Get information about the system the user is interacting with."""
        return await self._request("GET", self._path("system"))
