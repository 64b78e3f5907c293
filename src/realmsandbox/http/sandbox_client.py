"""Sandbox API client."""

from __future__ import annotations

from typing import Any

from ..types import (
    SandboxAlias,
    SandboxOperationRequest,
    SandboxProvisioningRequest,
    SandboxUpdateRequest,
)
from .base_client import BaseApiClient


class SandboxApiClient(BaseApiClient):
    """API client for sandbox operations.

    Covers sandbox CRUD, aliases, operations, settings, usage and storage.
    """

    resource = "sandboxes"

    # Sandboxes

    async def get_sandboxes(self, include_deleted: bool = False) -> Any:
        """Return all sandboxes of a realm.

        ``GET /sandboxes?include_deleted=...``

        Args:
            include_deleted: If True, also return deleted sandboxes.
        """
        params = {"include_deleted": str(include_deleted).lower()}
        return await self._request("GET", self._path(), params=params)

    async def create_sandbox(
        self, provisioning_request: SandboxProvisioningRequest
    ) -> Any:
        """Create a new sandbox within the realm.

        ``POST /sandboxes``

        Args:
            provisioning_request: Metadata about the new sandbox.
        """
        return await self._request("POST", self._path(), json=provisioning_request)

    async def get_sandbox(self, sandbox_id: str) -> Any:
        """Return details on a specific sandbox.

        ``GET /sandboxes/{sandbox_id}``

        Args:
            sandbox_id: The sandbox UUID.
        """
        return await self._request("GET", self._path(sandbox_id))

    async def update_sandbox(
        self, sandbox_id: str, update_request: SandboxUpdateRequest
    ) -> Any:
        """Update a sandbox.

        ``PATCH /sandboxes/{sandbox_id}``

        Args:
            sandbox_id: The sandbox UUID.
            update_request: Sandbox values to update.
        """
        return await self._request("PATCH", self._path(sandbox_id), json=update_request)

    async def delete_sandbox(self, sandbox_id: str) -> Any:
        """Delete a specific sandbox.

        ``DELETE /sandboxes/{sandbox_id}``

        Args:
            sandbox_id: The sandbox UUID.
        """
        return await self._request("DELETE", self._path(sandbox_id))

    # Aliases

    async def create_sandbox_alias(
        self, sandbox_id: str, alias_config: SandboxAlias | dict[str, Any]
    ) -> Any:
        """Create a new sandbox alias.

        Posts to ``/sandboxes/{sandbox_id}``, not to the ``/aliases``
        sub-path. The backend routing this relies on has not been confirmed.

        Args:
            sandbox_id: The sandbox UUID.
            alias_config: The alias. Only a name is required.
        """
        return await self._request("POST", self._path(sandbox_id), json=alias_config)

    async def get_sandbox_aliases(self, sandbox_id: str) -> Any:
        """Retrieve the aliases of a sandbox.

        ``GET /sandboxes/{sandbox_id}/aliases``

        Args:
            sandbox_id: The sandbox UUID.
        """
        return await self._request("GET", self._path(sandbox_id, "aliases"))

    async def get_alias_configuration(self, sandbox_id: str, alias_id: str) -> Any:
        """Read an alias configuration.

        ``GET /sandboxes/{sandbox_id}/aliases/{alias_id}``

        The backend also answers this without authentication, to hand out
        the cookie values for the alias.

        Args:
            sandbox_id: The sandbox UUID.
            alias_id: The sandbox alias UUID.
        """
        return await self._request("GET", self._path(sandbox_id, "aliases", alias_id))

    async def delete_alias(self, sandbox_id: str, alias_id: str) -> Any:
        """Delete an alias configuration.

        ``DELETE /sandboxes/{sandbox_id}/aliases/{alias_id}``

        Args:
            sandbox_id: The sandbox UUID.
            alias_id: The sandbox alias UUID.
        """
        return await self._request("DELETE", self._path(sandbox_id, "aliases", alias_id))

    # Operations

    async def run_sandbox_operation(
        self, sandbox_id: str, operation: SandboxOperationRequest
    ) -> Any:
        """Request an operation on a sandbox.

        ``POST /sandboxes/{sandbox_id}/operations``

        Args:
            sandbox_id: The sandbox UUID.
            operation: Operation to carry out.
        """
        return await self._request("POST", self._path(sandbox_id, "operations"), json=operation)

    async def get_sandbox_operations(
        self,
        sandbox_id: str,
        from_: str = "",
        to: str = "",
        operation_state: str = "",
        status: str = "",
        operation: str = "",
        sort_order: str = "",
        sort_by: str = "",
        page: int = 0,
        per_page: int = 20,
    ) -> Any:
        """List past and present operations on a sandbox.

        ``GET /sandboxes/{sandbox_id}/operations``

        Every query parameter is sent, empty strings included; the backend
        treats an empty value as "use the default".

        Args:
            sandbox_id: The sandbox UUID.
            from_: Earliest date included, ISO 8601. Backend default is
                thirty days ago.
            to: Latest date included, ISO 8601. Backend default is today.
            operation_state: Only include operations in this state.
            status: Only include operations with this status.
            operation: Only include this kind of operation.
            sort_order: ``asc`` or ``desc``.
            sort_by: Field to order the list by.
            page: Page number, starting at 0.
            per_page: Page size.
        """
        params = {
            "from": from_,
            "to": to,
            # Key spelled as the backend currently receives it
            "oeration_state": operation_state,
            "status": status,
            "operation": operation,
            "sort_order": sort_order,
            "sort_by": sort_by,
            "page": str(page),
            "per_page": str(per_page),
        }
        return await self._request("GET", self._path(sandbox_id, "operations"), params=params)

    async def get_sandbox_operation(self, sandbox_id: str, operation_id: str) -> Any:
        """Return details of a sandbox operation.

        ``GET /sandboxes/{sandbox_id}/operations/{operation_id}``

        Args:
            sandbox_id: The sandbox UUID.
            operation_id: The operation UUID.
        """
        return await self._request("GET", self._path(sandbox_id, "operations", operation_id))

    # Settings, usage, storage

    async def get_sandbox_settings(self, sandbox_id: str) -> Any:
        """Return all settings of a sandbox.

        ``GET /sandboxes/{sandbox_id}/settings``

        Args:
            sandbox_id: The sandbox UUID.
        """
        return await self._request("GET", self._path(sandbox_id, "settings"))

    async def get_sandbox_usage(self, sandbox_id: str, from_: str = "", to: str = "") -> Any:
        """Return information on sandbox usage.

        Currently requests ``/sandboxes/{sandbox_id}/settings`` and does not
        send ``from_`` or ``to``, so it answers with the settings. Switching
        to ``/usage`` is pending confirmation from the backend owners.

        Args:
            sandbox_id: The sandbox UUID.
            from_: Earliest date included, ISO 8601.
            to: Latest date included, ISO 8601.
        """
        # TODO: request /usage with from/to once the backend route is confirmed
        return await self._request("GET", self._path(sandbox_id, "settings"))

    async def get_sandbox_storage(self, sandbox_id: str) -> Any:
        """Return information on sandbox storage capacity.

        ``GET /sandboxes/{sandbox_id}/storage``

        Args:
            sandbox_id: The sandbox UUID.
        """
        return await self._request("GET", self._path(sandbox_id, "storage"))
