"""Realm API client."""

from __future__ import annotations

from typing import Any

from ..types import RealmConfigurationUpdate
from .base_client import BaseApiClient


class RealmApiClient(BaseApiClient):
    """API client for realm operations."""

    resource = "realms"

    async def get_realm(self, realm_id: str) -> Any:
        """Show realm information.

        ``GET /realms/{realm_id}``

        Args:
            realm_id: The four-letter ID of the realm.
        """
        return await self._request("GET", self._path(realm_id))

    async def get_configuration(self, realm_id: str) -> Any:
        """Show the current realm configuration.

        ``GET /realms/{realm_id}/configuration``

        Args:
            realm_id: The four-letter ID of the realm.
        """
        return await self._request("GET", self._path(realm_id, "configuration"))

    async def update_configuration(
        self, realm_id: str, configuration: RealmConfigurationUpdate
    ) -> Any:
        """Update the customizable configuration of a realm.

        ``PATCH /realms/{realm_id}/configuration``

        Args:
            realm_id: The four-letter ID of the realm.
            configuration: Configuration values to change.
        """
        return await self._request(
            "PATCH", self._path(realm_id, "configuration"), json=configuration
        )
