"""Type definitions for the realmsandbox client."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, TypedDict

from .constants import DEFAULT_BASE_PATH, DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT_MS

HttpMethod = Literal["GET", "POST", "PATCH", "DELETE"]

# Zero-argument factory producing one pending transport call
RequestThunk = Callable[[], Awaitable[Any]]


@dataclass
class ClientConfig:
    """Configuration for RealmSandboxClient.

    Attributes:
        base_url: Scheme and host of the API server, optionally with a prefix.
        base_path: Path prefix that every resource path is built from.
        timeout: HTTP request timeout in milliseconds.
        max_retries: Additional attempts after the first failed one.
        headers: Extra headers sent with every request.
    """

    base_url: str
    base_path: str = DEFAULT_BASE_PATH
    timeout: int = DEFAULT_TIMEOUT_MS
    max_retries: int = DEFAULT_MAX_RETRIES
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RequestDescriptor:
    """A single outbound request.

    Attributes:
        method: HTTP method.
        path: Path relative to the configured base URL.
        params: Query parameters.
        json: JSON body.
    """

    method: HttpMethod
    path: str
    params: Mapping[str, str] | None = None
    json: Any = None


# Request payloads are opaque JSON objects passed through as given. The
# backend owns their schema; nothing is checked on the client side.

# Customizable realm configuration
RealmConfigurationUpdate = dict[str, Any]

# Metadata for a new sandbox
SandboxProvisioningRequest = dict[str, Any]

# Sandbox values to update
SandboxUpdateRequest = dict[str, Any]

# Operation to run against a sandbox
SandboxOperationRequest = dict[str, Any]


class SandboxAlias(TypedDict):
    """Alias configuration. ``name`` is the only field the backend requires."""

    name: str
