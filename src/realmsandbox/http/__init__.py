"""HTTP clients for the realmsandbox API.

This module provides:
- HttpTransport: httpx-backed transport, one request per call
- BaseApiClient: Path building and policy-wrapped requests
- CommonApiClient: Service, user and system metadata
- RealmApiClient: Realm information and configuration
- SandboxApiClient: Sandboxes, aliases, operations, settings and storage
"""

from .base_client import BaseApiClient
from .common_client import CommonApiClient
from .realm_client import RealmApiClient
from .sandbox_client import SandboxApiClient
from .transport import HttpTransport

__all__ = [
    "BaseApiClient",
    "CommonApiClient",
    "HttpTransport",
    "RealmApiClient",
    "SandboxApiClient",
]
