"""realmsandbox - Python client for the realm and sandbox management API.

Example:
    ```python
    import asyncio
    from realmsandbox import RealmSandboxClient, RequestFailedError

    async def main():
        async with RealmSandboxClient(base_url="https://admin.example.com/api/v1") as client:
            try:
                realm = await client.realms.get_realm("abcd")
                sandbox = await client.sandboxes.create_sandbox(provisioning_request)
            except RequestFailedError as e:
                print(e.message)

    asyncio.run(main())
    ```
"""

from .client import RealmSandboxClient
from .constants import (
    DEFAULT_BASE_PATH,
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT_MS,
)
from .errors import ApiError, NetworkError, RealmSandboxError, RequestFailedError
from .http import CommonApiClient, HttpTransport, RealmApiClient, SandboxApiClient
from .policy import RequestPolicy
from .types import (
    ClientConfig,
    RealmConfigurationUpdate,
    RequestDescriptor,
    SandboxAlias,
    SandboxOperationRequest,
    SandboxProvisioningRequest,
    SandboxUpdateRequest,
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "RealmSandboxClient",
    "RequestPolicy",
    "HttpTransport",
    "CommonApiClient",
    "RealmApiClient",
    "SandboxApiClient",
    # Constants
    "DEFAULT_BASE_PATH",
    "DEFAULT_ERROR_MESSAGE",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT_MS",
    # Configuration
    "ClientConfig",
    "RequestDescriptor",
    # Request payloads
    "RealmConfigurationUpdate",
    "SandboxAlias",
    "SandboxOperationRequest",
    "SandboxProvisioningRequest",
    "SandboxUpdateRequest",
    # Errors
    "RealmSandboxError",
    "ApiError",
    "NetworkError",
    "RequestFailedError",
    # Version
    "__version__",
]
