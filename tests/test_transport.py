"""Tests for the httpx transport."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from realmsandbox.errors import ApiError, NetworkError
from realmsandbox.http.transport import HttpTransport
from realmsandbox.types import ClientConfig, RequestDescriptor


@pytest.fixture
def config() -> ClientConfig:
    """Create a test client configuration."""
    return ClientConfig(
        base_url="https://test.example.com/api/v1",
        timeout=5000,
        headers={"Cookie": "session=abc"},
    )


def mock_transport(
    config: ClientConfig, handler: Callable[[httpx.Request], httpx.Response]
) -> HttpTransport:
    """Create a transport whose HTTP client answers through ``handler``."""
    transport = HttpTransport(config)
    transport._client = httpx.AsyncClient(
        base_url=config.base_url,
        headers={"Content-Type": "application/json"},
        transport=httpx.MockTransport(handler),
    )
    return transport


class TestClientLifecycle:
    """Tests for creation and closing of the underlying HTTP client."""

    @pytest.mark.asyncio
    async def test_client_defaults(self, config: ClientConfig) -> None:
        transport = HttpTransport(config)

        client = await transport._get_client()

        assert client.headers["Content-Type"] == "application/json"
        assert client.headers["Cookie"] == "session=abc"
        assert str(client.base_url) == "https://test.example.com/api/v1/"
        assert client.timeout.read == 5.0
        await transport.close()

    @pytest.mark.asyncio
    async def test_content_type_cannot_be_overridden(self) -> None:
        transport = HttpTransport(
            ClientConfig(base_url="https://x", headers={"Content-Type": "text/plain"})
        )

        client = await transport._get_client()

        assert client.headers["Content-Type"] == "application/json"
        await transport.close()

    @pytest.mark.asyncio
    async def test_client_is_reused(self, config: ClientConfig) -> None:
        transport = HttpTransport(config)

        first = await transport._get_client()
        second = await transport._get_client()

        assert first is second
        await transport.close()

    @pytest.mark.asyncio
    async def test_close_then_reopen(self, config: ClientConfig) -> None:
        transport = HttpTransport(config)
        first = await transport._get_client()

        await transport.close()
        assert first.is_closed
        assert transport._client is None

        second = await transport._get_client()
        assert second is not first
        await transport.close()

    @pytest.mark.asyncio
    async def test_close_without_client(self, config: ClientConfig) -> None:
        transport = HttpTransport(config)
        await transport.close()
        assert transport._client is None


class TestSend:
    """Tests for sending a single request."""

    @pytest.mark.asyncio
    async def test_request_shape(self, config: ClientConfig) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        transport = mock_transport(config, handler)
        result = await transport.send(
            RequestDescriptor(
                method="PATCH",
                path="/sandboxes/abc-123",
                params={"include_deleted": "false"},
                json={"field": "changed"},
            )
        )

        assert result == {"ok": True}
        request = seen[0]
        assert request.method == "PATCH"
        assert request.url.path == "/api/v1/sandboxes/abc-123"
        assert request.url.params["include_deleted"] == "false"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"field": "changed"}

    @pytest.mark.asyncio
    async def test_get_has_no_body(self, config: ClientConfig) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        transport = mock_transport(config, handler)
        await transport.send(RequestDescriptor(method="GET", path="/me"))

        assert seen[0].content == b""
        assert seen[0].url.query == b""

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self, config: ClientConfig) -> None:
        transport = mock_transport(config, lambda request: httpx.Response(204))

        assert await transport.send(RequestDescriptor(method="DELETE", path="/x")) is None

    @pytest.mark.asyncio
    async def test_non_json_body_returns_text(self, config: ClientConfig) -> None:
        transport = mock_transport(config, lambda request: httpx.Response(200, text="plain"))

        assert await transport.send(RequestDescriptor(method="GET", path="/")) == "plain"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    async def test_error_status_raises_api_error(
        self, config: ClientConfig, status: int
    ) -> None:
        transport = mock_transport(
            config, lambda request: httpx.Response(status, text='{"error": "nope"}')
        )

        with pytest.raises(ApiError) as exc_info:
            await transport.send(RequestDescriptor(method="GET", path="/"))

        assert exc_info.value.status_code == status
        assert exc_info.value.body == '{"error": "nope"}'

    @pytest.mark.asyncio
    async def test_redirect_status_is_not_an_error(self, config: ClientConfig) -> None:
        transport = mock_transport(config, lambda request: httpx.Response(304))

        assert await transport.send(RequestDescriptor(method="GET", path="/")) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("Connection refused"),
            httpx.ReadTimeout("Read timed out"),
            httpx.RemoteProtocolError("Server disconnected"),
        ],
    )
    async def test_transport_failures_raise_network_error(
        self, config: ClientConfig, error: httpx.HTTPError
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise error

        transport = mock_transport(config, handler)

        with pytest.raises(NetworkError) as exc_info:
            await transport.send(RequestDescriptor(method="GET", path="/"))

        assert exc_info.value.__cause__ is error
        assert str(error) in str(exc_info.value)
