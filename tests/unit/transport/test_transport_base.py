"""Tests for BaseAPIClient configuration and request handling."""

from typing import ClassVar

import httpx
import pytest

from finbind.config.schema import APIHostType, ClientConfig
from finbind.core.constants import USER_AGENT
from finbind.core.errors import ConfigError, ProtocolError
from finbind.transport.base import MAX_ERROR_BODY_SIZE, BaseAPIClient
from finbind.transport.wire import WireModel


class SingleHostClient(BaseAPIClient):
    HOSTS: ClassVar[dict[APIHostType, str]] = {APIHostType.TEST: "https://test.example.com/api"}


class PingReply(WireModel):
    status: str = ""
    item_count: int = 0


class TestHostResolution:
    """Tests for base URL resolution at construction."""

    def test_known_host(self) -> None:
        client = SingleHostClient(ClientConfig())

        assert client.base_url == "https://test.example.com/api"

    def test_unknown_host_raises_config_error(self) -> None:
        """A host type missing from the table fails at construction."""
        with pytest.raises(ConfigError) as exc_info:
            SingleHostClient(ClientConfig(host_type=APIHostType.PRODUCTION))

        assert "production" in exc_info.value.message
        assert "Supported: test" in exc_info.value.message

    def test_base_url_bypasses_table(self) -> None:
        client = SingleHostClient(
            ClientConfig(host_type=APIHostType.PRODUCTION, base_url="http://localhost:1")
        )

        assert client.base_url == "http://localhost:1"


class TestRequest:
    """Tests for _request."""

    @pytest.mark.asyncio
    async def test_default_and_extra_headers_sent(self) -> None:
        seen: list[httpx.Request] = []

        def mock_handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        client = SingleHostClient(
            ClientConfig(extra_headers={"X-Trace": "abc"}),
            transport=httpx.MockTransport(mock_handler),
        )
        async with client:
            await client._request("GET", "/ping", PingReply, headers={"x-access-token": "t"})

        headers = seen[0].headers
        assert headers["user-agent"] == USER_AGENT
        assert headers["accept"] == "application/json"
        assert headers["x-trace"] == "abc"
        assert headers["x-access-token"] == "t"

    @pytest.mark.asyncio
    async def test_query_appended_verbatim(self) -> None:
        seen: list[httpx.Request] = []

        def mock_handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        client = SingleHostClient(ClientConfig(), transport=httpx.MockTransport(mock_handler))
        async with client:
            await client._request("GET", "/items", PingReply, query="b=2&a=1")

        assert seen[0].url.query == b"b=2&a=1"

    @pytest.mark.asyncio
    async def test_redirect_not_followed(self) -> None:
        """A redirect is reported as a protocol error, not followed."""

        def mock_handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(302, headers={"Location": "https://elsewhere.example.com"})

        client = SingleHostClient(ClientConfig(), transport=httpx.MockTransport(mock_handler))
        async with client:
            with pytest.raises(ProtocolError) as exc_info:
                await client._request("GET", "/items", PingReply)

        assert exc_info.value.status_code == 302

    @pytest.mark.asyncio
    async def test_error_body_capped(self) -> None:
        def mock_handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="x" * (MAX_ERROR_BODY_SIZE * 2))

        client = SingleHostClient(ClientConfig(), transport=httpx.MockTransport(mock_handler))
        async with client:
            with pytest.raises(ProtocolError) as exc_info:
                await client._request("GET", "/items", PingReply)

        assert len(exc_info.value.body) == MAX_ERROR_BODY_SIZE

    @pytest.mark.asyncio
    async def test_reply_decoded_into_model(self) -> None:
        def mock_handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "ok", "itemCount": 3})

        client = SingleHostClient(ClientConfig(), transport=httpx.MockTransport(mock_handler))
        async with client as entered:
            reply = await entered._request("GET", "/items", PingReply)

        assert entered is client
        assert reply == PingReply(status="ok", item_count=3)

    @pytest.mark.asyncio
    async def test_null_fields_take_defaults(self) -> None:
        """JSON nulls for non-optional fields leave the zero value."""

        def mock_handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": None, "itemCount": None})

        client = SingleHostClient(ClientConfig(), transport=httpx.MockTransport(mock_handler))
        async with client:
            reply = await client._request("GET", "/items", PingReply)

        assert reply == PingReply()

    @pytest.mark.asyncio
    async def test_broken_content_encoding_is_protocol_error(self) -> None:
        """A reply that arrived but cannot be decompressed is not a transport failure."""

        async def body():
            yield b"not gzip"

        def mock_handler(request: httpx.Request) -> httpx.Response:
            # streamed so the body is only decoded when the client reads it
            return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=body())

        client = SingleHostClient(ClientConfig(), transport=httpx.MockTransport(mock_handler))
        async with client:
            with pytest.raises(ProtocolError) as exc_info:
                await client._request("GET", "/items", PingReply)

        assert exc_info.value.status_code == 200
        assert "could not be decoded" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_shape_error_reports_actual_status(self) -> None:
        def mock_handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(201, json={"itemCount": "many"})

        client = SingleHostClient(ClientConfig(), transport=httpx.MockTransport(mock_handler))
        async with client:
            with pytest.raises(ProtocolError) as exc_info:
                await client._request("GET", "/items", PingReply)

        assert exc_info.value.status_code == 201
        assert exc_info.value.body == {"itemCount": "many"}


class TestSslSetting:
    def test_ca_cert_takes_priority(self) -> None:
        client = SingleHostClient(ClientConfig(verify_ssl=False, ssl_ca_cert="/etc/ca.pem"))

        assert client._ssl_verify_setting() == "/etc/ca.pem"

    def test_verify_flag(self) -> None:
        assert SingleHostClient(ClientConfig(verify_ssl=False))._ssl_verify_setting() is False
