"""Base API client with shared HTTP, error mapping, and logging logic.

This module provides the base class for both API clients. It owns the
httpx client lifecycle, issues exactly one HTTP request per call, and maps
failures onto the finbind error taxonomy:

- TransportError: the request never produced a reply (connect, timeout, network)
- ProtocolError: a reply arrived but was not a 2xx JSON object of the expected shape

Business errors embedded in a successful reply are not inspected here.
"""

from __future__ import annotations

import json
import logging
from typing import Any, ClassVar, Protocol, Self, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from finbind.config.schema import APIHostType, ClientConfig
from finbind.core.constants import USER_AGENT
from finbind.core.errors import ConfigError, ProtocolError, TransportError
from finbind.core.redaction import redact_dict, redact_headers

logger = logging.getLogger(__name__)

# Maximum size for error response bodies kept on ProtocolError
MAX_ERROR_BODY_SIZE: int = 10 * 1024  # 10 KB

WireT = TypeVar("WireT", bound=BaseModel)


class RawLogCallback(Protocol):
    """Protocol for raw API logging callbacks.

    Implementations receive redacted requests and decoded responses for
    debugging. The client calls these methods without knowing about the
    logging implementation.
    """

    def on_request(self, endpoint: str, payload: dict[str, Any]) -> None:
        """Called before making an HTTP request.

        Args:
            endpoint: The full URL being called (query string included).
            payload: The JSON body, or {} for GET requests. Secrets are redacted.
        """
        ...

    def on_response(self, status: int, body: dict[str, Any]) -> None:
        """Called after receiving a decodable response.

        Args:
            status: The HTTP status code.
            body: The response body as a parsed dictionary.
        """
        ...


class BaseAPIClient:
    """Base class for the bank and deferred-payment clients.

    Provides shared functionality:
    - Base URL resolution from a static host table, fixed at construction
    - Lazily created, instance-owned httpx.AsyncClient
    - Injectable transport (tests pass httpx.MockTransport)
    - Single-attempt requests with per-call timeout override
    - Error mapping and raw logging callbacks

    Subclasses set HOSTS and implement the API operations.
    """

    HOSTS: ClassVar[dict[APIHostType, str]] = {}

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
        raw_log: RawLogCallback | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client configuration. Host selection is read once, here.
            transport: Optional httpx transport used instead of the network.
            raw_log: Optional callback for raw API logging.

        Raises:
            ConfigError: If the host type has no entry in the host table.
        """
        self._config = config
        self._base_url = self._resolve_base_url(config)
        self._transport = transport
        self._raw_log = raw_log
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def _resolve_base_url(cls, config: ClientConfig) -> str:
        if config.base_url:
            return config.base_url
        try:
            return cls.HOSTS[config.host_type]
        except KeyError:
            supported = ", ".join(h.value for h in cls.HOSTS)
            raise ConfigError(
                f"Unknown host type: '{config.host_type.value}'. Supported: {supported}"
            ) from None

    @property
    def base_url(self) -> str:
        """Base URL every request of this client is sent to."""
        return self._base_url

    @property
    def host_type(self) -> APIHostType:
        return self._config.host_type

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client.

        The client is created on first request and reused for subsequent
        requests, so concurrent calls share one connection pool.
        """
        if self._client is None or self._client.is_closed:
            headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
            headers.update(self._config.extra_headers)

            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._config.request_timeout),
                headers=headers,
                verify=self._ssl_verify_setting(),
                transport=self._transport,
                follow_redirects=False,
            )
        return self._client

    def _ssl_verify_setting(self) -> bool | str:
        # custom CA takes priority over the boolean switch
        if self._config.ssl_ca_cert:
            return self._config.ssl_ca_cert
        return self._config.verify_ssl

    async def aclose(self) -> None:
        """Close the HTTP client and release resources.

        It is safe to call multiple times (idempotent).
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        model: type[WireT],
        *,
        query: str = "",
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> WireT:
        """Make a single HTTP request and decode the reply into a wire model.

        The query string is sent exactly as given; callers are responsible for
        its encoding and key order.

        Args:
            method: HTTP method.
            path: Endpoint path appended to the base URL.
            model: Wire model the JSON reply is validated into.
            query: Pre-encoded query string, without the leading '?'.
            json: Request body, sent as application/json.
            headers: Per-call headers (credentials, idempotency keys).
            timeout: Per-call timeout in seconds, overriding the config default.

        Returns:
            The decoded reply.

        Raises:
            TransportError: If the request did not produce a response.
            ProtocolError: On non-2xx status, an undecodable body, or a JSON
                object that does not fit the model.
        """
        url = f"{self._base_url}{path}"
        if query:
            url = f"{url}?{query}"
        call_headers = headers or {}

        logger.debug(
            "%s %s headers=%s", method, url, redact_headers(call_headers)
        )
        if self._raw_log:
            self._raw_log.on_request(url, redact_dict(json or {}))

        client = await self._ensure_client()
        request = client.build_request(
            method,
            url,
            json=json,
            headers=call_headers,
            timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
        )
        try:
            response = await client.send(request, stream=True)
            try:
                await response.aread()
            except httpx.DecodingError as e:
                # the server replied, but its content encoding is broken
                raise ProtocolError(
                    f"API response body could not be decoded: {method} {url}: {e}",
                    status_code=response.status_code,
                ) from e
            finally:
                await response.aclose()
        except httpx.TimeoutException as e:
            raise TransportError(f"API request timed out: {method} {url}: {e}") from e
        except httpx.TransportError as e:
            raise TransportError(f"Failed to reach API: {method} {url}: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP error occurred: {e}") from e

        if not response.is_success:
            # Limit error body size to prevent memory exhaustion
            error_body = response.content[:MAX_ERROR_BODY_SIZE]
            error_detail = error_body.decode(errors="replace")
            logger.warning(
                "%s %s failed with status %d", method, url, response.status_code
            )
            raise ProtocolError(
                f"API request failed with status {response.status_code}: {error_detail}",
                status_code=response.status_code,
                body=_lenient_json(error_detail),
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProtocolError(
                f"API response is not valid JSON: {e}",
                status_code=response.status_code,
                body=response.content[:MAX_ERROR_BODY_SIZE].decode(errors="replace"),
            ) from e

        if not isinstance(data, dict):
            raise ProtocolError(
                f"Expected JSON object in API response, got {type(data).__name__}",
                status_code=response.status_code,
                body=data,
            )

        if self._raw_log:
            self._raw_log.on_response(response.status_code, data)

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ProtocolError(
                f"Unexpected {model.__name__} shape in API response: {e}",
                status_code=response.status_code,
                body=data,
            ) from e


def _lenient_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return text
