"""Async client for the GMO deferred-payment (atobarai) gateway."""

from __future__ import annotations

import logging

import httpx

from finbind.config.schema import APIHostType, DeferredConfig
from finbind.deferred import translate, wire
from finbind.deferred.models import RegisterRequest, RegisterResponse
from finbind.transport.base import BaseAPIClient, RawLogCallback

logger = logging.getLogger(__name__)

DEFERRED_HOSTS: dict[APIHostType, str] = {
    APIHostType.TEST: "https://testshop.gmo-ab.com",
    APIHostType.PRODUCTION: "https://shop.gmo-ab.com",
}


class DeferredClient(BaseAPIClient):
    """Client for registering deferred-payment transactions.

    Merchant credentials travel inside each request's ``shop_info``.
    """

    HOSTS = DEFERRED_HOSTS

    def __init__(
        self,
        config: DeferredConfig | None = None,
        *,
        host_type: APIHostType | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        raw_log: RawLogCallback | None = None,
    ) -> None:
        config = config or DeferredConfig()
        if host_type is not None:
            config = config.model_copy(update={"host_type": host_type})
        super().__init__(config, transport, raw_log)
        self._register_path = config.register_path

    async def register(
        self,
        request: RegisterRequest,
        *,
        timeout: float | None = None,
    ) -> RegisterResponse:
        """Register one transaction for credit screening.

        A rejected registration (result NG, or a non-empty error list) is
        returned, not raised.

        Raises:
            TransportError: If the gateway could not be reached.
            ProtocolError: If the gateway replied with an error status or an
                unexpected body.
        """
        body = translate.register_request_to_wire(request).to_body()
        param = await self._request(
            "POST", self._register_path, wire.RegisterResponseParam, json=body, timeout=timeout
        )
        response = translate.register_response_from_wire(param)
        if response.errors:
            logger.info(
                "Register returned %d error(s): %s",
                len(response.errors),
                ", ".join(e.error_code for e in response.errors),
            )
        return response
