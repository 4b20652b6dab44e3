"""Async client for the GMO Aozora Net Bank corporate API.

Example:
    from finbind.aozorabank import AozoraBankClient, GetTransferStatusRequest, QueryKeyClass
    from finbind.config import APIHostType

    async with AozoraBankClient(host_type=APIHostType.TEST) as client:
        status = await client.get_transfer_status(
            GetTransferStatusRequest(
                access_token=token,
                account_id="111111111111",
                query_key_class=QueryKeyClass.TRANSFER_APPLIES,
            )
        )
"""

from __future__ import annotations

import logging

import httpx

from finbind.aozorabank import translate, wire
from finbind.aozorabank.models import (
    GetRequestResultRequest,
    GetRequestResultResponse,
    GetTransferStatusRequest,
    GetTransferStatusResponse,
    TransferRequestRequest,
    TransferRequestResponse,
)
from finbind.aozorabank.query import encode_request_result_query, encode_transfer_status_query
from finbind.config.schema import APIHostType, AozoraBankConfig
from finbind.transport.base import BaseAPIClient, RawLogCallback

logger = logging.getLogger(__name__)

# Base URL per deployment
AOZORA_HOSTS: dict[APIHostType, str] = {
    APIHostType.TEST: "https://api.sunabar.gmo-aozora.com/corporation/v1",
    APIHostType.PRODUCTION: "https://api.gmo-aozora.com/ganb/api/corporation/v1",
}

ACCESS_TOKEN_HEADER = "x-access-token"
IDEMPOTENCY_KEY_HEADER = "Idempotency-Key"


class AozoraBankClient(BaseAPIClient):
    """Client for transfer status, transfer registration and request results.

    Every operation makes exactly one HTTP request. Tokens are taken from
    each request value; the client stores none.
    """

    HOSTS = AOZORA_HOSTS

    def __init__(
        self,
        config: AozoraBankConfig | None = None,
        *,
        host_type: APIHostType | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        raw_log: RawLogCallback | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client configuration. Defaults to the test host.
            host_type: Overrides config.host_type.
            transport: Optional httpx transport used instead of the network.
            raw_log: Optional callback for raw API logging.
        """
        config = config or AozoraBankConfig()
        if host_type is not None:
            config = config.model_copy(update={"host_type": host_type})
        super().__init__(config, transport, raw_log)

    async def get_transfer_status(
        self,
        request: GetTransferStatusRequest,
        *,
        timeout: float | None = None,
    ) -> GetTransferStatusResponse:
        """Query transfer applications and their processing state.

        Raises:
            TransportError: If the bank could not be reached.
            ProtocolError: If the bank replied with an error status or an
                unexpected body.
        """
        param = await self._request(
            "GET",
            "/transfer/status",
            wire.GetTransferStatusResponseParam,
            query=encode_transfer_status_query(request),
            headers={ACCESS_TOKEN_HEADER: request.access_token},
            timeout=timeout,
        )
        return translate.transfer_status_response_from_wire(param)

    async def transfer_request(
        self,
        request: TransferRequestRequest,
        *,
        timeout: float | None = None,
    ) -> TransferRequestResponse:
        """Register a transfer application.

        Raises:
            TransportError: If the bank could not be reached.
            ProtocolError: If the bank replied with an error status or an
                unexpected body.
        """
        body = translate.transfer_request_to_wire(request).to_body(omit_empty=True)
        param = await self._request(
            "POST",
            "/transfer/request",
            wire.TransferRequestResponseParam,
            json=body,
            headers={
                ACCESS_TOKEN_HEADER: request.access_token,
                IDEMPOTENCY_KEY_HEADER: request.idempotency_key,
            },
            timeout=timeout,
        )
        logger.debug("Transfer registered: apply_no=%s", param.apply_no)
        return translate.transfer_request_response_from_wire(param)

    async def get_request_result(
        self,
        request: GetRequestResultRequest,
        *,
        timeout: float | None = None,
    ) -> GetRequestResultResponse:
        """Fetch the registration result of a transfer application."""
        param = await self._request(
            "GET",
            "/transfer/request-result",
            wire.GetRequestResultResponseParam,
            query=encode_request_result_query(request),
            headers={ACCESS_TOKEN_HEADER: request.access_token},
            timeout=timeout,
        )
        return translate.request_result_response_from_wire(param)
