"""GMO Aozora Net Bank corporate API bindings.

Operations:
- get_transfer_status: GET /transfer/status
- transfer_request: POST /transfer/request
- get_request_result: GET /transfer/request-result
"""

from finbind.aozorabank.client import AOZORA_HOSTS, AozoraBankClient
from finbind.aozorabank.models import (
    GetRequestResultRequest,
    GetRequestResultResponse,
    GetTransferStatusRequest,
    GetTransferStatusResponse,
    RequestTransferStatus,
    Transfer,
    TransferAccept,
    TransferApply,
    TransferDetail,
    TransferQueryBulkResponse,
    TransferRequestRequest,
    TransferRequestResponse,
    TransferResponse,
)
from finbind.aozorabank.types import (
    AccountTypeCode,
    QueryKeyClass,
    RequestTransferClass,
    RequestTransferTerm,
    ResultCode,
    TransferDateHolidayCode,
    TransferStatus,
)

__all__ = [
    "AOZORA_HOSTS",
    "AozoraBankClient",
    # requests/responses
    "GetRequestResultRequest", "GetRequestResultResponse",
    "GetTransferStatusRequest", "GetTransferStatusResponse",
    "RequestTransferStatus", "Transfer", "TransferAccept", "TransferApply",
    "TransferDetail", "TransferQueryBulkResponse", "TransferRequestRequest",
    "TransferRequestResponse", "TransferResponse",
    # codes
    "AccountTypeCode", "QueryKeyClass", "RequestTransferClass",
    "RequestTransferTerm", "ResultCode", "TransferDateHolidayCode", "TransferStatus",
]
