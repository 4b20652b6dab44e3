"""Query-string encoding for the bank's GET endpoints.

Each request field maps to a fixed query key. Empty text and unset codes are
left out entirely, and the remaining keys are emitted in lexicographic order,
so one request always encodes to the same string.

The status filter list uses the bank's bracketed filter notation: one
``map[key:value]`` group per entry, groups separated by spaces, the whole list
wrapped in brackets. A single ``TransferStatus.APPLYING`` entry is sent as
``[map[requestTransferStatus:2]]``; an explicitly empty list is sent as ``[]``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from urllib.parse import quote_plus

from finbind.aozorabank.models import GetRequestResultRequest, GetTransferStatusRequest


def _text(value: Enum | str | int | None) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def render_filter_list(entries: Iterable[Mapping[str, Enum | str | int]]) -> str:
    """Render a list filter in the bank's bracketed notation.

    Keys inside a group are sorted so the rendering is deterministic.

    Example:
        >>> render_filter_list([{"requestTransferStatus": "2"}])
        '[map[requestTransferStatus:2]]'
    """
    groups = []
    for entry in entries:
        pairs = " ".join(f"{key}:{_text(entry[key])}" for key in sorted(entry))
        groups.append(f"map[{pairs}]")
    return "[" + " ".join(groups) + "]"


def encode_query(params: Mapping[str, str]) -> str:
    """Percent-encode params with keys in sorted order, dropping empty values."""
    return "&".join(
        f"{quote_plus(key)}={quote_plus(value)}"
        for key, value in sorted(params.items())
        if value != ""
    )


def transfer_status_params(request: GetTransferStatusRequest) -> dict[str, str]:
    """Map a transfer status query onto its query keys (unencoded)."""
    params = {
        "accountId": request.account_id,
        "queryKeyClass": _text(request.query_key_class),
        "applyNo": request.apply_no,
        "dateFrom": request.date_from,
        "dateTo": request.date_to,
        "nextItemKey": request.next_item_key,
        "requestTransferClass": _text(request.request_transfer_class),
        "requestTransferTerm": _text(request.request_transfer_term),
    }
    if request.request_transfer_statuses is not None:
        params["requestTransferStatus"] = render_filter_list(
            {"requestTransferStatus": s.request_transfer_status}
            for s in request.request_transfer_statuses
        )
    return params


def encode_transfer_status_query(request: GetTransferStatusRequest) -> str:
    """Encode GET /transfer/status parameters.

    Example:
        A request with only account_id="111111111111" and
        query_key_class=QueryKeyClass.TRANSFER_APPLIES encodes to
        ``accountId=111111111111&queryKeyClass=1``.
    """
    return encode_query(transfer_status_params(request))


def encode_request_result_query(request: GetRequestResultRequest) -> str:
    """Encode GET /transfer/request-result parameters."""
    return encode_query({"accountId": request.account_id, "applyNo": request.apply_no})
