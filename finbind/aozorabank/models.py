"""Public request/response records for the GMO Aozora Net Bank client.

All dataclasses are frozen. Optional text fields default to "" and are left
out of the request when empty. Optional codes, amounts and lists default to
None; for lists, None (not sent) and an empty tuple (sent as empty) are
different requests.

Response code fields hold the matching enum member when the bank sends a
documented code, and the raw string otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass

from finbind.aozorabank.types import (
    AccountTypeCode,
    QueryKeyClass,
    RequestTransferClass,
    RequestTransferTerm,
    ResultCode,
    TransferDateHolidayCode,
    TransferStatus,
)


# --- Transfer status query (GET /transfer/status) ---


@dataclass(frozen=True)
class RequestTransferStatus:
    """One entry of the status filter list."""

    request_transfer_status: TransferStatus


@dataclass(frozen=True)
class GetTransferStatusRequest:
    """Query of transfer applications and their processing state.

    Attributes:
        access_token: Caller-supplied API token, sent as a header.
        account_id: Bank account ID (12 digits). Required.
        query_key_class: Kind of transfer to look up. Required.
        apply_no: Restrict to one application number.
        date_from: Start of the date range (YYYY-MM-DD).
        date_to: End of the date range (YYYY-MM-DD).
        next_item_key: Continuation key from a previous reply.
        request_transfer_statuses: Status filter; None sends no filter.
        request_transfer_class: Which records to return.
        request_transfer_term: Which date the range applies to.
    """

    access_token: str
    account_id: str
    query_key_class: QueryKeyClass
    apply_no: str = ""
    date_from: str = ""
    date_to: str = ""
    next_item_key: str = ""
    request_transfer_statuses: tuple[RequestTransferStatus, ...] | None = None
    request_transfer_class: RequestTransferClass | None = None
    request_transfer_term: RequestTransferTerm | None = None


@dataclass(frozen=True)
class Transfer:
    """One beneficiary line of a transfer."""

    item_id: str = ""
    transfer_amount: int | None = None
    edi_info: str = ""
    beneficiary_bank_code: str = ""
    beneficiary_bank_name: str = ""
    beneficiary_branch_code: str = ""
    beneficiary_branch_name: str = ""
    account_type_code: AccountTypeCode | str | None = None
    account_number: str = ""
    beneficiary_name: str = ""


@dataclass(frozen=True)
class TransferApply:
    apply_no: str = ""
    apply_datetime: str = ""
    apply_status: str = ""
    applicant_name: str = ""
    apply_comment: str = ""


@dataclass(frozen=True)
class TransferAccept:
    accept_no: str = ""
    accept_datetime: str = ""


@dataclass(frozen=True)
class TransferResponse:
    account_id: str = ""
    remitter_name: str = ""
    transfer_designated_date: str = ""
    transfer_infos: tuple[Transfer, ...] | None = None


@dataclass(frozen=True)
class TransferDetail:
    """Status record of one transfer application."""

    transfer_status: TransferStatus | str = ""
    transfer_status_name: str = ""
    transfer_type_name: str = ""
    is_fee_free_use: bool = False
    is_fee_point_use: bool = False
    point_name: str = ""
    fee_later_payment_flg: bool = False
    transfer_detail_fee: int | None = None
    total_debit_amount: int | None = None
    transfer_applies: tuple[TransferApply, ...] | None = None
    transfer_accepts: tuple[TransferAccept, ...] | None = None
    transfer_responses: tuple[TransferResponse, ...] | None = None


@dataclass(frozen=True)
class TransferQueryBulkResponse:
    """Status record of one bulk transfer application."""

    apply_no: str = ""
    transfer_status: TransferStatus | str = ""
    transfer_status_name: str = ""
    transfer_type_name: str = ""
    remitter_name: str = ""
    transfer_designated_date: str = ""
    total_count: int | None = None
    total_amount: int | None = None


@dataclass(frozen=True)
class GetTransferStatusResponse:
    acceptance_key_class: str = ""
    base_date: str = ""
    base_time: str = ""
    count: int | None = None
    has_next: bool = False
    next_item_key: str = ""
    transfer_query_bulk_responses: tuple[TransferQueryBulkResponse, ...] | None = None
    transfer_details: tuple[TransferDetail, ...] | None = None


# --- Transfer registration (POST /transfer/request) ---


@dataclass(frozen=True)
class TransferRequestRequest:
    """Registration of a transfer application.

    Attributes:
        access_token: Caller-supplied API token, sent as a header.
        idempotency_key: Caller-chosen key; the bank rejects replays of it.
        account_id: Remitting account ID. Required.
        remitter_name: Remitter name in half-width kana.
        transfer_designated_date: Transfer date (YYYY-MM-DD).
        transfer_date_holiday_code: Holiday handling for the designated date.
        total_count: Number of transfer lines.
        total_amount: Sum of transfer amounts in yen.
        apply_comment: Free-text comment for the approver.
        transfers: Beneficiary lines.
    """

    access_token: str
    idempotency_key: str
    account_id: str
    remitter_name: str = ""
    transfer_designated_date: str = ""
    transfer_date_holiday_code: TransferDateHolidayCode | None = None
    total_count: int | None = None
    total_amount: int | None = None
    apply_comment: str = ""
    transfers: tuple[Transfer, ...] | None = None


@dataclass(frozen=True)
class TransferRequestResponse:
    account_id: str = ""
    result_code: ResultCode | str = ""
    apply_no: str = ""
    apply_end_datetime: str = ""


# --- Transfer request result (GET /transfer/request-result) ---


@dataclass(frozen=True)
class GetRequestResultRequest:
    access_token: str
    account_id: str
    apply_no: str


@dataclass(frozen=True)
class GetRequestResultResponse:
    account_id: str = ""
    result_code: ResultCode | str = ""
    apply_no: str = ""
    apply_end_datetime: str = ""
