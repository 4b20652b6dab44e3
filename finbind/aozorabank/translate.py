"""Translation between public records and the bank's wire records.

Outbound functions (``*_to_wire``) turn public requests into wire models;
inbound functions (``*_from_wire``) turn decoded replies into public
responses. Fields are copied one-to-one. Unset nested lists stay unset and
empty lists stay empty. Nothing is validated: an undocumented code is carried
through as its raw string.
"""

from __future__ import annotations

from finbind.aozorabank import wire
from finbind.aozorabank.models import (
    GetRequestResultResponse,
    GetTransferStatusResponse,
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
    ResultCode,
    TransferDateHolidayCode,
    TransferStatus,
)
from finbind.transport.convert import code_or_raw, code_to_wire, map_list, map_tuple


# --- Outbound ---


def transfer_to_wire(o: Transfer) -> wire.TransferParam:
    return wire.TransferParam(
        item_id=o.item_id,
        transfer_amount=o.transfer_amount,
        edi_info=o.edi_info,
        beneficiary_bank_code=o.beneficiary_bank_code,
        beneficiary_bank_name=o.beneficiary_bank_name,
        beneficiary_branch_code=o.beneficiary_branch_code,
        beneficiary_branch_name=o.beneficiary_branch_name,
        account_type_code=code_to_wire(o.account_type_code),
        account_number=o.account_number,
        beneficiary_name=o.beneficiary_name,
    )


def transfer_request_to_wire(o: TransferRequestRequest) -> wire.TransferRequestParam:
    """Build the JSON body of a transfer registration.

    The access token and idempotency key are not part of the body; the
    client sends them as headers.
    """
    return wire.TransferRequestParam(
        account_id=o.account_id,
        remitter_name=o.remitter_name,
        transfer_designated_date=o.transfer_designated_date,
        transfer_date_holiday_code=code_to_wire(o.transfer_date_holiday_code),
        total_count=o.total_count,
        total_amount=o.total_amount,
        apply_comment=o.apply_comment,
        transfers=map_list(o.transfers, transfer_to_wire),
    )


# --- Inbound ---


def transfer_from_wire(o: wire.TransferParam) -> Transfer:
    return Transfer(
        item_id=o.item_id,
        transfer_amount=o.transfer_amount,
        edi_info=o.edi_info,
        beneficiary_bank_code=o.beneficiary_bank_code,
        beneficiary_bank_name=o.beneficiary_bank_name,
        beneficiary_branch_code=o.beneficiary_branch_code,
        beneficiary_branch_name=o.beneficiary_branch_name,
        account_type_code=(
            None if o.account_type_code is None
            else code_or_raw(AccountTypeCode, o.account_type_code)
        ),
        account_number=o.account_number,
        beneficiary_name=o.beneficiary_name,
    )


def transfer_request_from_wire(
    o: wire.TransferRequestParam, access_token: str, idempotency_key: str
) -> TransferRequestRequest:
    """Rebuild a public transfer registration from its body and header values."""
    return TransferRequestRequest(
        access_token=access_token,
        idempotency_key=idempotency_key,
        account_id=o.account_id,
        remitter_name=o.remitter_name,
        transfer_designated_date=o.transfer_designated_date,
        transfer_date_holiday_code=(
            None if o.transfer_date_holiday_code is None
            else code_or_raw(TransferDateHolidayCode, o.transfer_date_holiday_code)
        ),
        total_count=o.total_count,
        total_amount=o.total_amount,
        apply_comment=o.apply_comment,
        transfers=map_tuple(o.transfers, transfer_from_wire),
    )


def transfer_apply_from_wire(o: wire.TransferApplyParam) -> TransferApply:
    return TransferApply(
        apply_no=o.apply_no,
        apply_datetime=o.apply_datetime,
        apply_status=o.apply_status,
        applicant_name=o.applicant_name,
        apply_comment=o.apply_comment,
    )


def transfer_accept_from_wire(o: wire.TransferAcceptParam) -> TransferAccept:
    return TransferAccept(accept_no=o.accept_no, accept_datetime=o.accept_datetime)


def transfer_response_from_wire(o: wire.TransferResponseParam) -> TransferResponse:
    return TransferResponse(
        account_id=o.account_id,
        remitter_name=o.remitter_name,
        transfer_designated_date=o.transfer_designated_date,
        transfer_infos=map_tuple(o.transfer_infos, transfer_from_wire),
    )


def transfer_detail_from_wire(o: wire.TransferDetailParam) -> TransferDetail:
    return TransferDetail(
        transfer_status=code_or_raw(TransferStatus, o.transfer_status),
        transfer_status_name=o.transfer_status_name,
        transfer_type_name=o.transfer_type_name,
        is_fee_free_use=o.is_fee_free_use,
        is_fee_point_use=o.is_fee_point_use,
        point_name=o.point_name,
        fee_later_payment_flg=o.fee_later_payment_flg,
        transfer_detail_fee=o.transfer_detail_fee,
        total_debit_amount=o.total_debit_amount,
        transfer_applies=map_tuple(o.transfer_applies, transfer_apply_from_wire),
        transfer_accepts=map_tuple(o.transfer_accepts, transfer_accept_from_wire),
        transfer_responses=map_tuple(o.transfer_responses, transfer_response_from_wire),
    )


def transfer_query_bulk_response_from_wire(
    o: wire.TransferQueryBulkResponseParam,
) -> TransferQueryBulkResponse:
    return TransferQueryBulkResponse(
        apply_no=o.apply_no,
        transfer_status=code_or_raw(TransferStatus, o.transfer_status),
        transfer_status_name=o.transfer_status_name,
        transfer_type_name=o.transfer_type_name,
        remitter_name=o.remitter_name,
        transfer_designated_date=o.transfer_designated_date,
        total_count=o.total_count,
        total_amount=o.total_amount,
    )


def transfer_status_response_from_wire(
    o: wire.GetTransferStatusResponseParam,
) -> GetTransferStatusResponse:
    return GetTransferStatusResponse(
        acceptance_key_class=o.acceptance_key_class,
        base_date=o.base_date,
        base_time=o.base_time,
        count=o.count,
        has_next=o.has_next,
        next_item_key=o.next_item_key,
        transfer_query_bulk_responses=map_tuple(
            o.transfer_query_bulk_responses, transfer_query_bulk_response_from_wire
        ),
        transfer_details=map_tuple(o.transfer_details, transfer_detail_from_wire),
    )


def transfer_request_response_from_wire(
    o: wire.TransferRequestResponseParam,
) -> TransferRequestResponse:
    return TransferRequestResponse(
        account_id=o.account_id,
        result_code=code_or_raw(ResultCode, o.result_code),
        apply_no=o.apply_no,
        apply_end_datetime=o.apply_end_datetime,
    )


def request_result_response_from_wire(
    o: wire.GetRequestResultResponseParam,
) -> GetRequestResultResponse:
    return GetRequestResultResponse(
        account_id=o.account_id,
        result_code=code_or_raw(ResultCode, o.result_code),
        apply_no=o.apply_no,
        apply_end_datetime=o.apply_end_datetime,
    )
