"""Wire-level records of the GMO Aozora Net Bank corporate API.

The bank's JSON carries every code, count and amount as a string.
"""

from __future__ import annotations

from finbind.transport.wire import WireInt, WireModel


class TransferParam(WireModel):
    item_id: str = ""
    transfer_amount: WireInt = None
    edi_info: str = ""
    beneficiary_bank_code: str = ""
    beneficiary_bank_name: str = ""
    beneficiary_branch_code: str = ""
    beneficiary_branch_name: str = ""
    account_type_code: str | None = None
    account_number: str = ""
    beneficiary_name: str = ""


class TransferApplyParam(WireModel):
    apply_no: str = ""
    apply_datetime: str = ""
    apply_status: str = ""
    applicant_name: str = ""
    apply_comment: str = ""


class TransferAcceptParam(WireModel):
    accept_no: str = ""
    accept_datetime: str = ""


class TransferResponseParam(WireModel):
    account_id: str = ""
    remitter_name: str = ""
    transfer_designated_date: str = ""
    transfer_infos: list[TransferParam] | None = None


class TransferDetailParam(WireModel):
    transfer_status: str = ""
    transfer_status_name: str = ""
    transfer_type_name: str = ""
    is_fee_free_use: bool = False
    is_fee_point_use: bool = False
    point_name: str = ""
    fee_later_payment_flg: bool = False
    transfer_detail_fee: WireInt = None
    total_debit_amount: WireInt = None
    transfer_applies: list[TransferApplyParam] | None = None
    transfer_accepts: list[TransferAcceptParam] | None = None
    transfer_responses: list[TransferResponseParam] | None = None


class TransferQueryBulkResponseParam(WireModel):
    apply_no: str = ""
    transfer_status: str = ""
    transfer_status_name: str = ""
    transfer_type_name: str = ""
    remitter_name: str = ""
    transfer_designated_date: str = ""
    total_count: WireInt = None
    total_amount: WireInt = None


class GetTransferStatusResponseParam(WireModel):
    acceptance_key_class: str = ""
    base_date: str = ""
    base_time: str = ""
    count: WireInt = None
    has_next: bool = False
    next_item_key: str = ""
    transfer_query_bulk_responses: list[TransferQueryBulkResponseParam] | None = None
    transfer_details: list[TransferDetailParam] | None = None


class TransferRequestParam(WireModel):
    """JSON body of POST /transfer/request (credentials travel as headers)."""

    account_id: str = ""
    remitter_name: str = ""
    transfer_designated_date: str = ""
    transfer_date_holiday_code: str | None = None
    total_count: WireInt = None
    total_amount: WireInt = None
    apply_comment: str = ""
    transfers: list[TransferParam] | None = None


class TransferRequestResponseParam(WireModel):
    account_id: str = ""
    result_code: str = ""
    apply_no: str = ""
    apply_end_datetime: str = ""


class GetRequestResultResponseParam(WireModel):
    account_id: str = ""
    result_code: str = ""
    apply_no: str = ""
    apply_end_datetime: str = ""
