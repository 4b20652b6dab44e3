"""Code tables of the GMO Aozora Net Bank corporate API.

Every code travels as a short numeric string. Only the codes listed here are
documented by the bank; sending any other value is undefined on the bank side.
"""

from enum import Enum


class QueryKeyClass(str, Enum):
    """Which kind of transfer the status query looks up."""

    TRANSFER_APPLIES = "1"
    BULK_TRANSFER_APPLIES = "2"


class TransferStatus(str, Enum):
    """Processing state of a transfer."""

    APPLYING = "2"
    RETURNED = "3"
    WITHDRAWN = "4"
    EXPIRED = "5"
    APPROVAL_CANCELLED = "8"
    RESERVED = "11"
    IN_PROCESS = "12"
    RETRYING = "13"
    COMPLETED = "20"
    FUNDS_RETURNED = "22"
    REVERSAL_IN_PROCESS = "24"
    REVERSED = "25"
    REVERSAL_FAILED = "26"
    FAILED = "40"


class RequestTransferClass(str, Enum):
    """Which records the status query returns."""

    ALL = "1"
    TRANSFER_APPLIES_ONLY = "2"
    TRANSFER_ACCEPTS_ONLY = "3"


class RequestTransferTerm(str, Enum):
    """Which date dateFrom/dateTo filter on."""

    APPLY_DATE = "1"
    TRANSFER_DESIGNATED_DATE = "2"


class TransferDateHolidayCode(str, Enum):
    """What the bank does when the designated date is a holiday."""

    NEXT_BUSINESS_DAY = "1"
    PREVIOUS_BUSINESS_DAY = "2"
    ERROR = "3"


class AccountTypeCode(str, Enum):
    ORDINARY = "1"
    CURRENT = "2"
    SAVINGS = "4"
    OTHER = "9"


class ResultCode(str, Enum):
    """Outcome of a transfer registration."""

    COMPLETED = "1"
    NOT_COMPLETED = "2"
