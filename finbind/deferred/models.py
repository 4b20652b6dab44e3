"""Public request/response records for the GMO deferred-payment gateway.

Every text field is a plain string, as the gateway defines them (amounts and
dates included). Nested records that the gateway treats as optional default
to None and are then left out of the request altogether.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RegisterResult(str, Enum):
    """Overall outcome of a register call."""

    OK = "OK"
    NG = "NG"


class AuthorResult(str, Enum):
    """Credit screening outcome of a registered transaction."""

    OK = "OK"
    NG = "NG"
    UNDER_REVIEW = "審査中"
    ON_HOLD = "保留"


@dataclass(frozen=True)
class ShopInfo:
    """Merchant credentials, issued by the gateway per shop."""

    authentication_id: str
    shop_code: str
    connect_password: str


@dataclass(frozen=True)
class HttpInfo:
    """Buyer's browser information, used for fraud screening."""

    http_header: str = ""
    device_info: str = ""


@dataclass(frozen=True)
class Buyer:
    shop_transaction_id: str = ""
    shop_order_date: str = ""
    full_name: str = ""
    full_name_kana: str = ""
    zip_code: str = ""
    address: str = ""
    company_name: str = ""
    department_name: str = ""
    tel1: str = ""
    tel2: str = ""
    email: str = ""
    email2: str = ""
    billed_amount: str = ""
    gmo_extend1: str = ""
    payment_type: str = ""
    sex: str = ""
    birth_day: str = ""
    member_regist_date: str = ""
    buy_count: str = ""
    buy_amount_total: str = ""
    member_id: str = ""


@dataclass(frozen=True)
class DeliveryCustomer:
    """Ship-to party, when it differs from the buyer."""

    full_name: str = ""
    full_name_kana: str = ""
    zip_code: str = ""
    address: str = ""
    company_name: str = ""
    department_name: str = ""
    tel: str = ""


@dataclass(frozen=True)
class Detail:
    """One line item of a delivery."""

    detail_name: str = ""
    detail_price: str = ""
    detail_quantity: str = ""
    gmo_extend2: str = ""
    gmo_extend3: str = ""
    gmo_extend4: str = ""
    detail_brand: str = ""
    detail_category: str = ""


@dataclass(frozen=True)
class Delivery:
    """One shipment: an optional ship-to party and its line items.

    Attributes:
        delivery_customer: None ships to the buyer.
        details: Line items; None sends no list, () sends an empty one.
    """

    delivery_customer: DeliveryCustomer | None = None
    details: tuple[Detail, ...] | None = None


@dataclass(frozen=True)
class RegisterRequest:
    """Registration of one deferred-payment transaction."""

    shop_info: ShopInfo
    buyer: Buyer
    deliveries: tuple[Delivery, ...] | None = None
    http_info: HttpInfo | None = None


@dataclass(frozen=True)
class ErrorInfo:
    """One business error reported by the gateway."""

    error_code: str = ""
    error_message: str = ""


@dataclass(frozen=True)
class TransactionResult:
    shop_transaction_id: str = ""
    gmo_transaction_id: str = ""
    author_result: AuthorResult | str = ""


@dataclass(frozen=True)
class RegisterResponse:
    """Reply of a register call.

    Business errors are reported here rather than raised: check ``result``
    and ``errors`` after every call.
    """

    result: RegisterResult | str = ""
    errors: tuple[ErrorInfo, ...] | None = None
    transaction_result: TransactionResult | None = None

    @property
    def ok(self) -> bool:
        """Return True if the gateway accepted the registration without errors."""
        return self.result == RegisterResult.OK and not self.errors
