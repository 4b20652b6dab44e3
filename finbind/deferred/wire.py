"""Wire-level records of the GMO deferred-payment gateway."""

from __future__ import annotations

from finbind.transport.wire import WireModel


class ShopInfoParam(WireModel):
    authentication_id: str = ""
    shop_code: str = ""
    connect_password: str = ""


class HttpInfoParam(WireModel):
    http_header: str = ""
    device_info: str = ""


class BuyerParam(WireModel):
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


class DeliveryCustomerParam(WireModel):
    full_name: str = ""
    full_name_kana: str = ""
    zip_code: str = ""
    address: str = ""
    company_name: str = ""
    department_name: str = ""
    tel: str = ""


class DetailParam(WireModel):
    detail_name: str = ""
    detail_price: str = ""
    detail_quantity: str = ""
    gmo_extend2: str = ""
    gmo_extend3: str = ""
    gmo_extend4: str = ""
    detail_brand: str = ""
    detail_category: str = ""


class DeliveryParam(WireModel):
    delivery_customer: DeliveryCustomerParam | None = None
    details: list[DetailParam] | None = None


class RegisterRequestParam(WireModel):
    """JSON body of the register call."""

    shop_info: ShopInfoParam
    http_info: HttpInfoParam | None = None
    buyer: BuyerParam
    deliveries: list[DeliveryParam] | None = None


class ErrorParam(WireModel):
    error_code: str = ""
    error_message: str = ""


class TransactionResultParam(WireModel):
    shop_transaction_id: str = ""
    gmo_transaction_id: str = ""
    author_result: str = ""


class RegisterResponseParam(WireModel):
    result: str = ""
    errors: list[ErrorParam] | None = None
    transaction_result: TransactionResultParam | None = None
