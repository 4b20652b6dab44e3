"""Translation between public records and the gateway's wire records.

Flat records share field names on both sides and are copied field by field.
Nested records keep their presence: an unset delivery customer stays unset
(it is never replaced by an empty record), and a list keeps its order, with
an empty list staying empty rather than becoming unset.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, TypeVar

from finbind.deferred import wire
from finbind.deferred.models import (
    AuthorResult,
    Buyer,
    Delivery,
    DeliveryCustomer,
    Detail,
    ErrorInfo,
    HttpInfo,
    RegisterRequest,
    RegisterResponse,
    RegisterResult,
    ShopInfo,
    TransactionResult,
)
from finbind.transport.convert import code_or_raw, map_list, map_tuple, optional

T = TypeVar("T")
W = TypeVar("W", bound=wire.WireModel)


def _to_param(o: Any, param_cls: type[W]) -> W:
    return param_cls(**{name: getattr(o, name) for name in param_cls.model_fields})


def _from_param(o: wire.WireModel, record_cls: type[T]) -> T:
    return record_cls(**{f.name: getattr(o, f.name) for f in fields(record_cls)})  # type: ignore[arg-type]


# --- Outbound ---


def shop_info_to_wire(o: ShopInfo) -> wire.ShopInfoParam:
    return _to_param(o, wire.ShopInfoParam)


def http_info_to_wire(o: HttpInfo) -> wire.HttpInfoParam:
    return _to_param(o, wire.HttpInfoParam)


def buyer_to_wire(o: Buyer) -> wire.BuyerParam:
    return _to_param(o, wire.BuyerParam)


def delivery_customer_to_wire(o: DeliveryCustomer) -> wire.DeliveryCustomerParam:
    return _to_param(o, wire.DeliveryCustomerParam)


def detail_to_wire(o: Detail) -> wire.DetailParam:
    return _to_param(o, wire.DetailParam)


def delivery_to_wire(o: Delivery) -> wire.DeliveryParam:
    return wire.DeliveryParam(
        delivery_customer=optional(o.delivery_customer, delivery_customer_to_wire),
        details=map_list(o.details, detail_to_wire),
    )


def register_request_to_wire(o: RegisterRequest) -> wire.RegisterRequestParam:
    return wire.RegisterRequestParam(
        shop_info=shop_info_to_wire(o.shop_info),
        http_info=optional(o.http_info, http_info_to_wire),
        buyer=buyer_to_wire(o.buyer),
        deliveries=map_list(o.deliveries, delivery_to_wire),
    )


# --- Inbound ---


def shop_info_from_wire(o: wire.ShopInfoParam) -> ShopInfo:
    return _from_param(o, ShopInfo)


def http_info_from_wire(o: wire.HttpInfoParam) -> HttpInfo:
    return _from_param(o, HttpInfo)


def buyer_from_wire(o: wire.BuyerParam) -> Buyer:
    return _from_param(o, Buyer)


def delivery_customer_from_wire(o: wire.DeliveryCustomerParam) -> DeliveryCustomer:
    return _from_param(o, DeliveryCustomer)


def detail_from_wire(o: wire.DetailParam) -> Detail:
    return _from_param(o, Detail)


def delivery_from_wire(o: wire.DeliveryParam) -> Delivery:
    return Delivery(
        delivery_customer=optional(o.delivery_customer, delivery_customer_from_wire),
        details=map_tuple(o.details, detail_from_wire),
    )


def register_request_from_wire(o: wire.RegisterRequestParam) -> RegisterRequest:
    return RegisterRequest(
        shop_info=shop_info_from_wire(o.shop_info),
        http_info=optional(o.http_info, http_info_from_wire),
        buyer=buyer_from_wire(o.buyer),
        deliveries=map_tuple(o.deliveries, delivery_from_wire),
    )


def error_from_wire(o: wire.ErrorParam) -> ErrorInfo:
    return ErrorInfo(error_code=o.error_code, error_message=o.error_message)


def transaction_result_from_wire(o: wire.TransactionResultParam) -> TransactionResult:
    return TransactionResult(
        shop_transaction_id=o.shop_transaction_id,
        gmo_transaction_id=o.gmo_transaction_id,
        author_result=code_or_raw(AuthorResult, o.author_result),
    )


def register_response_from_wire(o: wire.RegisterResponseParam) -> RegisterResponse:
    return RegisterResponse(
        result=code_or_raw(RegisterResult, o.result),
        errors=map_tuple(o.errors, error_from_wire),
        transaction_result=optional(o.transaction_result, transaction_result_from_wire),
    )
