"""GMO deferred-payment gateway bindings.

Operations:
- register: POST the transaction registration endpoint
"""

from finbind.deferred.client import DEFERRED_HOSTS, DeferredClient
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

__all__ = [
    "DEFERRED_HOSTS",
    "DeferredClient",
    "AuthorResult",
    "Buyer",
    "Delivery",
    "DeliveryCustomer",
    "Detail",
    "ErrorInfo",
    "HttpInfo",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterResult",
    "ShopInfo",
    "TransactionResult",
]
