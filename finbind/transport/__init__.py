"""HTTP transport shared by the API clients."""

from finbind.transport.base import BaseAPIClient, RawLogCallback
from finbind.transport.wire import WireInt, WireModel

__all__ = ["BaseAPIClient", "RawLogCallback", "WireInt", "WireModel"]
