"""Pydantic models for finbind configuration validation."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class APIHostType(str, Enum):
    """Which deployment of an external API a client talks to."""

    TEST = "test"
    PRODUCTION = "production"


class ClientConfig(BaseModel):
    """Settings shared by every API client.

    Host selection is fixed when a client is constructed; the client never
    reads these values again after its constructor returns.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    host_type: APIHostType = APIHostType.TEST
    """Deployment to call: test or production."""

    base_url: str | None = None
    """Overrides the static host table (e.g. a local mock server)."""

    request_timeout: float = Field(default=30.0, gt=0)
    """Timeout in seconds for a single API call."""

    verify_ssl: bool = True
    """Verify SSL certificates. Only disable for trusted internal test servers."""

    ssl_ca_cert: str | None = None
    """Path to CA certificate file for SSL verification."""

    extra_headers: dict[str, str] = {}
    """Additional headers to include in every request."""

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        """Normalize base_url so paths can be appended with a leading slash."""
        if v is None:
            return None
        v = v.strip().rstrip("/")
        if not v.startswith(("https://", "http://")):
            raise ValueError(f"base_url must include a scheme (https:// or http://): {v!r}")
        return v


class AozoraBankConfig(ClientConfig):
    """Configuration for the GMO Aozora Net Bank corporate API client."""


class DeferredConfig(ClientConfig):
    """Configuration for the GMO deferred-payment gateway client."""

    register_path: str = "/auto/transaction.do"
    """Path of the transaction registration endpoint."""


class Config(BaseModel):
    """Top-level finbind configuration.

    Example config.json:
        {
            "aozorabank": {"host_type": "production", "request_timeout": 10},
            "deferred": {"host_type": "test"}
        }
    """

    model_config = ConfigDict(extra="forbid")

    aozorabank: AozoraBankConfig = AozoraBankConfig()
    deferred: DeferredConfig = DeferredConfig()
