"""Secrets redaction for log output.

Both APIs carry credentials in the request itself: the bank's access token
travels in a header, and the deferred gateway's shop password travels in the
JSON body. Everything that reaches a logger or a raw-log callback passes
through this module first.
"""

from typing import Any

# Redaction placeholder - clearly marks redacted content
REDACTED = "[REDACTED]"

# Header names are matched case-insensitively
SECRET_HEADERS = frozenset({"x-access-token", "authorization", "idempotency-key"})

# Body keys whose values are never logged (wire names, any nesting depth)
SECRET_KEYS = frozenset({"connectPassword", "authenticationId", "accessToken"})


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Return a copy of headers with credential values replaced.

    Args:
        headers: Outgoing request headers.

    Returns:
        A new dict; the original is not modified.
    """
    return {
        name: REDACTED if name.lower() in SECRET_HEADERS else value
        for name, value in headers.items()
    }


def redact_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Recursively redact secret keys from a JSON-like dictionary.

    Processes nested dicts and lists. Returns a new dict; the original is
    not modified.
    """
    return _redact_value(data)  # type: ignore[return-value]


def _redact_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            k: REDACTED if k in SECRET_KEYS and value[k] else _redact_value(v)
            for k, v in value.items()
        }
    elif isinstance(value, list):
        return [_redact_value(item) for item in value]
    elif isinstance(value, tuple):
        return tuple(_redact_value(item) for item in value)
    else:
        return value
