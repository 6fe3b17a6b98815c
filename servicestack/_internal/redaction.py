"""Masking of sensitive values before request bodies reach debug output."""

from typing import Any

SENSITIVE_KEYS: frozenset[str] = frozenset({
    "access_token",
    "api_key",
    "apikey",
    "auth_token",
    "authorization",
    "bearer_token",
    "client_secret",
    "password",
    "refresh_token",
    "secret",
    "token",
})

REDACTED_VALUE = "[REDACTED]"


def redact(data: Any) -> Any:
    """Return a copy of JSON-compatible data with sensitive values masked.

    Keys are compared case-insensitively against SENSITIVE_KEYS at every
    nesting level. The input is never mutated.
    """
    if isinstance(data, dict):
        return {
            key: REDACTED_VALUE if _is_sensitive(key) else redact(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [redact(item) for item in data]
    return data


def _is_sensitive(key: Any) -> bool:
    return isinstance(key, str) and key.lower() in SENSITIVE_KEYS
