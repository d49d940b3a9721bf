"""Helpers for safe debug logging.

Materialized infrastructure state routinely holds secrets (passwords,
private keys, tokens). This module masks such attributes and truncates
long values before a flat state map is emitted to DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping

# Compared against the last segment of a flattened key, lowercased.
_SENSITIVE_FIELD_NAMES: frozenset[str] = frozenset(
    {
        "password",
        "master_password",
        "secret",
        "client_secret",
        "secret_key",
        "access_key",
        "token",
        "auth_token",
        "private_key",
        "private_key_pem",
        "session_token",
        "authorization",
        "cookie",
    }
)


def _is_sensitive(key: str, separator: str) -> bool:
    return key.rsplit(separator, 1)[-1].lower() in _SENSITIVE_FIELD_NAMES


def redact_for_log(
    attributes: Mapping[str, str],
    *,
    separator: str = ".",
    max_string: int = 512,
) -> dict[str, str]:
    """Return a redacted copy of a flat attribute map suitable for debug logs."""
    redacted: dict[str, str] = {}
    for key, value in attributes.items():
        if _is_sensitive(key, separator):
            redacted[key] = "<redacted>"
        elif len(value) > max_string:
            redacted[key] = f"{value[:max_string]}…<truncated>"
        else:
            redacted[key] = value
    return redacted
