"""Helpers for compact debug logging.

Owner identities are long account principals. This module shortens them
before they reach DEBUG logs so traces stay readable and do not dump full
addresses.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_IDENTITY_KEYS: frozenset[str] = frozenset(
    {
        "owner",
        "sender",
        "principal",
    }
)


def short_principal(value: str, *, keep: int = 6, tail: int = 4) -> str:
    """Return ``ST1PQH…GZGM`` style abbreviation of *value*.

    Values short enough to be readable are returned unchanged.
    """
    if len(value) <= keep + tail + 1:
        return value
    return f"{value[:keep]}…{value[-tail:]}"


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key.lower() in _IDENTITY_KEYS and isinstance(v, str):
                redacted[key] = short_principal(v)
            else:
                redacted[key] = redact_for_log(v, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    return repr(value)
