"""Best-effort coercion of loosely typed JSON values."""

from __future__ import annotations

import json
import math
from typing import Any

NONE = "(none)"
UNSET = "<unset>"

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MASK = 0xFFFFFFFF


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a JSON number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def make_string(value: Any) -> str:
    """Return ``value`` if it is a JSON string, else the ``(none)`` sentinel."""
    if isinstance(value, str):
        return value
    return NONE


def str_or_none(entry: dict[str, Any], key: str) -> str:
    """Look up ``key`` in ``entry`` and coerce it with :func:`make_string`."""
    return make_string(entry.get(key))


def get_i32(value: Any) -> int | None:
    """Coerce a JSON number to a signed 32-bit integer.

    Floats are truncated toward zero and out-of-range values saturate at the
    32-bit bounds. Anything that is not a number yields ``None``.
    """
    if not _is_number(value):
        return None
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return _I32_MAX if value > 0 else _I32_MIN
        value = int(value)
    return max(_I32_MIN, min(_I32_MAX, value))


def get_u32(value: Any) -> int | None:
    """Coerce a non-negative JSON integer to an unsigned 32-bit integer (low 32 bits kept)."""
    if not _is_number(value) or isinstance(value, float) or value < 0:
        return None
    return value & _U32_MASK


def json_text(value: Any) -> str:
    """Render a raw JSON value in its textual form (``true``, ``null``, ``"x"``...)."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def as_mapping(value: Any) -> dict[str, Any] | None:
    """Return ``value`` if it is a JSON object, else ``None``."""
    return value if isinstance(value, dict) else None


def optional_str(value: int | None) -> str:
    """Render an optional number, ``<unset>`` when absent."""
    return UNSET if value is None else str(value)
