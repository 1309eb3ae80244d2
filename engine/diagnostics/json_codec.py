"""Fast JSON codec helpers for log records and state exports."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson


def dumps_bytes(
    payload: Any,
    *,
    pretty: bool = False,
    sort_keys: bool = False,
    default: Callable[[Any], Any] | None = None,
) -> bytes:
    """Serialize payload to UTF-8 JSON bytes."""
    options = orjson.OPT_SERIALIZE_NUMPY
    if pretty:
        options |= orjson.OPT_INDENT_2
    if sort_keys:
        options |= orjson.OPT_SORT_KEYS
    return orjson.dumps(payload, default=default, option=options)


def dumps_text(
    payload: Any,
    *,
    pretty: bool = False,
    sort_keys: bool = False,
    default: Callable[[Any], Any] | None = None,
) -> str:
    return dumps_bytes(payload, pretty=pretty, sort_keys=sort_keys, default=default).decode(
        "utf-8"
    )


def loads(raw: str | bytes) -> Any:
    """Parse JSON text or bytes."""
    return orjson.loads(raw)


__all__ = ["dumps_bytes", "dumps_text", "loads"]
