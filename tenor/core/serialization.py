"""Canonical serialization and process-independent hashing.

canonical_bytes(obj) -> Result[bytes, str]: deterministic JSON bytes.
stable_hash(obj) -> int: 64-bit hash that does not depend on PYTHONHASHSEED.
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
from datetime import UTC, date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from tenor.core.result import Err, Ok
from tenor.core.types import UtcDatetime

_MASK_64 = (1 << 64) - 1


def _to_serializable(obj: object) -> Any:  # noqa: PLR0911
    """Recursively convert a domain object to a JSON-compatible Python value."""
    if obj is None:
        return None
    # bool before int (bool is subclass of int)
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, int):
        return obj
    if isinstance(obj, str):
        return obj
    if isinstance(obj, Decimal):
        # all zeros map to "0" so that equal Decimals encode identically
        if obj == 0:
            return "0"
        return str(obj.normalize())
    if isinstance(obj, UtcDatetime):
        return obj.value.isoformat()
    if isinstance(obj, datetime):
        if obj.tzinfo is None:
            msg = "Cannot serialize naive datetime, use UtcDatetime"
            raise TypeError(msg)
        return obj.astimezone(UTC).isoformat()
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, (tuple, list)):
        return [_to_serializable(x) for x in obj]
    if isinstance(obj, frozenset):
        return sorted((_to_serializable(x) for x in obj), key=json.dumps)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {str(k): _to_serializable(v) for k, v in sorted(obj.items())}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        result: dict[str, Any] = {"_type": type(obj).__name__}
        for f in dataclasses.fields(obj):
            result[f.name] = _to_serializable(getattr(obj, f.name))
        return result
    msg = f"Cannot serialize {type(obj).__name__}"
    raise TypeError(msg)


def canonical_bytes(obj: object) -> Ok[bytes] | Err[str]:
    """Convert a value to canonical JSON bytes.

    Returns Err on unsupported types. Type names are part of the encoding.
    """
    try:
        serializable = _to_serializable(obj)
    except TypeError as e:
        return Err(f"Unsupported type in canonical serialization: {e}")
    return Ok(
        json.dumps(serializable, sort_keys=True, separators=(",", ":")).encode("utf-8")
    )


def stable_hash(obj: object) -> int:
    """64-bit hash of the canonical encoding of obj.

    Values outside the canonical encoding fall back to the builtin hash,
    which keeps equal values hashing equally but is only stable within
    one process.
    """
    match canonical_bytes(obj):
        case Ok(b):
            return int.from_bytes(hashlib.sha256(b).digest()[:8], "big")
        case Err():
            return hash(obj) & _MASK_64
