"""Canonical JSON encoding for heartbeat records."""

from __future__ import annotations

import json
from typing import Any


class RecordEncodingError(ValueError):
    """Raised when a record cannot be turned into canonical JSON."""


def _as_payload(record: Any) -> Any:
    to_dict = getattr(record, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return record


def encode_record(record: Any) -> bytes:
    """Return the compact UTF-8 JSON form of ``record`` without a trailing newline.

    Mappings keep their insertion order. Values the standard encoder cannot
    handle, including NaN and infinities, are an error rather than being
    stringified. Any failure while building the payload, such as a raising
    ``to_dict()``, surfaces as ``RecordEncodingError``.
    """
    try:
        text = json.dumps(_as_payload(record), separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except Exception as exc:  # noqa: BLE001 - records are caller-built and untrusted.
        raise RecordEncodingError(f"{type(exc).__name__}: {exc}") from exc
    return text.encode("utf-8")
