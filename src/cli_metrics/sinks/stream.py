"""JSON-lines sink over any writable byte destination."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from cli_metrics.encoding import RecordEncodingError, encode_record


class ByteWriter(Protocol):
    def write(self, data: bytes) -> Any:
        """Append ``data`` to the destination."""


class StreamSink:
    """Writes each record as one JSON line to a caller-owned destination.

    The destination is never closed here; files should be opened in append
    mode so the output stays line-delimited JSON.
    """

    def __init__(self, destination: ByteWriter, *, logger: logging.Logger | None = None) -> None:
        self._destination = destination
        self._logger = logger or logging.getLogger("cli_metrics.sinks.stream")

    def report(self, record: Any) -> None:
        try:
            entry = encode_record(record)
        except RecordEncodingError:
            self._logger.debug("heartbeat_encode_failed", exc_info=True)
            return

        try:
            self._destination.write(entry + b"\n")
            flush = getattr(self._destination, "flush", None)
            if callable(flush):
                flush()
        except Exception:  # noqa: BLE001 - telemetry must not fail the caller.
            self._logger.debug("heartbeat_write_failed", exc_info=True)
