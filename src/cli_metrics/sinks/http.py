"""HTTP sink that posts heartbeats to the local usage collector."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from cli_metrics.encoding import RecordEncodingError, encode_record

USAGE_ENDPOINT = "http://localhost/usage"
JSON_HEADERS = {"Content-Type": "application/json"}


class HttpClient(Protocol):
    """Subset of ``requests.Session`` used for posting heartbeats."""

    def post(self, url: str, data: Any = None, **kwargs: Any) -> Any:
        """Send a POST request and return the response."""


class HttpSink:
    """Posts each record once to ``USAGE_ENDPOINT``; the outcome is ignored."""

    def __init__(self, client: HttpClient, *, logger: logging.Logger | None = None) -> None:
        self._client = client
        self._logger = logger or logging.getLogger("cli_metrics.sinks.http")

    def report(self, record: Any) -> None:
        try:
            entry = encode_record(record)
        except RecordEncodingError:
            self._logger.debug("heartbeat_encode_failed", exc_info=True)
            return

        try:
            response = self._client.post(USAGE_ENDPOINT, data=entry, headers=dict(JSON_HEADERS))
        except Exception:  # noqa: BLE001 - telemetry must not fail the caller.
            self._logger.debug("heartbeat_post_failed", exc_info=True, extra={"url": USAGE_ENDPOINT})
            return

        self._release(response)

    def _release(self, response: Any) -> None:
        close = getattr(response, "close", None)
        if not callable(close):
            return
        try:
            close()
        except Exception:  # noqa: BLE001
            self._logger.debug("heartbeat_response_close_failed", exc_info=True)
