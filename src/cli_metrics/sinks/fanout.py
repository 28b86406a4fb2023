"""Sink that forwards every record to several sinks in order."""

from __future__ import annotations

import logging
from typing import Any

from cli_metrics.sinks.base import Sink


class FanoutSink:
    """Reports to each member sink sequentially, in construction order."""

    def __init__(self, *sinks: Sink, logger: logging.Logger | None = None) -> None:
        self._sinks: tuple[Sink, ...] = tuple(sinks)
        self._logger = logger or logging.getLogger("cli_metrics.sinks.fanout")

    @property
    def sinks(self) -> tuple[Sink, ...]:
        return self._sinks

    def report(self, record: Any) -> None:
        for index, sink in enumerate(self._sinks):
            try:
                sink.report(record)
            except Exception:  # noqa: BLE001 - a misbehaving member must not block the rest.
                self._logger.debug(
                    "heartbeat_member_failed",
                    exc_info=True,
                    extra={"member_index": index, "member": type(sink).__name__},
                )
