"""Assemble the configured heartbeat sinks."""

from __future__ import annotations

import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO

from cli_metrics.config import Settings
from cli_metrics.http_client import build_http_client
from cli_metrics.sinks import FanoutSink, HttpClient, HttpSink, Sink, StreamSink

logger = logging.getLogger("cli_metrics.telemetry.reporter")


def open_metrics_file(path: str | Path) -> BinaryIO:
    target = Path(path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    return target.open("ab")


def build_reporter(
    config: Settings,
    *,
    stream: BinaryIO | None = None,
    http_client: HttpClient | None = None,
    resources: ExitStack | None = None,
) -> FanoutSink:
    """Return a fan-out over the sinks enabled in ``config``.

    Order is metrics file, stdout, then HTTP. With telemetry disabled the
    fan-out is empty and every report is a no-op. The metrics file and any
    HTTP client built here are registered on ``resources`` so the caller
    can close them; passed-in ``stream`` and ``http_client`` stay caller-owned.
    """
    if not config.telemetry_enabled:
        return FanoutSink()

    sinks: list[Sink] = []
    if config.metrics_file:
        try:
            handle = open_metrics_file(config.metrics_file)
        except OSError:
            logger.warning("metrics_file_unavailable", exc_info=True, extra={"path": config.metrics_file})
        else:
            if resources is not None:
                resources.enter_context(handle)
            sinks.append(StreamSink(handle))

    if config.stdout:
        sinks.append(StreamSink(stream if stream is not None else sys.stdout.buffer))

    if config.http_enabled:
        client = http_client
        if client is None:
            client = build_http_client(config.http_timeout_seconds)
            if resources is not None:
                resources.callback(client.close)
        sinks.append(HttpSink(client))

    return FanoutSink(*sinks)
