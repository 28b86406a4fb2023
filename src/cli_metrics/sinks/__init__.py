"""Heartbeat sinks: stream, HTTP and fan-out."""

from .base import Sink
from .fanout import FanoutSink
from .http import USAGE_ENDPOINT, HttpClient, HttpSink
from .stream import ByteWriter, StreamSink

__all__ = [
    "ByteWriter",
    "FanoutSink",
    "HttpClient",
    "HttpSink",
    "Sink",
    "StreamSink",
    "USAGE_ENDPOINT",
]
