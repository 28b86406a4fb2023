"""Best-effort usage heartbeats for command-line tools."""

import logging

from .encoding import RecordEncodingError, encode_record
from .models import Command, CommandStatus
from .sinks import USAGE_ENDPOINT, FanoutSink, HttpSink, Sink, StreamSink

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Command",
    "CommandStatus",
    "FanoutSink",
    "HttpSink",
    "RecordEncodingError",
    "Sink",
    "StreamSink",
    "USAGE_ENDPOINT",
    "encode_record",
]
