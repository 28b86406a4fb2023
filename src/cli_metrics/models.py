from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CommandStatus(str, Enum):
    success = "success"
    failure = "failure"
    canceled = "canceled"


@dataclass(slots=True, frozen=True)
class Command:
    """One CLI invocation as reported in a heartbeat."""

    command: str
    context: str | None = None
    source: str | None = None
    status: CommandStatus = CommandStatus.success

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"command": self.command}
        if self.context is not None:
            payload["context"] = self.context
        if self.source is not None:
            payload["source"] = self.source
        payload["status"] = CommandStatus(self.status).value
        return payload
