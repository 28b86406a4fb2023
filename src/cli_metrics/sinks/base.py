"""Boundary for heartbeat delivery targets."""

from typing import Any, Protocol


class Sink(Protocol):
    """Accepts command records and attempts to deliver them."""

    def report(self, record: Any) -> None:
        """Deliver one record. Never raises to the caller."""
