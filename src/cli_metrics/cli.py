"""Run a command and report its outcome as a heartbeat."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence

from cli_metrics.models import Command, CommandStatus
from cli_metrics.sinks import Sink

INTERRUPTED_EXIT_CODE = 130
SIGNAL_EXIT_BASE = 128


def normalize_exit_code(code: int) -> int:
    """Map ``-N`` (child killed by signal N) to the shell's ``128 + N``."""
    if code < 0:
        return SIGNAL_EXIT_BASE - code
    return code


def status_for_exit_code(code: int) -> CommandStatus:
    code = normalize_exit_code(code)
    if code == 0:
        return CommandStatus.success
    if code == INTERRUPTED_EXIT_CODE:
        return CommandStatus.canceled
    return CommandStatus.failure


class CommandTracker:
    """Runs child processes and sends one heartbeat per completed run."""

    def __init__(
        self,
        reporter: Sink,
        *,
        context: str | None = None,
        source: str | None = None,
        run: Callable[[Sequence[str]], int] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._reporter = reporter
        self._context = context
        self._source = source
        self._run = run or self._default_run
        self._logger = logger or logging.getLogger("cli_metrics.cli")

    @staticmethod
    def _default_run(argv: Sequence[str]) -> int:
        return subprocess.call(list(argv))

    def track(self, argv: Sequence[str]) -> int:
        """Run ``argv`` and return its exit code after reporting the outcome."""
        if not argv:
            raise ValueError("No command given to track")

        try:
            code = normalize_exit_code(self._run(argv))
        except KeyboardInterrupt:
            code = INTERRUPTED_EXIT_CODE
        except OSError as exc:
            self._logger.info("command_launch_failed", extra={"command": argv[0], "error": str(exc)})
            code = 127

        self.report(argv[0], status_for_exit_code(code))
        return code

    def report(self, command: str, status: CommandStatus) -> Command:
        record = Command(command=command, context=self._context, source=self._source, status=status)
        self._reporter.report(record)
        self._logger.debug("heartbeat_reported", extra={"command": command, "status": status.value})
        return record
