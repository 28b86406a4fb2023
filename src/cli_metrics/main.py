"""CLI entrypoint for cli-metrics."""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import Optional

import typer
from rich import print

from cli_metrics.cli import CommandTracker
from cli_metrics.config import settings
from cli_metrics.models import CommandStatus
from cli_metrics.telemetry import build_reporter, configure_logging

app = typer.Typer(help="Usage heartbeat reporter for command-line tools")


@app.callback()
def _setup() -> None:
    configure_logging(settings.log_level)


def _effective_settings(
    metrics_file: Path | None = None,
    stdout: bool | None = None,
    http: bool | None = None,
):
    overrides: dict = {}
    if metrics_file is not None:
        overrides["metrics_file"] = str(metrics_file)
    if stdout is not None:
        overrides["stdout"] = stdout
    if http is not None:
        overrides["http_enabled"] = http
    return settings.model_copy(update=overrides)


@app.command("show-config")
def show_config() -> None:
    """Show effective telemetry configuration."""
    print(settings.model_dump())


@app.command()
def report(
    command: str = typer.Option(..., help="Name of the command being reported, e.g. up"),
    context: str = typer.Option(None, help="Context the command ran against"),
    source: str = typer.Option(None, help="Invoking client identifier"),
    status: CommandStatus = typer.Option(CommandStatus.success, help="Outcome of the command"),
    metrics_file: Path = typer.Option(None, "--file", help="Append heartbeat to this JSON-lines file"),
    stdout: Optional[bool] = typer.Option(None, "--stdout/--no-stdout", help="Also write the heartbeat to stdout"),
    http: Optional[bool] = typer.Option(None, "--http/--no-http", help="Post the heartbeat to the local collector"),
) -> None:
    """Send one heartbeat. Delivery failures are never reported.

    Discarded failures are logged at DEBUG only, which is opt-in through
    CLI_METRICS_LOG_LEVEL=DEBUG.
    """
    config = _effective_settings(metrics_file=metrics_file, stdout=stdout, http=http)
    with ExitStack() as resources:
        tracker = CommandTracker(build_reporter(config, resources=resources), context=context, source=source)
        tracker.report(command, status)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def track(
    ctx: typer.Context,
    context: str = typer.Option(None, help="Context the command ran against"),
    source: str = typer.Option(None, help="Invoking client identifier"),
) -> None:
    """Run a command (after --) and report how it finished."""
    argv = list(ctx.args)
    if not argv:
        raise typer.BadParameter("Provide the command to run after --")

    with ExitStack() as resources:
        tracker = CommandTracker(build_reporter(settings, resources=resources), context=context, source=source)
        code = tracker.track(argv)
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
