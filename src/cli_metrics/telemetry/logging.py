"""Logging setup for the cli-metrics command line."""

import logging

_CONFIGURED = False


def configure_logging(level: str | int = "WARNING") -> None:
    """Attach a stderr handler once; later calls only adjust the level."""
    global _CONFIGURED

    root = logging.getLogger("cli_metrics")
    root.setLevel(level.upper() if isinstance(level, str) else level)
    if _CONFIGURED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root.addHandler(handler)
    _CONFIGURED = True
