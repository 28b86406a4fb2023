"""Reporter assembly and logging setup."""

from .logging import configure_logging
from .reporter import build_reporter, open_metrics_file

__all__ = ["build_reporter", "configure_logging", "open_metrics_file"]
