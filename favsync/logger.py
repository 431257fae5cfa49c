"""Rich console logging sink for export, import and rollback runs."""

import logging
import time
from enum import Enum
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

# Log file line format: "2024-05-01 09:30:00 [INFO] message", UTC timestamps
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")


class EventLevel(str, Enum):
    """Severity of a sync event."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"


_LOGGING_LEVELS = {
    EventLevel.INFO: logging.INFO,
    EventLevel.WARN: logging.WARNING,
    EventLevel.ERROR: logging.ERROR,
    EventLevel.SUCCESS: SUCCESS,
}


class SyncLogger:
    """Rich console output for sync events, optionally mirrored to a log file."""

    def __init__(
        self,
        console: Optional[Console] = None,
        verbose: bool = False,
        log_file: Optional[Path] = None,
    ):
        """Initialize logger.

        Args:
            console: Rich Console instance
            verbose: Enable verbose output
            log_file: Append every event to this file as a timestamped line
        """
        self.console = console or Console()
        self.verbose = verbose
        self.log_file = log_file
        self._file_logger: Optional[logging.Logger] = None
        if log_file is not None:
            self._setup_file_logging(log_file)

    def _setup_file_logging(self, log_file: Path) -> None:
        file_logger = logging.getLogger(f"favsync.events.{log_file}")
        file_logger.setLevel(logging.INFO)
        file_logger.propagate = False
        for handler in list(file_logger.handlers):
            file_logger.removeHandler(handler)
            handler.close()

        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            self.console.print(f"[yellow]⚠[/yellow] Cannot write log file {escape(str(log_file))}: {escape(str(e))}")
            self.log_file = None
            return

        formatter = logging.Formatter(FILE_FORMAT, DATE_FORMAT)
        formatter.converter = time.gmtime
        file_handler.setFormatter(formatter)
        file_logger.addHandler(file_handler)
        self._file_logger = file_logger

    def close(self) -> None:
        """Close the log file, if any."""
        if self._file_logger is None:
            return
        for handler in list(self._file_logger.handlers):
            self._file_logger.removeHandler(handler)
            handler.close()
        self._file_logger = None

    def info(self, message: str) -> None:
        """Blue info message."""
        self.event(EventLevel.INFO, message)

    def success(self, message: str) -> None:
        """Green success message."""
        self.event(EventLevel.SUCCESS, message)

    def warning(self, message: str) -> None:
        """Yellow warning message."""
        self.event(EventLevel.WARN, message)

    def error(self, message: str) -> None:
        """Red error message."""
        self.event(EventLevel.ERROR, message)

    def debug(self, message: str) -> None:
        """Dim detail message, shown only in verbose mode and never written to the log file."""
        if self.verbose:
            self.console.print(f"[dim]  {escape(message)}[/dim]")

    def event(self, level: EventLevel, message: str) -> None:
        """Emit an event with the given severity."""
        prefix = {
            EventLevel.INFO: "[blue]ℹ[/blue]",
            EventLevel.SUCCESS: "[green]✓[/green]",
            EventLevel.WARN: "[yellow]⚠[/yellow]",
            EventLevel.ERROR: "[red]✗[/red]",
        }[level]
        self.console.print(f"{prefix} {escape(message)}")
        self.record(level, message)

    def record(self, level: EventLevel, message: str) -> None:
        """Write an event to the log file only."""
        if self._file_logger is not None:
            self._file_logger.log(_LOGGING_LEVELS[level], message)
