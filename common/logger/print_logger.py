# logger/print_logger.py

"""
Minimal logger that prints to stdout, for scripts and UI processes.
"""

import sys
from datetime import datetime
from typing import Any

from .logger_interface import LoggerInterface, LogLevel

_LEVEL_ORDER = [
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.WARNING,
    LogLevel.ERROR,
    LogLevel.CRITICAL,
]


class PrintLogger(LoggerInterface):
    """Logger that prints formatted lines with ``print``"""

    def _log(self, level: LogLevel, message: str, *args: Any, **kwargs: Any) -> None:
        if _LEVEL_ORDER.index(level) < _LEVEL_ORDER.index(LogLevel(self.level)):
            return
        if args:
            message = message % args
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(
            f"{timestamp} | {level.value:<8} | {self.name} | {message}",
            file=sys.stdout,
            flush=True,
        )

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.INFO, message, *args)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.WARNING, message, *args)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.ERROR, message, *args)

    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.CRITICAL, message, *args)

    def set_level(self, level: LogLevel) -> None:
        self.level = level
