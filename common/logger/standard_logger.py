# logger/standard_logger.py

"""
Logger implementation backed by the standard ``logging`` module.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from colorama import Fore, Style
from colorama import init as colorama_init

from .logger_interface import LoggerInterface, LogLevel

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVEL_COLORS = {
    logging.DEBUG: Fore.CYAN,
    logging.INFO: Fore.GREEN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.MAGENTA + Style.BRIGHT,
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name for console output"""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{Style.RESET_ALL}"


def _to_logging_level(level: LogLevel) -> int:
    return getattr(logging, LogLevel(level).value)


class StandardLogger(LoggerInterface):
    """
    Logger writing to the console and, optionally, to a log file.

    Console and file handlers keep their own levels so a service can log
    INFO to the terminal while keeping DEBUG detail on disk.
    """

    def __init__(
        self,
        name: str,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        use_colors: bool = False,
        log_file: Optional[str] = None,
        fmt: str = DEFAULT_FORMAT,
    ):
        super().__init__(name=name, level=level)
        self.log_file = log_file

        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        # Re-creating a logger with the same name must not duplicate handlers
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(_to_logging_level(console_level or level))
        if use_colors:
            colorama_init()
            console_handler.setFormatter(
                ColoredFormatter(fmt, datefmt=DEFAULT_DATE_FORMAT)
            )
        else:
            console_handler.setFormatter(
                logging.Formatter(fmt, datefmt=DEFAULT_DATE_FORMAT)
            )
        self._logger.addHandler(console_handler)

        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(_to_logging_level(file_level or level))
            file_handler.setFormatter(
                logging.Formatter(fmt, datefmt=DEFAULT_DATE_FORMAT)
            )
            self._logger.addHandler(file_handler)

        # The logger itself lets through anything a handler wants
        handler_levels = [h.level for h in self._logger.handlers]
        self._logger.setLevel(min([_to_logging_level(level)] + handler_levels))

    @property
    def handlers(self):
        return list(self._logger.handlers)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.critical(message, *args, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        self.level = level
        self._logger.setLevel(_to_logging_level(level))
        for handler in self._logger.handlers:
            handler.setLevel(_to_logging_level(level))
