# logger/logger_factory.py

"""
Factory for creating and caching loggers by name.
"""

from enum import Enum
from typing import Dict, Optional

from .logger_interface import LoggerInterface, LogLevel
from .print_logger import PrintLogger
from .standard_logger import StandardLogger


class LoggerType(str, Enum):
    """Available logger implementations"""

    STANDARD = "standard"
    PRINT = "print"


class LoggerFactory:
    """Creates loggers and hands out the same instance per name"""

    _loggers: Dict[str, LoggerInterface] = {}

    @classmethod
    def create_logger(
        cls,
        name: str,
        logger_type: LoggerType = LoggerType.STANDARD,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        use_colors: bool = False,
        log_file: Optional[str] = None,
    ) -> LoggerInterface:
        """
        Build a new logger without consulting the cache.

        Args:
            name: Logger name, usually the component name
            logger_type: Implementation to use
            level: Default level
            console_level: Console handler level (defaults to ``level``)
            file_level: File handler level (defaults to ``level``)
            use_colors: Colour console output
            log_file: Optional file path for a file handler

        Returns:
            LoggerInterface: The created logger
        """
        if logger_type == LoggerType.PRINT:
            return PrintLogger(name=name, level=level)
        if logger_type == LoggerType.STANDARD:
            return StandardLogger(
                name=name,
                level=level,
                console_level=console_level,
                file_level=file_level,
                use_colors=use_colors,
                log_file=log_file,
            )
        raise ValueError(f"Unsupported logger type: {logger_type}")

    @classmethod
    def get_logger(
        cls,
        name: str,
        logger_type: LoggerType = LoggerType.STANDARD,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        use_colors: bool = False,
        log_file: Optional[str] = None,
    ) -> LoggerInterface:
        """Return the cached logger for ``name``, creating it on first use"""
        if name not in cls._loggers:
            cls._loggers[name] = cls.create_logger(
                name=name,
                logger_type=logger_type,
                level=level,
                console_level=console_level,
                file_level=file_level,
                use_colors=use_colors,
                log_file=log_file,
            )
        return cls._loggers[name]

    @classmethod
    def clear(cls) -> None:
        """Forget all cached loggers"""
        cls._loggers.clear()
