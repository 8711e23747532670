"""
Cybersec Hub Common Module

Shared utilities for the Cybersec Hub services. Currently this is the logging
layer used by both the article API and the Streamlit frontend.

Usage:
    from common.logger import LoggerFactory, LoggerType, LogLevel
"""

__version__ = "0.1.0"

from .logger import LoggerFactory, LoggerType, LogLevel

__all__ = [
    "__version__",
    "LoggerFactory",
    "LoggerType",
    "LogLevel",
]
