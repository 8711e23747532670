# core/__init__.py

"""
Core configuration and settings.
"""

from .config import settings, Settings

__all__ = [
    "settings",
    "Settings",
]
