# routers/__init__.py

"""
Routers package for the article service.
Contains all FastAPI route definitions.
"""

from . import article_router

__all__ = ["article_router"]
