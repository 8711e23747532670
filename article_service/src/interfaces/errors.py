# interfaces/errors.py

from typing import Any, Dict, Optional


class ArticleValidationError(Exception):
    """Raised when article input fails validation"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ArticleRepositoryError(Exception):
    """Raised when a persistence operation fails"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
