"""
Custom exception hierarchy for the pattern demonstrations.
"""
from typing import Any, Dict, Optional


class PatternDemoError(Exception):
    """Base exception for all pattern demonstration errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


# Pattern Exceptions
class PatternError(PatternDemoError):
    """Base exception for pattern misuse."""
    pass


class SingletonError(PatternError):
    """Raised when a singleton is constructed directly or cloned."""
    pass


# Data Exceptions
class ValidationError(PatternDemoError):
    """Raised when a value fails validation."""
    pass


# Configuration Exceptions
class ConfigurationError(PatternDemoError):
    """Raised when configuration is invalid or a name is unknown."""
    pass


__all__ = [
    'PatternDemoError',
    'PatternError',
    'SingletonError',
    'ValidationError',
    'ConfigurationError',
]
