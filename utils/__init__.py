"""
Utility modules for the pattern demonstrations.
"""
from .logging_config import get_logger, LoggerFactory, StructuredFormatter
from .exceptions import *
from .error_handlers import ErrorContext

__all__ = [
    'get_logger',
    'LoggerFactory',
    'StructuredFormatter',
    'ErrorContext',
    'PatternDemoError',
    'PatternError',
    'SingletonError',
    'ValidationError',
    'ConfigurationError',
]
