"""
Validation utilities for the pattern demonstrations.
"""
from .validators import (
    Validator,
    RangeValidator,
    ChoiceValidator,
    LengthValidator,
    EachValidator,
    validate_non_negative
)
from .type_checking import ensure_type
from .schema import Schema

__all__ = [
    'Validator',
    'RangeValidator',
    'ChoiceValidator',
    'LengthValidator',
    'EachValidator',
    'validate_non_negative',
    'ensure_type',
    'Schema',
]
