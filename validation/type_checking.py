"""
Runtime type checking utilities.
"""
from typing import Any, Tuple, Type, Union
from utils.exceptions import ValidationError


def ensure_type(
    value: Any,
    expected_type: Union[Type, Tuple[Type, ...]],
    name: str = "value"
) -> Any:
    """
    Ensure value is of expected type, raise ValidationError if not.
    """
    if not isinstance(value, expected_type):
        raise ValidationError(
            f"{name} must be {_type_name(expected_type)}, got {type(value).__name__}",
            details={'expected': _type_name(expected_type), 'actual': type(value).__name__}
        )
    return value


def _type_name(expected_type: Union[Type, Tuple[Type, ...]]) -> str:
    if isinstance(expected_type, tuple):
        return ' or '.join(t.__name__ for t in expected_type)
    return expected_type.__name__
