"""
Input validation utilities.
"""
from typing import Any, List, Union
from utils.exceptions import ValidationError


class Validator:
    """Base validator class."""

    def __init__(self, name: str = "value"):
        self.name = name

    def validate(self, value: Any) -> Any:
        """Validate and return the value."""
        return value


class RangeValidator(Validator):
    """Validates numeric value is at least a lower bound."""

    def __init__(self, min_value: Union[int, float], name: str = "value"):
        super().__init__(name)
        self.min_value = min_value

    def validate(self, value: Union[int, float]) -> Union[int, float]:
        if value < self.min_value:
            raise ValidationError(
                f"{self.name} must be >= {self.min_value}, got {value}",
                details={'min_value': self.min_value, 'actual': value}
            )
        return value


class ChoiceValidator(Validator):
    """Validates value is in allowed choices."""

    def __init__(self, choices: List[Any], name: str = "value"):
        super().__init__(name)
        self.choices = choices

    def validate(self, value: Any) -> Any:
        """Validate choice."""
        if value not in self.choices:
            raise ValidationError(
                f"{self.name} must be one of {self.choices}, got {value}",
                details={'allowed': self.choices, 'actual': value}
            )
        return value


class LengthValidator(Validator):
    """Validates a sequence has an exact length."""

    def __init__(self, exact_length: int, name: str = "sequence"):
        super().__init__(name)
        self.exact_length = exact_length

    def validate(self, value: Any) -> Any:
        length = len(value)
        if length != self.exact_length:
            raise ValidationError(
                f"{self.name} must have exactly {self.exact_length} elements, got {length}"
            )
        return value


class EachValidator(Validator):
    """Applies a validator to every element of a sequence."""

    def __init__(self, item_validator: Validator, name: str = "sequence"):
        super().__init__(name)
        self.item_validator = item_validator

    def validate(self, value: Any) -> Any:
        for index, item in enumerate(value):
            try:
                self.item_validator.validate(item)
            except ValidationError as e:
                raise ValidationError(
                    f"{self.name}[{index}]: {e.message}",
                    details={'index': index, **e.details}
                )
        return value


def validate_non_negative(value: Union[int, float], name: str = "value") -> Union[int, float]:
    """Validate value is non-negative."""
    return RangeValidator(min_value=0, name=name).validate(value)
