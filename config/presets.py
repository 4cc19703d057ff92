"""
Predefined settings for the demo runner.
"""
from typing import Any, Dict
from validation.schema import Schema
from validation.validators import (
    ChoiceValidator,
    EachValidator,
    LengthValidator,
    RangeValidator,
    Validator
)
from validation.type_checking import ensure_type

DEMO_ORDER = ['singleton', 'factory', 'observer', 'decorator', 'strategy']

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class DemoPresets:
    """Collection of predefined demo settings."""

    @staticmethod
    def default() -> Dict[str, Any]:
        """Settings reproducing the canonical demo output."""
        return {
            'demos': list(DEMO_ORDER),
            'factory': {
                'creator': 'A'
            },
            'observer': {
                'message': 'Hello, Observers!'
            },
            'decorator': {
                'depth': 1
            },
            'strategy': {
                'operands': [5, 3]
            },
            'logging': {
                'log_level': 'WARNING',
                'log_dir': 'logs',
                'enable_file': False,
                'enable_structured': False
            }
        }


class _NumberValidator(Validator):
    """Validates a value is an int or float."""

    def validate(self, value: Any) -> Any:
        return ensure_type(value, (int, float), name=self.name)


class DemoSettingsSchema(Schema):
    """Schema for the demo runner settings."""

    def __init__(self):
        schema = {
            'demos': {
                'type': list,
                'required': False,
                'default': list(DEMO_ORDER),
                'validator': EachValidator(
                    ChoiceValidator(DEMO_ORDER, name='demo'),
                    name='demos'
                )
            },
            'factory': Schema({
                'creator': {'type': str, 'required': False, 'default': 'A'}
            }),
            'observer': Schema({
                'message': {'type': str, 'required': False, 'default': 'Hello, Observers!'}
            }),
            'decorator': Schema({
                'depth': {
                    'type': int,
                    'required': False,
                    'default': 1,
                    'validator': RangeValidator(min_value=0, name='depth')
                }
            }),
            'strategy': Schema({
                'operands': {
                    'type': list,
                    'required': False,
                    'default': [5, 3],
                    'validator': EachValidator(
                        _NumberValidator(name='operand'),
                        name='operands'
                    )
                }
            }),
            'logging': Schema({
                'log_level': {
                    'type': str,
                    'required': False,
                    'default': 'WARNING',
                    'validator': ChoiceValidator(LOG_LEVELS, name='log_level')
                },
                'log_dir': {'type': str, 'required': False, 'default': 'logs'},
                'enable_file': {'type': bool, 'required': False, 'default': False},
                'enable_structured': {'type': bool, 'required': False, 'default': False}
            })
        }
        super().__init__(schema)

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        validated = super().validate(data)
        LengthValidator(exact_length=2, name='strategy.operands').validate(
            validated['strategy']['operands']
        )
        return validated
