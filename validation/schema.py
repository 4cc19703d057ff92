"""
Schema validation for nested dictionaries.
"""
from typing import Any, Dict
from utils.exceptions import ValidationError


class Schema:
    """Schema for validating dictionaries."""

    def __init__(self, schema: Dict[str, Any]):
        """
        Initialize schema.

        Args:
            schema: Mapping of key to a rule dict or a nested Schema. Rule
                dicts take 'type', 'required', 'default' and 'validator'.
        """
        self.schema = schema

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate data against schema and return it with defaults filled in."""
        if not isinstance(data, dict):
            raise ValidationError(
                f"Expected dict, got {type(data).__name__}",
                details={'actual_type': type(data).__name__}
            )

        validated = {}
        errors = []

        for key, spec in self.schema.items():
            if key not in data:
                if isinstance(spec, Schema):
                    data = {**data, key: {}}
                elif not spec.get('required', True):
                    if 'default' in spec:
                        validated[key] = spec['default']
                    continue
                else:
                    errors.append(f"Missing required field: {key}")
                    continue

            try:
                validated[key] = self._validate_field(data[key], spec)
            except ValidationError as e:
                if isinstance(spec, Schema) and 'errors' in e.details:
                    errors.extend(f"{key}.{err}" for err in e.details['errors'])
                else:
                    errors.append(f"Field '{key}': {e.message}")

        # Unknown keys pass through untouched
        for key in data:
            if key not in self.schema:
                validated[key] = data[key]

        if errors:
            raise ValidationError(
                "Schema validation failed",
                details={'errors': errors}
            )

        return validated

    def _validate_field(self, value: Any, spec: Any) -> Any:
        """Validate a single field."""
        if isinstance(spec, Schema):
            return spec.validate(value)

        expected_type = spec.get('type')
        if expected_type and not isinstance(value, expected_type):
            raise ValidationError(
                f"Expected {expected_type.__name__}, got {type(value).__name__}",
                details={'expected': expected_type.__name__, 'actual': type(value).__name__}
            )

        if 'validator' in spec:
            value = spec['validator'].validate(value)

        return value
