"""
Error handling utilities.
"""
from .logging_config import get_logger
from .exceptions import PatternDemoError


class ErrorContext:
    """Context manager that logs an operation and any error it raises."""

    def __init__(self, operation_name: str):
        self.operation_name = operation_name
        self.logger = get_logger(__name__)

    def __enter__(self):
        self.logger.debug(f"Starting operation: {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed operation: {self.operation_name}")
        elif isinstance(exc_val, PatternDemoError):
            self.logger.error(
                f"Error in operation {self.operation_name}: {exc_val.message}",
                extra={'extra_fields': {'error_details': exc_val.to_dict()}}
            )
        else:
            self.logger.error(
                f"Error in operation {self.operation_name}: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb)
            )
        return False
