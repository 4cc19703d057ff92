"""Tests for logging and error utilities."""
import json
import logging
import pytest
from utils import ErrorContext, StructuredFormatter, LoggerFactory, get_logger
from utils.exceptions import PatternDemoError, SingletonError


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_to_dict(self):
        """Test structured exception export."""
        error = SingletonError("cannot clone", details={'class': 'Singleton'})
        assert isinstance(error, PatternDemoError)
        assert error.to_dict() == {
            'error_type': 'SingletonError',
            'error_code': 'SingletonError',
            'message': 'cannot clone',
            'details': {'class': 'Singleton'}
        }


class TestErrorContext:
    """Tests for the error context manager."""

    def test_reraises(self):
        """Test errors are logged and propagate."""
        with pytest.raises(ValueError):
            with ErrorContext("op"):
                raise ValueError("bad")

    def test_logs_structured_details(self, caplog):
        """Test pattern errors carry their details on the log record."""
        with caplog.at_level(logging.ERROR, logger='utils.error_handlers'):
            with pytest.raises(SingletonError):
                with ErrorContext("demo:singleton"):
                    raise SingletonError("no", details={'class': 'Singleton'})

        record = caplog.records[-1]
        assert record.extra_fields['error_details']['details'] == {'class': 'Singleton'}


class TestLogging:
    """Tests for logging helpers."""

    def test_get_logger_installs_no_handlers(self):
        """Test obtaining a logger leaves the root logger alone."""
        LoggerFactory.reset()
        root_handlers = list(logging.getLogger().handlers)

        get_logger("tests.quiet")

        assert logging.getLogger().handlers == root_handlers
        assert LoggerFactory._handlers == []

    def test_configure_and_reset(self):
        """Test configure installs a console handler that reset removes."""
        LoggerFactory.configure(log_level="DEBUG")
        try:
            assert len(LoggerFactory._handlers) == 1
            assert LoggerFactory._handlers[0] in logging.getLogger().handlers
        finally:
            LoggerFactory.reset()
        assert LoggerFactory._handlers == []

    def test_structured_formatter(self):
        """Test JSON output carries extra fields."""
        logger = get_logger("tests.structured")
        record = logger.makeRecord(
            logger.name, logging.INFO, __file__, 1, "hello", None, None,
            extra={'extra_fields': {'demo': 'observer'}}
        )
        payload = json.loads(StructuredFormatter().format(record))

        assert payload['message'] == 'hello'
        assert payload['level'] == 'INFO'
        assert payload['demo'] == 'observer'
