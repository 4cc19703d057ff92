"""Tests for configuration and validation."""
import json
import tempfile
from pathlib import Path
import pytest
from config import Config, ConfigManager, DemoPresets, DemoSettingsSchema, DEMO_ORDER
from validation import Schema, RangeValidator, ChoiceValidator, ensure_type
from utils.exceptions import ConfigurationError, ValidationError


class TestConfig:
    """Tests for the config container."""

    def test_dotted_keys(self):
        """Test nested values are reachable and settable by dotted key."""
        config = Config({'observer': {'message': 'hi'}})
        assert config.get('observer.message') == 'hi'
        assert config.get('observer.missing', 'x') == 'x'

        config.set('decorator.depth', 2)
        assert config.to_dict() == {'observer': {'message': 'hi'}, 'decorator': {'depth': 2}}

    def test_deep_update(self):
        """Test updates merge nested dictionaries."""
        config = Config(DemoPresets.default())
        config.update({'strategy': {'operands': [1, 2]}})
        assert config.get('strategy.operands') == [1, 2]
        assert config.get('observer.message') == 'Hello, Observers!'


class TestConfigManager:
    """Tests for the configuration manager."""

    def test_load_yaml_file(self):
        """Test loading a YAML file over defaults."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'settings.yaml'
            path.write_text("observer:\n  message: From YAML\n")

            manager = ConfigManager(defaults=DemoPresets.default())
            manager.load_from_file(str(path))

            assert manager.get('observer.message') == 'From YAML'
            assert manager.get('strategy.operands') == [5, 3]

    def test_load_json_file(self):
        """Test loading a JSON file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'settings.json'
            path.write_text(json.dumps({'decorator': {'depth': 2}}))

            manager = ConfigManager()
            manager.load_from_file(str(path))

            assert manager.get('decorator.depth') == 2

    def test_bad_files(self):
        """Test missing, unsupported and malformed files raise configuration errors."""
        manager = ConfigManager()
        with pytest.raises(ConfigurationError):
            manager.load_from_file('/nonexistent/settings.yaml')

        with tempfile.TemporaryDirectory() as tmpdir:
            ini_path = Path(tmpdir) / 'settings.ini'
            ini_path.write_text("[demo]\n")
            with pytest.raises(ConfigurationError):
                manager.load_from_file(str(ini_path))

            list_path = Path(tmpdir) / 'settings.yaml'
            list_path.write_text("- a\n- b\n")
            with pytest.raises(ConfigurationError):
                manager.load_from_file(str(list_path))

            broken_path = Path(tmpdir) / 'settings.json'
            broken_path.write_text("{not json")
            with pytest.raises(ConfigurationError):
                manager.load_from_file(str(broken_path))

    def test_load_from_env(self):
        """Test environment variables override nested keys."""
        manager = ConfigManager(defaults=DemoPresets.default())
        manager.load_from_env(environ={
            'PATTERNS_OBSERVER__MESSAGE': 'From env',
            'PATTERNS_STRATEGY__OPERANDS': '[7, 2]',
            'PATTERNS_DECORATOR__DEPTH': '3',
            'UNRELATED': 'ignored'
        })

        assert manager.get('observer.message') == 'From env'
        assert manager.get('strategy.operands') == [7, 2]
        assert manager.get('decorator.depth') == 3
        assert manager.get('unrelated') is None

    @pytest.mark.parametrize('raw', ['42', 'true', 'null', '[1, 2]'])
    def test_env_string_settings_kept_verbatim(self, raw):
        """Test JSON-looking values replacing string settings stay strings."""
        manager = ConfigManager(defaults=DemoPresets.default())
        manager.load_from_env(environ={'PATTERNS_OBSERVER__MESSAGE': raw})

        assert manager.get('observer.message') == raw

    def test_validated_unknown_schema(self):
        """Test asking for an unregistered schema."""
        with pytest.raises(ConfigurationError):
            ConfigManager().validated('nope')


class TestDemoSettingsSchema:
    """Tests for demo settings validation."""

    def test_defaults_valid(self):
        """Test default settings pass unchanged."""
        assert DemoSettingsSchema().validate(DemoPresets.default()) == DemoPresets.default()

    def test_empty_gets_defaults(self):
        """Test missing sections are filled in."""
        settings = DemoSettingsSchema().validate({})
        assert settings['demos'] == DEMO_ORDER
        assert settings['observer']['message'] == 'Hello, Observers!'
        assert settings['strategy']['operands'] == [5, 3]
        assert settings['logging']['log_level'] == 'WARNING'

    @pytest.mark.parametrize('settings', [
        {'demos': ['singleton', 'adapter']},
        {'decorator': {'depth': -1}},
        {'strategy': {'operands': [1, 'two']}},
        {'strategy': {'operands': [1, 2, 3]}},
        {'logging': {'log_level': 'LOUD'}},
        {'observer': {'message': 42}},
    ])
    def test_invalid_settings(self, settings):
        """Test invalid values are rejected."""
        with pytest.raises(ValidationError):
            DemoSettingsSchema().validate(settings)


class TestValidation:
    """Tests for validators."""

    def test_schema_errors_are_collected(self):
        """Test nested errors are reported with their path."""
        schema = Schema({
            'name': {'type': str},
            'inner': Schema({'count': {'type': int}})
        })
        assert schema.validate({'name': 'x', 'inner': {'count': 1}, 'extra': 2}) == {
            'name': 'x', 'inner': {'count': 1}, 'extra': 2
        }
        with pytest.raises(ValidationError) as exc_info:
            schema.validate({'inner': {'count': 'one'}})

        errors = exc_info.value.details['errors']
        assert 'Missing required field: name' in errors
        assert any(err.startswith('inner.') for err in errors)

    def test_validators(self):
        """Test range and choice validators."""
        assert RangeValidator(min_value=0).validate(0) == 0
        with pytest.raises(ValidationError):
            RangeValidator(min_value=0).validate(-1)
        with pytest.raises(ValidationError):
            ChoiceValidator(['a']).validate('b')

    def test_ensure_type(self):
        """Test type checks report expected and actual types."""
        assert ensure_type(3, (int, float)) == 3
        with pytest.raises(ValidationError) as exc_info:
            ensure_type('3', int, name='count')
        assert exc_info.value.details == {'expected': 'int', 'actual': 'str'}
