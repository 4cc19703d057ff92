"""
Runner executing registered demos with assembled settings.
"""
import sys
from typing import Any, Dict, List, Mapping, Optional, Sequence, TextIO
from config.config_manager import ConfigManager
from config.presets import DemoPresets, DemoSettingsSchema
from utils.logging_config import get_logger, LoggerFactory
from utils.error_handlers import ErrorContext
from utils.exceptions import ConfigurationError
from .catalog import DemoFactory

logger = get_logger(__name__)

SETTINGS_SCHEMA = 'demo_settings'


def build_settings(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """
    Assemble validated demo settings.

    Sources in increasing precedence: defaults, config file, environment
    (``PATTERNS_*``), explicit overrides.
    """
    manager = ConfigManager(defaults=DemoPresets.default())
    manager.register_schema(SETTINGS_SCHEMA, DemoSettingsSchema())

    if config_path:
        manager.load_from_file(config_path)
    manager.load_from_env(environ=environ)
    if overrides:
        manager.load_from_dict(overrides)

    return manager.validated(SETTINGS_SCHEMA)


class DemoRunner:
    """Runs demos in order and writes their output to a stream."""

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        self.settings = settings if settings is not None else build_settings()
        self.logger = get_logger(self.__class__.__name__)

    def configure_logging(self):
        """Apply the logging section of the settings."""
        log_settings = self.settings['logging']
        LoggerFactory.reset()
        LoggerFactory.configure(
            log_dir=log_settings['log_dir'],
            log_level=log_settings['log_level'],
            enable_file=log_settings['enable_file'],
            enable_structured=log_settings['enable_structured']
        )

    def resolve(self, names: Optional[Sequence[str]] = None) -> List[str]:
        """Return demo names to run, checking each is registered."""
        names = list(names) if names else list(self.settings['demos'])
        unknown = [name for name in names if name not in DemoFactory.list_available()]
        if unknown:
            raise ConfigurationError(
                f"Unknown demo(s): {', '.join(unknown)}",
                details={'available_demos': DemoFactory.list_available()}
            )
        return names

    def run(self, names: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> List[str]:
        """Run the given demos (or the configured ones) and return their names."""
        out = out if out is not None else sys.stdout
        names = self.resolve(names)

        for name in names:
            demo = DemoFactory.create(name)
            with ErrorContext(f"demo:{name}"):
                demo(self.settings, out)

        self.logger.info(f"Ran {len(names)} demos")
        return names
