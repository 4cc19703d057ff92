"""
Configuration management for the demo runner.
"""
from .config_manager import Config, ConfigManager
from .presets import DemoPresets, DemoSettingsSchema, DEMO_ORDER

__all__ = [
    'Config',
    'ConfigManager',
    'DemoPresets',
    'DemoSettingsSchema',
    'DEMO_ORDER',
]
