"""
Runnable usage snippets for the pattern demonstrations.
"""
from .catalog import DemoFactory, register_demo
from .runner import DemoRunner, build_settings

__all__ = [
    'DemoFactory',
    'register_demo',
    'DemoRunner',
    'build_settings',
]
