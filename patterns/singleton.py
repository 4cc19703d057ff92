"""
Singleton pattern for single-instance classes.

Instances are only reachable through ``get_instance()``. Calling the class
directly, copying an instance or pickling it raises ``SingletonError``.
"""
from typing import Any, Dict
import threading
from utils.logging_config import get_logger
from utils.exceptions import SingletonError

logger = get_logger(__name__)


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass with one slot per class.

    The lock is reentrant: a singleton may obtain another singleton from
    its __init__.
    """
    _instances: Dict[type, Any] = {}
    _lock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        """Reject direct construction."""
        raise SingletonError(
            f"{cls.__name__} cannot be constructed directly, use {cls.__name__}.get_instance()",
            details={'class': cls.__name__}
        )

    def _get_or_create(cls) -> Any:
        if cls not in SingletonMeta._instances:
            with SingletonMeta._lock:
                # Double-checked locking
                if cls not in SingletonMeta._instances:
                    instance = super().__call__()
                    SingletonMeta._instances[cls] = instance
                    logger.debug(f"Created singleton instance of {cls.__name__}")

        return SingletonMeta._instances[cls]


class Singleton(metaclass=SingletonMeta):
    """Base class for singleton objects."""

    @classmethod
    def get_instance(cls):
        """Return the sole instance, creating it on first call."""
        return cls._get_or_create()

    def __copy__(self):
        raise SingletonError(f"{self.__class__.__name__} cannot be cloned")

    def __deepcopy__(self, memo):
        raise SingletonError(f"{self.__class__.__name__} cannot be cloned")

    def __reduce_ex__(self, protocol):
        raise SingletonError(f"{self.__class__.__name__} cannot be pickled")


class SharedValue(Singleton):
    """Process-wide holder of a single value."""

    def __init__(self):
        self._value: Any = None
        self.logger = get_logger(self.__class__.__name__)

    def get(self) -> Any:
        """Get the held value."""
        return self._value

    def set(self, value: Any):
        """Replace the held value."""
        self._value = value
        self.logger.debug(f"Set shared value: {value!r}")
