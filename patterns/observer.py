"""
Observer pattern: a subject broadcasting messages to registered observers.
"""
from abc import ABC, abstractmethod
import sys
from typing import Any, Callable, List, Optional, TextIO, Tuple
from utils.logging_config import get_logger
from validation.type_checking import ensure_type

logger = get_logger(__name__)


class Observer(ABC):
    """Abstract observer base class."""

    @abstractmethod
    def update(self, message: Any):
        """Called when the subject broadcasts a message."""
        pass


class ConcreteObserver(Observer):
    """Observer that writes every received message to a stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def update(self, message: Any):
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"Received message: {message}", file=stream)


class CallbackObserver(Observer):
    """Observer that calls a callback function."""

    def __init__(self, callback: Callable[[Any], Any]):
        self.callback = callback

    def update(self, message: Any):
        """Call the callback function."""
        self.callback(message)


class Subject:
    """
    Subject that notifies observers in registration order.

    Observers are held by reference and are never removed. An observer that
    raises aborts the notification and the exception reaches the caller.
    """

    def __init__(self):
        self._observers: List[Observer] = []
        self.logger = get_logger(self.__class__.__name__)

    @property
    def observers(self) -> Tuple[Observer, ...]:
        """Registered observers in registration order."""
        return tuple(self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def add_observer(self, observer: Observer):
        """Register an observer. The same observer may be added twice."""
        ensure_type(observer, Observer, name="observer")
        self._observers.append(observer)
        self.logger.debug(f"Added observer {observer.__class__.__name__} (total {len(self._observers)})")

    def notify_observers(self, message: Any):
        """Deliver message to every observer registered before this call."""
        # Snapshot: observers added during delivery get the next message
        observers = tuple(self._observers)
        self.logger.debug(f"Notifying {len(observers)} observers")

        for observer in observers:
            observer.update(message)
