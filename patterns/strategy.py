"""
Strategy pattern for interchangeable binary operations.
"""
from abc import ABC, abstractmethod
from typing import Any
from utils.logging_config import get_logger
from validation.type_checking import ensure_type

logger = get_logger(__name__)


class Strategy(ABC):
    """Abstract strategy base class."""

    @abstractmethod
    def execute(self, a: Any, b: Any) -> Any:
        """Apply the operation to a and b."""
        pass


class AddStrategy(Strategy):
    def execute(self, a: Any, b: Any) -> Any:
        return a + b


class SubtractStrategy(Strategy):
    def execute(self, a: Any, b: Any) -> Any:
        return a - b


class Context:
    """Context that delegates to its current strategy."""

    def __init__(self, strategy: Strategy):
        self._strategy = ensure_type(strategy, Strategy, name="strategy")
        self.logger = get_logger(self.__class__.__name__)

    @property
    def strategy(self) -> Strategy:
        """Get current strategy."""
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Strategy):
        """Set new strategy."""
        ensure_type(strategy, Strategy, name="strategy")
        self.logger.debug(f"Switching strategy to {strategy.__class__.__name__}")
        self._strategy = strategy

    def set_strategy(self, strategy: Strategy):
        """Replace the current strategy; applies from the next call."""
        self.strategy = strategy

    def execute_strategy(self, a: Any, b: Any) -> Any:
        """Execute the current strategy."""
        return self._strategy.execute(a, b)
