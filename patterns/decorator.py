"""
Decorator pattern: layers that wrap a component and extend its description.
"""
from abc import ABC, abstractmethod
from utils.logging_config import get_logger
from validation.type_checking import ensure_type
from validation.validators import validate_non_negative

logger = get_logger(__name__)


class Component(ABC):
    """Abstract component."""

    @abstractmethod
    def operation(self) -> str:
        """Return a description of this component."""
        pass


class ConcreteComponent(Component):
    def operation(self) -> str:
        return "ConcreteComponent"


class Decorator(Component):
    """Wraps one component and forwards to it."""

    def __init__(self, component: Component):
        self._component = ensure_type(component, Component, name="component")

    @property
    def component(self) -> Component:
        """The wrapped component."""
        return self._component

    def operation(self) -> str:
        return self._component.operation()


class ConcreteDecorator(Decorator):
    def operation(self) -> str:
        return f"ConcreteDecorator({super().operation()})"


def decorate(component: Component, times: int = 1) -> Component:
    """Wrap component in ConcreteDecorator the given number of times."""
    ensure_type(component, Component, name="component")
    ensure_type(times, int, name="times")
    validate_non_negative(times, name="times")

    for _ in range(times):
        component = ConcreteDecorator(component)

    logger.debug(f"Decorated component {times} times")
    return component


def chain_depth(component: Component) -> int:
    """Count the decorator layers above the innermost component."""
    depth = 0
    while isinstance(component, Decorator):
        component = component.component
        depth += 1
    return depth
