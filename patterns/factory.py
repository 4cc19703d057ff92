"""
Factory Method pattern: creators that produce products without the caller
naming the concrete product class.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Type
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError

logger = get_logger(__name__)


class Product(ABC):
    """Abstract product."""

    @abstractmethod
    def get_name(self) -> str:
        """Return the product's descriptive name."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ConcreteProductA(Product):
    def get_name(self) -> str:
        return "Product A"


class ConcreteProductB(Product):
    def get_name(self) -> str:
        return "Product B"


class Creator(ABC):
    """Abstract creator declaring the factory method."""

    @abstractmethod
    def factory_method(self) -> Product:
        """Create a new product."""
        pass


class Factory(ABC):
    """Abstract name registry base class."""

    _registry: Dict[str, Type] = {}

    @classmethod
    def register(cls, name: str, implementation: Type):
        """Register an implementation with a name."""
        cls._registry[name] = implementation
        logger.debug(f"Registered {name} in {cls.__name__}")

    @classmethod
    def get(cls, name: str) -> Type:
        """Look up a registered implementation by name."""
        if name not in cls._registry:
            raise ConfigurationError(
                f"Unknown type: {name}",
                details={'available_types': cls.list_available()}
            )
        return cls._registry[name]

    @classmethod
    def create(cls, name: str, **kwargs):
        """Create an instance by name."""
        return cls.get(name)(**kwargs)

    @classmethod
    def list_available(cls) -> List[str]:
        """List all registered implementations."""
        return list(cls._registry.keys())


class CreatorFactory(Factory):
    """Registry of creators by name."""
    _registry: Dict[str, Type] = {}


def register_creator(name: str):
    """Decorator for registering creators."""
    def decorator(cls):
        CreatorFactory.register(name, cls)
        return cls
    return decorator


@register_creator("A")
class ConcreteCreatorA(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductA()


@register_creator("B")
class ConcreteCreatorB(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductB()
