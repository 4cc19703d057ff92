"""
Usage snippets for each pattern, registered by name.

Every demo takes the validated settings and an output stream and writes its
result lines to that stream.
"""
from typing import Any, Callable, Dict, TextIO
from patterns.factory import Factory, CreatorFactory
from patterns.singleton import Singleton
from patterns.observer import Subject, ConcreteObserver
from patterns.decorator import ConcreteComponent, decorate
from patterns.strategy import Context, AddStrategy, SubtractStrategy

DemoFunc = Callable[[Dict[str, Any], TextIO], None]


class DemoFactory(Factory):
    """Registry of demo functions."""
    _registry: Dict[str, Callable] = {}

    @classmethod
    def create(cls, name: str, **kwargs):
        return cls.get(name)


def register_demo(name: str):
    """Decorator for registering demos."""
    def decorator(func: DemoFunc) -> DemoFunc:
        DemoFactory.register(name, func)
        return func
    return decorator


@register_demo('singleton')
def singleton_demo(settings: Dict[str, Any], out: TextIO):
    first = Singleton.get_instance()
    second = Singleton.get_instance()
    print(f"Singleton instances identical: {first is second}", file=out)


@register_demo('factory')
def factory_demo(settings: Dict[str, Any], out: TextIO):
    creator = CreatorFactory.create(settings['factory']['creator'])
    product = creator.factory_method()
    print(product.get_name(), file=out)


@register_demo('observer')
def observer_demo(settings: Dict[str, Any], out: TextIO):
    subject = Subject()
    subject.add_observer(ConcreteObserver(stream=out))
    subject.notify_observers(settings['observer']['message'])


@register_demo('decorator')
def decorator_demo(settings: Dict[str, Any], out: TextIO):
    decorated = decorate(ConcreteComponent(), settings['decorator']['depth'])
    print(decorated.operation(), file=out)


@register_demo('strategy')
def strategy_demo(settings: Dict[str, Any], out: TextIO):
    a, b = settings['strategy']['operands']
    context = Context(AddStrategy())
    print(context.execute_strategy(a, b), file=out)
    context.set_strategy(SubtractStrategy())
    print(context.execute_strategy(a, b), file=out)
