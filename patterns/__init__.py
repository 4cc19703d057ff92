"""
Design pattern demonstrations.
"""
from .singleton import (
    Singleton,
    SingletonMeta,
    SharedValue
)
from .factory import (
    Product,
    ConcreteProductA,
    ConcreteProductB,
    Creator,
    ConcreteCreatorA,
    ConcreteCreatorB,
    Factory,
    CreatorFactory,
    register_creator
)
from .observer import (
    Observer,
    ConcreteObserver,
    CallbackObserver,
    Subject
)
from .decorator import (
    Component,
    ConcreteComponent,
    Decorator,
    ConcreteDecorator,
    decorate,
    chain_depth
)
from .strategy import (
    Strategy,
    AddStrategy,
    SubtractStrategy,
    Context
)

__all__ = [
    'Singleton',
    'SingletonMeta',
    'SharedValue',
    'Product',
    'ConcreteProductA',
    'ConcreteProductB',
    'Creator',
    'ConcreteCreatorA',
    'ConcreteCreatorB',
    'Factory',
    'CreatorFactory',
    'register_creator',
    'Observer',
    'ConcreteObserver',
    'CallbackObserver',
    'Subject',
    'Component',
    'ConcreteComponent',
    'Decorator',
    'ConcreteDecorator',
    'decorate',
    'chain_depth',
    'Strategy',
    'AddStrategy',
    'SubtractStrategy',
    'Context',
]
