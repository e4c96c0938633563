from numpy.random import Generator
from typing import Dict, Protocol, Any, Type


class CallableGenerator(Protocol):
    def __call__(self, *args:Any, **kwargs:Any) -> Any:
        ...


generators_registry: Dict[str, Type['NetGen']] = {}

def register_generator(name: str):
    """
    Decorator to register generator class in global registry.
    """
    def decorator(cls):
        generators_registry[name] = cls
        return cls
    return decorator


class NetGen:
    """Base for puzzle part generators, every generator owns its rng stream"""
    def __init__(self, rng:Generator):
        self.rng = rng

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError("Subclasses must implement __call__")

    @staticmethod
    def create(name: str, rng: Generator) -> 'CallableGenerator':
        """
        Factory method to create generator instance by name
        """
        if name not in generators_registry:
            raise ValueError(f"Unknown generator: {name}")
        return generators_registry[name](rng)
