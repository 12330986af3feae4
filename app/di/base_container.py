# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal dependency injection container.
    
    Keys are usually classes (domain interfaces or use cases) but plain
    strings are used for infrastructure handles such as collections.
    
    - Singletons: one shared instance, returned as-is
    - Factories: called on every get(), so each request gets a fresh object
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Hashable, instance: Any) -> None:
        """Register a shared instance under key"""
        self._factories.pop(key, None)
        self._singletons[key] = instance
    
    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """Register a zero-argument factory under key"""
        self._singletons.pop(key, None)
        self._factories[key] = factory
    
    def is_registered(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories
    
    def get(self, key: Hashable) -> Any:
        """
        Resolve a dependency
        
        Args:
            key: Registration key
            
        Returns:
            The singleton instance, or a new instance from the factory
            
        Raises:
            ValueError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise ValueError(f"No dependency registered for {name}")
