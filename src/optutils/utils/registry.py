"""Registry for constructing classes by key."""

from typing import Callable, Dict, Generic, Hashable, List, Type, TypeVar

from .enforce import check_invariant

T = TypeVar("T")


class Registry(Generic[T]):
    """Maps keys to subclasses of a common base and instantiates them on request.

    Example:
        >>> heuristics = Registry(Heuristic)
        >>> heuristics.register("fp", FeasibilityPump)
        True
        >>> heuristics.create("fp", seed=1)
    """

    def __init__(self, base: Type[T]):
        self.base = base
        self._classes: Dict[Hashable, Type[T]] = {}

    def register(self, key: Hashable, cls: Type[T]) -> bool:
        """Register cls under key. Returns False if the key is already taken."""
        check_invariant(
            isinstance(cls, type) and issubclass(cls, self.base),
            f"{cls!r} is not a subclass of {self.base.__name__}"
        )
        if key in self._classes:
            return False
        self._classes[key] = cls
        return True

    def register_class(self, key: Hashable) -> Callable[[Type[T]], Type[T]]:
        """Decorator form of register."""
        def decorator(cls: Type[T]) -> Type[T]:
            check_invariant(self.register(key, cls), f"Key {key!r} is already registered")
            return cls
        return decorator

    def unregister(self, key: Hashable) -> bool:
        """Remove key. Returns True if it was registered."""
        return self._classes.pop(key, None) is not None

    def create(self, key: Hashable, *args, **kwargs) -> T:
        """
        Instantiate the class registered under key.

        Raises:
            KeyError: If key is not registered
        """
        if key not in self._classes:
            available = ", ".join(str(k) for k in self.list_keys())
            raise KeyError(f"Unknown key {key!r}. Available: {available}")
        return self._classes[key](*args, **kwargs)

    def list_keys(self) -> List[Hashable]:
        """Get the registered keys in sorted order."""
        return sorted(self._classes, key=str)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._classes

    def __len__(self) -> int:
        return len(self._classes)
