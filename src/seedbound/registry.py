from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar


T = TypeVar("T")


class Registry(Generic[T]):
    """Case-insensitive name table of factories for one kind of component.

    Providers, priority policies, termination policies and presets each keep one of these,
    so anything built by name goes through the same lookup and error messages.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._factories: dict[str, Callable[..., T]] = {}

    def register(self, name: str, factory: Callable[..., T]) -> None:
        key = self._key(name)
        if not key:
            raise ValueError(f"{self.kind} name is required")
        self._factories[key] = factory

    def factory(self, name: str) -> Callable[..., T]:
        key = self._key(name)
        if key not in self._factories:
            raise KeyError(f"{self.kind} not registered: {name}")
        return self._factories[key]

    def build(self, name: str, **kwargs) -> T:
        """Call the factory for ``name``; every call yields a fresh instance."""
        return self.factory(name)(**kwargs)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()
