from __future__ import annotations

from collections.abc import Callable

from ..registry import Registry
from .base import PriorityPolicy, TerminationPolicy


PriorityFactory = Callable[..., PriorityPolicy]
TerminationFactory = Callable[..., TerminationPolicy]

PRIORITIES: Registry[PriorityPolicy] = Registry("priority policy")
TERMINATIONS: Registry[TerminationPolicy] = Registry("termination policy")


def register_priority(name: str, factory: PriorityFactory) -> None:
    PRIORITIES.register(name, factory)


def get_priority(name: str, **kwargs) -> PriorityPolicy:
    """Build a fresh policy instance; policies keep per-run caches and are not shared."""
    return PRIORITIES.build(name, **kwargs)


def list_priorities() -> list[str]:
    return PRIORITIES.names()


def register_termination(name: str, factory: TerminationFactory) -> None:
    TERMINATIONS.register(name, factory)


def get_termination(name: str, **kwargs) -> TerminationPolicy:
    return TERMINATIONS.build(name, **kwargs)


def list_terminations() -> list[str]:
    return TERMINATIONS.names()
