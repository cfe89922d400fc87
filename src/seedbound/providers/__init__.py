from ..registry import Registry
from .base import GraphProvider
from .mapping import MappingGraphProvider
from .networkx_provider import NetworkXGraphProvider

PROVIDERS: Registry[GraphProvider] = Registry("provider")


def register_provider(name: str, factory) -> None:
    PROVIDERS.register(name, factory)


def get_provider(name: str):
    return PROVIDERS.factory(name)


def list_providers() -> list[str]:
    return PROVIDERS.names()


# Built-in provider registrations.
register_provider("networkx", lambda graph, **kwargs: NetworkXGraphProvider(graph, **kwargs))
register_provider("mapping", lambda adjacency, **kwargs: MappingGraphProvider(adjacency, **kwargs))

__all__ = [
    "GraphProvider",
    "MappingGraphProvider",
    "NetworkXGraphProvider",
    "PROVIDERS",
    "register_provider",
    "get_provider",
    "list_providers",
]
