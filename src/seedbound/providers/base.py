from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import Neighbor, VertexId


class GraphProvider(ABC):
    """Neighbour/degree source consumed by the expansion engine.

    ``neighbors`` is the only call that may suspend; the others are expected to be
    cheap lookups.
    """

    @abstractmethod
    async def neighbors(self, vertex: VertexId) -> list[Neighbor]:
        raise NotImplementedError

    @abstractmethod
    def degree(self, vertex: VertexId) -> int:
        raise NotImplementedError

    def priority(self, vertex: VertexId, node_weight: float = 1.0, epsilon: float = 1e-10) -> float:
        return self.degree(vertex) / (node_weight + epsilon)

    def record_edge(self, source: VertexId, target: VertexId, relationship: str) -> None:
        return None

    def vertex_count(self) -> int | None:
        return None
