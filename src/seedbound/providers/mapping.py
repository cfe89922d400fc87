from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..models import Neighbor, VertexId
from .base import GraphProvider


class MappingGraphProvider(GraphProvider):
    """Provider over a plain adjacency mapping.

    Values may be bare vertex ids or ``(target, relationship)`` pairs. Degree is the
    length of the adjacency list, so undirected graphs must list both directions.
    """

    def __init__(
        self,
        adjacency: Mapping[VertexId, Iterable[VertexId | tuple[VertexId, str]]],
        default_relationship: str = "edge",
    ) -> None:
        self.default_relationship = default_relationship
        self._adjacency: dict[VertexId, list[Neighbor]] = {}
        for vertex, entries in adjacency.items():
            self._adjacency[vertex] = [self._as_neighbor(entry) for entry in entries]
        self.recorded_edges: list[tuple[VertexId, VertexId, str]] = []
        self.neighbor_calls = 0

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[VertexId, VertexId] | tuple[VertexId, VertexId, str]],
        directed: bool = False,
        default_relationship: str = "edge",
    ) -> MappingGraphProvider:
        adjacency: dict[VertexId, list[tuple[VertexId, str]]] = {}
        for edge in edges:
            src, dst = edge[0], edge[1]
            label = edge[2] if len(edge) > 2 else default_relationship
            adjacency.setdefault(src, []).append((dst, label))
            adjacency.setdefault(dst, [])
            if not directed:
                adjacency[dst].append((src, label))
        return cls(adjacency, default_relationship=default_relationship)

    async def neighbors(self, vertex: VertexId) -> list[Neighbor]:
        self.neighbor_calls += 1
        return list(self._adjacency.get(vertex, []))

    def degree(self, vertex: VertexId) -> int:
        return len(self._adjacency.get(vertex, []))

    def record_edge(self, source: VertexId, target: VertexId, relationship: str) -> None:
        self.recorded_edges.append((source, target, relationship))

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def _as_neighbor(self, entry: VertexId | tuple[VertexId, str]) -> Neighbor:
        if isinstance(entry, tuple):
            return Neighbor(target_id=entry[0], relationship=entry[1])
        return Neighbor(target_id=entry, relationship=self.default_relationship)
