from __future__ import annotations

import networkx as nx

from ..models import Neighbor, VertexId
from .base import GraphProvider


class NetworkXGraphProvider(GraphProvider):
    """Serves neighbours from an in-memory networkx graph.

    Directed graphs expose successors as neighbours and report in + out degree.
    Traversed edges are collected into ``recorded`` for inspection or drawing.
    """

    def __init__(
        self,
        graph: nx.Graph,
        relationship_attr: str = "relationship",
        default_relationship: str = "edge",
    ) -> None:
        self.graph = graph
        self.relationship_attr = relationship_attr
        self.default_relationship = default_relationship
        self.recorded = nx.DiGraph()

    async def neighbors(self, vertex: VertexId) -> list[Neighbor]:
        if vertex not in self.graph:
            return []
        if self.graph.is_directed():
            items = self.graph.succ[vertex].items()
        else:
            items = self.graph.adj[vertex].items()
        return [
            Neighbor(
                target_id=target,
                relationship=str(data.get(self.relationship_attr, self.default_relationship)),
            )
            for target, data in items
        ]

    def degree(self, vertex: VertexId) -> int:
        if vertex not in self.graph:
            return 0
        if self.graph.is_directed():
            return int(self.graph.in_degree(vertex) + self.graph.out_degree(vertex))
        return int(self.graph.degree(vertex))

    def record_edge(self, source: VertexId, target: VertexId, relationship: str) -> None:
        self.recorded.add_edge(source, target, **{self.relationship_attr: relationship})

    def vertex_count(self) -> int:
        return int(self.graph.number_of_nodes())
