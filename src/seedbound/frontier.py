from __future__ import annotations

from dataclasses import dataclass, field

from .models import ParentLink, VertexId
from .priority_queue import PriorityQueue


@dataclass(slots=True)
class FrontierState:
    """Exploration state grown from one seed."""

    index: int
    seed: VertexId
    queue: PriorityQueue[VertexId] = field(default_factory=PriorityQueue)
    visited: set[VertexId] = field(default_factory=set)
    parents: dict[VertexId, ParentLink] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("index must be >= 0")
        self.visited.add(self.seed)

    def visit(self, vertex: VertexId, parent: VertexId, relationship: str) -> None:
        self.visited.add(vertex)
        self.parents[vertex] = ParentLink(parent=parent, relationship=relationship)

    def chain_to_seed(self, vertex: VertexId) -> list[VertexId]:
        """Parent chain from ``vertex`` back to this frontier's seed, seed first."""
        chain = [vertex]
        link = self.parents.get(vertex)
        while link is not None:
            chain.append(link.parent)
            link = self.parents.get(link.parent)
        chain.reverse()
        return chain

    @property
    def exhausted(self) -> bool:
        return len(self.queue) == 0
