from __future__ import annotations

import itertools
import math
import random
from collections import Counter
from collections.abc import Mapping
from typing import TYPE_CHECKING

import numpy as np

from ..models import Neighbor, VertexId
from .base import PriorityPolicy

if TYPE_CHECKING:
    from ..state import ExpansionState


def shannon_entropy(neighbors: list[Neighbor]) -> float:
    """Base-2 entropy of the relationship labels among ``neighbors``."""
    if not neighbors:
        return 0.0
    counts = Counter(n.relationship for n in neighbors)
    probs = np.array(list(counts.values()), dtype=np.float64) / len(neighbors)
    return max(0.0, float(-(probs * np.log2(probs)).sum()))


def path_potential(vertex: VertexId, state: ExpansionState) -> int:
    """Cached neighbours of ``vertex`` already visited by frontiers other than its owner.

    A neighbour visited by several other frontiers is counted once per frontier.
    """
    neighbors = state.cached_neighbor_ids(vertex)
    if not neighbors:
        return 0
    owner = state.owner_of(vertex)
    potential = 0
    for frontier in state.frontiers:
        if frontier.index == owner:
            continue
        potential += len(neighbors & frontier.visited)
    return potential


class DegreePriority(PriorityPolicy):
    """deg(v) / (w(v) + eps), delegated to the provider. Defers hubs."""

    name = "degree"

    def __init__(self, node_weights: Mapping[VertexId, float] | None = None, epsilon: float = 1e-10) -> None:
        self.node_weights = dict(node_weights or {})
        self.epsilon = epsilon

    def _score(self, vertex: VertexId, state: ExpansionState) -> float:
        weight = float(self.node_weights.get(vertex, 1.0))
        return float(state.provider.priority(vertex, node_weight=weight, epsilon=self.epsilon))

    def seed_priority(self, vertex: VertexId, state: ExpansionState) -> float:
        return self._score(vertex, state)

    async def priority(self, vertex: VertexId, state: ExpansionState) -> float:
        return self._score(vertex, state)


class EntropyPriority(PriorityPolicy):
    """log(deg + 1) / (H_local + eps) over relationship labels around the vertex.

    Homogeneous neighbourhoods (H = 0) get the largest finite value and are deferred
    behind heterogeneous vertices of the same degree.
    """

    name = "entropy"

    def __init__(self, epsilon: float = 0.001) -> None:
        if epsilon <= 0:
            raise ValueError("epsilon must be > 0")
        self.epsilon = epsilon
        self.entropy_cache: dict[VertexId, float] = {}

    async def local_entropy(self, vertex: VertexId, state: ExpansionState) -> float:
        cached = self.entropy_cache.get(vertex)
        if cached is not None:
            return cached
        entropy = shannon_entropy(await state.fetch_neighbors(vertex))
        self.entropy_cache[vertex] = entropy
        return entropy

    def seed_priority(self, vertex: VertexId, state: ExpansionState) -> float:
        # Seeds are queued before any neighbour data is available.
        return math.log(state.provider.degree(vertex) + 1)

    async def priority(self, vertex: VertexId, state: ExpansionState) -> float:
        degree = state.provider.degree(vertex)
        entropy = await self.local_entropy(vertex, state)
        return math.log(degree + 1) / (entropy + self.epsilon)


class PathPotentialPriority(PriorityPolicy):
    """deg(v) / (1 + path_potential(v)); pulls frontiers toward each other's territory."""

    name = "path_potential"

    def seed_priority(self, vertex: VertexId, state: ExpansionState) -> float:
        return state.provider.degree(vertex) / (1 + path_potential(vertex, state))

    async def priority(self, vertex: VertexId, state: ExpansionState) -> float:
        return self.seed_priority(vertex, state)


class FifoPriority(PriorityPolicy):
    """Discovery order across all frontiers, i.e. breadth-first expansion."""

    name = "fifo"

    def __init__(self) -> None:
        self._counter = itertools.count()

    def seed_priority(self, vertex: VertexId, state: ExpansionState) -> float:
        return float(next(self._counter))

    async def priority(self, vertex: VertexId, state: ExpansionState) -> float:
        return float(next(self._counter))


class RandomPriority(PriorityPolicy):
    name = "random"

    def __init__(self, seed: int = 42) -> None:
        self.rng = random.Random(seed)

    def seed_priority(self, vertex: VertexId, state: ExpansionState) -> float:
        return self.rng.random()

    async def priority(self, vertex: VertexId, state: ExpansionState) -> float:
        return self.rng.random()
