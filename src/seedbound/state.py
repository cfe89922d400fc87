from __future__ import annotations

from collections.abc import Sequence

from .frontier import FrontierState
from .models import ExpansionStats, Neighbor, PathRecord, VertexId
from .providers.base import GraphProvider


class ExpansionState:
    """Mutable bookkeeping owned by a single expansion run.

    Nothing here is shared between runs; policies receive the state of the run they
    serve and may read any of it.
    """

    def __init__(self, provider: GraphProvider, seeds: Sequence[VertexId]) -> None:
        if len(seeds) == 0:
            raise ValueError("at least one seed is required")
        self.provider = provider
        self.seeds: tuple[VertexId, ...] = tuple(seeds)
        self.frontiers = [FrontierState(index=i, seed=seed) for i, seed in enumerate(self.seeds)]
        self.owner: dict[VertexId, int] = {}
        self.discovery_iteration: dict[VertexId, int] = {}
        self.signatures: set[str] = set()
        self.paths: list[PathRecord] = []
        self.sampled_edges: set[str] = set()
        self.stats = ExpansionStats()
        self.hub_encounter_order: dict[VertexId, int] = {}
        self.neighbor_cache: dict[VertexId, list[Neighbor]] = {}

        for frontier in self.frontiers:
            self.claim(frontier.seed, frontier.index)
            self.discovery_iteration.setdefault(frontier.seed, 0)

    def owner_of(self, vertex: VertexId) -> int | None:
        return self.owner.get(vertex)

    def claim(self, vertex: VertexId, frontier_index: int) -> bool:
        """Set the owning frontier of ``vertex`` unless one is already recorded."""
        if vertex in self.owner:
            return False
        self.owner[vertex] = frontier_index
        return True

    async def fetch_neighbors(self, vertex: VertexId) -> list[Neighbor]:
        cached = self.neighbor_cache.get(vertex)
        if cached is None:
            cached = await self.provider.neighbors(vertex)
            self.neighbor_cache[vertex] = cached
        return cached

    def cached_neighbor_ids(self, vertex: VertexId) -> set[VertexId]:
        return {n.target_id for n in self.neighbor_cache.get(vertex, ())}

    def has_open_frontier(self) -> bool:
        return any(not f.exhausted for f in self.frontiers)

    def select_frontier(self) -> FrontierState | None:
        """Frontier whose queue head has the globally smallest priority; lowest index wins ties."""
        best: FrontierState | None = None
        best_priority = float("inf")
        for frontier in self.frontiers:
            if frontier.exhausted:
                continue
            head = frontier.queue.peek_priority()
            if best is None or head < best_priority:
                best = frontier
                best_priority = head
        return best

    def record_path(self, path: PathRecord) -> bool:
        signature = path.signature
        if signature in self.signatures:
            return False
        self.signatures.add(signature)
        self.paths.append(path)
        return True

    @property
    def sampled_nodes(self) -> set[VertexId]:
        nodes: set[VertexId] = set()
        for frontier in self.frontiers:
            nodes |= frontier.visited
        return nodes
