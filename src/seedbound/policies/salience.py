from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING

from ..models import PathRecord, VertexId, jaccard_similarity
from .base import PriorityPolicy

if TYPE_CHECKING:
    from ..state import ExpansionState


logger = logging.getLogger(__name__)


def compute_node_salience_scores(paths: Iterable[Sequence[VertexId]]) -> dict[VertexId, float]:
    """Number of paths each vertex lies on; a vertex repeated inside one path counts once."""
    scores: dict[VertexId, float] = {}
    for nodes in paths:
        for node in set(nodes):
            scores[node] = scores.get(node, 0.0) + 1.0
    return scores


class SaliencePriority(PriorityPolicy):
    """deg(v) - scale * salience(v) from a precomputed salience map.

    The scale lets salience dominate degree, so vertices on known salient paths go first
    and degree only orders vertices of equal salience.
    """

    name = "salience"

    def __init__(self, node_salience: Mapping[VertexId, float] | None = None, scale: float = 1000.0) -> None:
        if scale < 0:
            raise ValueError("scale must be >= 0")
        self.node_salience = dict(node_salience or {})
        self.scale = scale

    def seed_priority(self, vertex: VertexId, state: ExpansionState) -> float:
        return state.provider.degree(vertex) - self.scale * self.node_salience.get(vertex, 0.0)

    async def priority(self, vertex: VertexId, state: ExpansionState) -> float:
        return self.seed_priority(vertex, state)


class RetrospectiveSaliencePriority(PriorityPolicy):
    """Degree ordering until the first path, then deg(v) * (1 - MI(v)).

    MI(v) is the largest Jaccard overlap seen between the neighbourhood of v and the
    vertices of an accepted path. Every sampled vertex is rescored whenever a path is
    accepted; the first path also asks the engine to rescore the queues.
    """

    name = "retrospective"

    def __init__(self) -> None:
        self.mutual_information: dict[VertexId, float] = {}
        self.salience_active = False
        self._reorder_pending = False

    async def priority(self, vertex: VertexId, state: ExpansionState) -> float:
        degree = float(state.provider.degree(vertex))
        if not self.salience_active:
            return degree
        return degree * (1.0 - self.mutual_information.get(vertex, 0.0))

    async def observe_path(self, path: PathRecord, state: ExpansionState) -> None:
        members = set(path.nodes)
        for vertex in state.sampled_nodes:
            neighbors = {n.target_id for n in await state.fetch_neighbors(vertex)}
            score = jaccard_similarity(neighbors, members)
            if score > self.mutual_information.get(vertex, 0.0):
                self.mutual_information[vertex] = score
        if not self.salience_active:
            logger.debug("retrospective salience active after first path %s", path.signature)
            self.salience_active = True
            self._reorder_pending = True

    def take_reorder_request(self) -> bool:
        pending = self._reorder_pending
        self._reorder_pending = False
        return pending
