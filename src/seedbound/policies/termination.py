from __future__ import annotations

import logging
from itertools import combinations
from typing import TYPE_CHECKING

import networkx as nx

from ..models import PathRecord, VertexId, jaccard_similarity
from .base import TerminationPolicy

if TYPE_CHECKING:
    from ..state import ExpansionState


logger = logging.getLogger(__name__)


class FrontierExhaustion(TerminationPolicy):
    """Parameter-free default: the run ends only when every queue is empty."""

    name = "exhaustion"

    def should_stop(self, state: ExpansionState) -> bool:
        return False


class TransitiveConnectivity(TerminationPolicy):
    """Stops once every seed is linked to every other through frontier overlaps.

    Overlaps form an undirected graph over frontier indices; an edge is added for each
    accepted path. With a single seed nothing can overlap and the run goes to exhaustion.
    """

    name = "transitive"

    def __init__(self) -> None:
        self.overlap = nx.Graph()

    def on_path(self, path: PathRecord, state: ExpansionState) -> None:
        self.overlap.add_edge(path.from_seed, path.to_seed)

    def should_stop(self, state: ExpansionState) -> bool:
        n = len(state.frontiers)
        if n <= 1:
            return False
        if 0 not in self.overlap:
            return False
        reached = nx.node_connected_component(self.overlap, 0)
        return len(reached) == n


class PathTargetPerPair(TerminationPolicy):
    """Stops when each unordered seed pair has at least ``target`` accepted paths."""

    name = "path_target"

    def __init__(self, target: int) -> None:
        if target < 1:
            raise ValueError("target must be >= 1")
        self.target = target
        self.counts: dict[tuple[int, int], int] = {}

    def on_path(self, path: PathRecord, state: ExpansionState) -> None:
        key = (min(path.from_seed, path.to_seed), max(path.from_seed, path.to_seed))
        self.counts[key] = self.counts.get(key, 0) + 1

    def should_stop(self, state: ExpansionState) -> bool:
        n = len(state.frontiers)
        if n <= 1:
            return False
        return all(self.counts.get(pair, 0) >= self.target for pair in combinations(range(n), 2))


class AnyOf(TerminationPolicy):
    name = "any_of"

    def __init__(self, *policies: TerminationPolicy) -> None:
        if not policies:
            raise ValueError("at least one termination policy is required")
        self.policies = policies

    def on_path(self, path: PathRecord, state: ExpansionState) -> None:
        for policy in self.policies:
            policy.on_path(path, state)

    def should_stop(self, state: ExpansionState) -> bool:
        # Every member is evaluated so stateful members see each iteration.
        results = [policy.should_stop(state) for policy in self.policies]
        return any(results)

    def phase(self) -> str | None:
        for policy in self.policies:
            label = policy.phase()
            if label is not None:
                return label
        return None


class CommonConvergence(TerminationPolicy):
    """Stops once some vertex has been visited by every frontier."""

    name = "convergence"

    def __init__(self) -> None:
        self.meeting_point: VertexId | None = None

    def should_stop(self, state: ExpansionState) -> bool:
        if len(state.frontiers) <= 1:
            return False
        if self.meeting_point is None:
            common = set.intersection(*(f.visited for f in state.frontiers))
            if not common:
                return False
            self.meeting_point = min(common)
        return True


class DelayedOverlapTermination(TerminationPolicy):
    """Keeps expanding for ``delay_iterations`` after two frontiers first overlap.

    Two frontiers overlap when the Jaccard similarity of their visited sets reaches
    ``overlap_threshold``. The delay is counted in engine iterations.
    """

    name = "delayed_overlap"

    def __init__(self, delay_iterations: int = 50, overlap_threshold: float = 0.5) -> None:
        if delay_iterations < 0:
            raise ValueError("delay_iterations must be >= 0")
        if not 0.0 < overlap_threshold <= 1.0:
            raise ValueError("overlap_threshold must be in (0, 1]")
        self.delay_iterations = delay_iterations
        self.overlap_threshold = overlap_threshold
        self.overlap_detected_at: int | None = None

    def should_stop(self, state: ExpansionState) -> bool:
        iteration = state.stats.iterations
        if self.overlap_detected_at is None:
            if not self._frontiers_overlap(state):
                return False
            self.overlap_detected_at = iteration
            logger.debug("frontier overlap at iteration %d, stopping after %d more", iteration, self.delay_iterations)
        return iteration - self.overlap_detected_at >= self.delay_iterations

    def _frontiers_overlap(self, state: ExpansionState) -> bool:
        for left, right in combinations(state.frontiers, 2):
            if jaccard_similarity(left.visited, right.visited) >= self.overlap_threshold:
                return True
        return False
