from __future__ import annotations

import logging
from collections.abc import Sequence

from .frontier import FrontierState
from .models import ExpansionResult, Neighbor, PathRecord, VertexId
from .paths import reconstruct_path
from .policies.base import PriorityPolicy, TerminationPolicy
from .policies.priority import DegreePriority
from .policies.termination import FrontierExhaustion
from .providers.base import GraphProvider
from .state import ExpansionState


logger = logging.getLogger(__name__)


class ExpansionEngine:
    """Grows one frontier per seed and records the paths where frontiers meet.

    Each iteration expands the single vertex with the globally lowest priority across
    all frontiers. An engine is single-use: build a new one for every run.
    """

    EXHAUSTED = "exhausted"
    POLICY = "policy"
    BUDGET = "budget"

    def __init__(
        self,
        provider: GraphProvider,
        seeds: Sequence[VertexId],
        priority: PriorityPolicy | None = None,
        termination: TerminationPolicy | None = None,
        max_nodes: int | None = None,
        hub_threshold: int | None = None,
    ) -> None:
        if max_nodes is not None and max_nodes < 0:
            raise ValueError("max_nodes must be >= 0")
        if hub_threshold is not None and hub_threshold < 0:
            raise ValueError("hub_threshold must be >= 0")
        self.provider = provider
        self.priority = priority or DegreePriority()
        self.termination = termination or FrontierExhaustion()
        self.max_nodes = max_nodes
        self.hub_threshold = hub_threshold
        self.state = ExpansionState(provider, seeds)
        self._started = False

    async def run(self) -> ExpansionResult:
        if self._started:
            raise RuntimeError("an ExpansionEngine can only run once")
        self._started = True

        state = self.state
        for frontier in state.frontiers:
            frontier.queue.push(frontier.seed, self.priority.seed_priority(frontier.seed, state))
        logger.info(
            "expansion start seeds=%d priority=%s termination=%s",
            len(state.frontiers),
            self.priority.name,
            self.termination.name,
        )

        reason = self.EXHAUSTED
        while True:
            if not state.has_open_frontier():
                break
            if self.termination.should_stop(state):
                reason = self.POLICY
                break
            if self.priority.take_reorder_request():
                await self._reprioritise()

            frontier = state.select_frontier()
            if frontier is None:
                break
            vertex = frontier.queue.pop()
            if vertex is None:
                continue
            if self.max_nodes is not None and state.stats.nodes_expanded >= self.max_nodes:
                reason = self.BUDGET
                break

            state.stats.iterations += 1
            await self._expand(frontier, vertex)

        self._finalise_hub_fractions()
        result = ExpansionResult(
            paths=list(state.paths),
            sampled_nodes=state.sampled_nodes,
            sampled_edges=set(state.sampled_edges),
            visited_per_frontier=[set(f.visited) for f in state.frontiers],
            stats=state.stats,
            discovery_iteration=dict(state.discovery_iteration),
            hub_encounter_order=dict(state.hub_encounter_order),
            termination_reason=reason,
            final_phase=self.termination.phase(),
        )
        logger.info(
            "expansion done reason=%s expanded=%d paths=%d sampled=%d",
            reason,
            state.stats.nodes_expanded,
            len(result.paths),
            len(result.sampled_nodes),
        )
        return result

    async def _expand(self, frontier: FrontierState, vertex: VertexId) -> None:
        state = self.state
        stats = state.stats
        stats.nodes_expanded += 1
        degree = self.provider.degree(vertex)
        stats.record_degree(degree)
        if (
            self.hub_threshold is not None
            and degree >= self.hub_threshold
            and vertex not in state.hub_encounter_order
        ):
            state.hub_encounter_order[vertex] = stats.nodes_expanded

        neighbors: list[Neighbor] = await state.fetch_neighbors(vertex)
        iteration = stats.iterations

        for neighbor in neighbors:
            target = neighbor.target_id
            if target in frontier.visited:
                continue
            stats.edges_traversed += 1
            self.provider.record_edge(vertex, target, neighbor.relationship)
            state.sampled_edges.add(f"{vertex}->{target}")
            frontier.visit(target, vertex, neighbor.relationship)
            state.discovery_iteration.setdefault(target, iteration)

            # Read ownership before this frontier may claim the vertex.
            owner = state.owner_of(target)
            if owner is not None and owner != frontier.index:
                await self._record_meeting(frontier, state.frontiers[owner], target)
            state.claim(target, frontier.index)

            frontier.queue.push(target, await self.priority.priority(target, state))

    async def _record_meeting(self, active: FrontierState, owner: FrontierState, meeting: VertexId) -> None:
        state = self.state
        nodes = reconstruct_path(active, owner, meeting)
        if nodes is None:
            state.stats.rejected_paths += 1
            logger.debug("non-simple path at %s between frontiers %d and %d", meeting, active.index, owner.index)
            return

        path = PathRecord(from_seed=active.index, to_seed=owner.index, nodes=tuple(nodes))
        path = self.priority.annotate_path(path, state)
        if not state.record_path(path):
            state.stats.rejected_paths += 1
            return

        logger.debug("path %d->%d via %s: %s", path.from_seed, path.to_seed, meeting, ",".join(path.nodes))
        await self.priority.observe_path(path, state)
        self.termination.on_path(path, state)

    async def _reprioritise(self) -> None:
        state = self.state
        for frontier in state.frontiers:
            items = frontier.queue.drain()
            for item in items:
                frontier.queue.push(item, await self.priority.priority(item, state))
        logger.debug("re-prioritised %d frontiers", len(state.frontiers))

    def _finalise_hub_fractions(self) -> None:
        stats = self.state.stats
        positions = list(self.state.hub_encounter_order.values())
        if not positions or stats.nodes_expanded == 0:
            return
        stats.first_hub_encounter_fraction = min(positions) / stats.nodes_expanded
        stats.mean_hub_encounter_fraction = sum(positions) / len(positions) / stats.nodes_expanded
