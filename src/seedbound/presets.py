from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence

from .engine import ExpansionEngine
from .models import VertexId
from .policies import (
    AdaptiveConfig,
    AdaptiveSalienceFeedback,
    CommonConvergence,
    DegreePriority,
    DelayedOverlapTermination,
    EntropyPriority,
    FifoPriority,
    FrontierExhaustion,
    PathPotentialPriority,
    PathTargetPerPair,
    RandomPriority,
    RetrospectiveSaliencePriority,
    SaliencePriority,
    TransitiveConnectivity,
)
from .providers.base import GraphProvider
from .registry import Registry


EngineFactory = Callable[..., ExpansionEngine]


def degree_prioritised(
    provider: GraphProvider,
    seeds: Sequence[VertexId],
    node_weights: Mapping[VertexId, float] | None = None,
    max_nodes: int | None = None,
    hub_threshold: int | None = None,
) -> ExpansionEngine:
    """Default hub-deferring expansion, run to exhaustion."""
    return ExpansionEngine(
        provider,
        seeds,
        priority=DegreePriority(node_weights=node_weights),
        termination=FrontierExhaustion(),
        max_nodes=max_nodes,
        hub_threshold=hub_threshold,
    )


def entropy_guided(
    provider: GraphProvider,
    seeds: Sequence[VertexId],
    epsilon: float = 0.001,
    max_nodes: int | None = None,
    hub_threshold: int | None = None,
) -> ExpansionEngine:
    """Entropy ordering run to frontier exhaustion."""
    return ExpansionEngine(
        provider,
        seeds,
        priority=EntropyPriority(epsilon=epsilon),
        termination=FrontierExhaustion(),
        max_nodes=max_nodes,
        hub_threshold=hub_threshold,
    )


def heterogeneity_aware(
    provider: GraphProvider,
    seeds: Sequence[VertexId],
    epsilon: float = 0.001,
    max_nodes: int | None = None,
    hub_threshold: int | None = None,
) -> ExpansionEngine:
    """Entropy ordering that stops once the overlap graph links every seed."""
    return ExpansionEngine(
        provider,
        seeds,
        priority=EntropyPriority(epsilon=epsilon),
        termination=TransitiveConnectivity(),
        max_nodes=max_nodes,
        hub_threshold=hub_threshold,
    )


def path_preserving(
    provider: GraphProvider,
    seeds: Sequence[VertexId],
    target_paths_per_pair: int | None = None,
    max_nodes: int | None = None,
    hub_threshold: int | None = None,
) -> ExpansionEngine:
    termination = FrontierExhaustion() if target_paths_per_pair is None else PathTargetPerPair(target_paths_per_pair)
    return ExpansionEngine(
        provider,
        seeds,
        priority=PathPotentialPriority(),
        termination=termination,
        max_nodes=max_nodes,
        hub_threshold=hub_threshold,
    )


def multi_frontier_adaptive(
    provider: GraphProvider,
    seeds: Sequence[VertexId],
    config: AdaptiveConfig | None = None,
    max_nodes: int | None = None,
    hub_threshold: int | None = None,
) -> ExpansionEngine:
    """Three-phase salience feedback; one controller serves as priority and termination."""
    controller = AdaptiveSalienceFeedback(config)
    return ExpansionEngine(
        provider,
        seeds,
        priority=controller,
        termination=controller,
        max_nodes=max_nodes,
        hub_threshold=hub_threshold,
    )


def breadth_first(
    provider: GraphProvider,
    seeds: Sequence[VertexId],
    max_nodes: int | None = None,
    hub_threshold: int | None = None,
) -> ExpansionEngine:
    return ExpansionEngine(
        provider,
        seeds,
        priority=FifoPriority(),
        max_nodes=max_nodes,
        hub_threshold=hub_threshold,
    )


def random_priority(
    provider: GraphProvider,
    seeds: Sequence[VertexId],
    seed: int = 42,
    max_nodes: int | None = None,
    hub_threshold: int | None = None,
) -> ExpansionEngine:
    return ExpansionEngine(
        provider,
        seeds,
        priority=RandomPriority(seed=seed),
        max_nodes=max_nodes,
        hub_threshold=hub_threshold,
    )


def salience_prioritised(
    provider: GraphProvider,
    seeds: Sequence[VertexId],
    node_salience: Mapping[VertexId, float] | None = None,
    max_nodes: int | None = None,
    hub_threshold: int | None = None,
) -> ExpansionEngine:
    """Follow vertices known to lie on salient paths, e.g. from ``compute_node_salience_scores``."""
    return ExpansionEngine(
        provider,
        seeds,
        priority=SaliencePriority(node_salience),
        termination=FrontierExhaustion(),
        max_nodes=max_nodes,
        hub_threshold=hub_threshold,
    )


def retrospective_salience(
    provider: GraphProvider,
    seeds: Sequence[VertexId],
    max_nodes: int | None = None,
    hub_threshold: int | None = None,
) -> ExpansionEngine:
    return ExpansionEngine(
        provider,
        seeds,
        priority=RetrospectiveSaliencePriority(),
        termination=FrontierExhaustion(),
        max_nodes=max_nodes,
        hub_threshold=hub_threshold,
    )


def intelligent_delayed(
    provider: GraphProvider,
    seeds: Sequence[VertexId],
    delay_iterations: int = 50,
    overlap_threshold: float = 0.5,
    max_nodes: int | None = None,
    hub_threshold: int | None = None,
) -> ExpansionEngine:
    """Retrospective salience ordering that stops a fixed delay after frontiers overlap."""
    if len(seeds) < 2:
        raise ValueError("delayed termination needs at least two seeds")
    return ExpansionEngine(
        provider,
        seeds,
        priority=RetrospectiveSaliencePriority(),
        termination=DelayedOverlapTermination(delay_iterations, overlap_threshold),
        max_nodes=max_nodes,
        hub_threshold=hub_threshold,
    )


def overlap_pairwise(
    provider: GraphProvider,
    seeds: Sequence[VertexId],
    max_nodes: int | None = None,
    hub_threshold: int | None = None,
) -> ExpansionEngine:
    """Degree ordering that stops once every seed pair has met at least once."""
    return ExpansionEngine(
        provider,
        seeds,
        priority=DegreePriority(),
        termination=PathTargetPerPair(1),
        max_nodes=max_nodes,
        hub_threshold=hub_threshold,
    )


def overlap_convergence(
    provider: GraphProvider,
    seeds: Sequence[VertexId],
    max_nodes: int | None = None,
    hub_threshold: int | None = None,
) -> ExpansionEngine:
    """Degree ordering that stops once one vertex has been reached from every seed."""
    return ExpansionEngine(
        provider,
        seeds,
        priority=DegreePriority(),
        termination=CommonConvergence(),
        max_nodes=max_nodes,
        hub_threshold=hub_threshold,
    )


PRESETS: Registry[ExpansionEngine] = Registry("preset")
PRESETS.register("degree", degree_prioritised)
PRESETS.register("entropy", entropy_guided)
PRESETS.register("heterogeneity", heterogeneity_aware)
PRESETS.register("path_preserving", path_preserving)
PRESETS.register("adaptive", multi_frontier_adaptive)
PRESETS.register("bfs", breadth_first)
PRESETS.register("random", random_priority)
PRESETS.register("salience", salience_prioritised)
PRESETS.register("retrospective", retrospective_salience)
PRESETS.register("delayed", intelligent_delayed)
PRESETS.register("overlap_pairwise", overlap_pairwise)
PRESETS.register("overlap_convergence", overlap_convergence)


def get_preset(name: str) -> EngineFactory:
    return PRESETS.factory(name)


def list_presets() -> list[str]:
    return PRESETS.names()
