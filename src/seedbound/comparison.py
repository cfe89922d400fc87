from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .models import ExpansionResult, VertexId
from .presets import get_preset
from .providers.base import GraphProvider


logger = logging.getLogger(__name__)

DEFAULT_PRESETS = ("degree", "entropy", "adaptive", "bfs", "random")


@dataclass(slots=True)
class ComparisonConfig:
    presets: tuple[str, ...] = DEFAULT_PRESETS
    max_nodes: int | None = None
    hub_threshold: int | None = 10

    def __post_init__(self) -> None:
        if not self.presets:
            raise ValueError("at least one preset is required")
        if self.max_nodes is not None and self.max_nodes < 0:
            raise ValueError("max_nodes must be >= 0")
        if self.hub_threshold is not None and self.hub_threshold < 0:
            raise ValueError("hub_threshold must be >= 0")


@dataclass(slots=True)
class ComparisonRow:
    method: str
    path_count: int
    sampled_nodes: int
    sampled_edges: int
    nodes_expanded: int
    rejected_paths: int
    path_diversity: float
    mean_path_salience: float | None
    first_hub_fraction: float | None
    mean_hub_fraction: float | None
    termination_reason: str
    final_phase: str | None = None


@dataclass(slots=True)
class ComparisonReport:
    rows: list[ComparisonRow]
    results: dict[str, ExpansionResult] = field(default_factory=dict)

    @property
    def visited_sets_agree(self) -> bool:
        """True when every run that went to exhaustion sampled the same vertex set."""
        exhausted = [r.sampled_nodes for r in self.results.values() if r.termination_reason == "exhausted"]
        return all(nodes == exhausted[0] for nodes in exhausted[1:])


def row_from_result(method: str, result: ExpansionResult) -> ComparisonRow:
    return ComparisonRow(
        method=method,
        path_count=len(result.paths),
        sampled_nodes=len(result.sampled_nodes),
        sampled_edges=len(result.sampled_edges),
        nodes_expanded=result.stats.nodes_expanded,
        rejected_paths=result.stats.rejected_paths,
        path_diversity=result.path_diversity(),
        mean_path_salience=result.mean_path_salience(),
        first_hub_fraction=result.stats.first_hub_encounter_fraction,
        mean_hub_fraction=result.stats.mean_hub_encounter_fraction,
        termination_reason=result.termination_reason,
        final_phase=result.final_phase,
    )


async def compare_policies(
    provider_factory: Callable[[], GraphProvider],
    seeds: Sequence[VertexId],
    config: ComparisonConfig | None = None,
) -> ComparisonReport:
    """Run each preset concurrently over its own provider and engine."""
    cfg = config or ComparisonConfig()
    engines = {
        name: get_preset(name)(
            provider_factory(),
            seeds,
            max_nodes=cfg.max_nodes,
            hub_threshold=cfg.hub_threshold,
        )
        for name in cfg.presets
    }
    logger.info("comparing %d presets over %d seeds", len(engines), len(seeds))
    outcomes = await asyncio.gather(*(engine.run() for engine in engines.values()))
    results = dict(zip(engines.keys(), outcomes))
    rows = [row_from_result(name, result) for name, result in results.items()]
    return ComparisonReport(rows=rows, results=results)
