from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


VertexId = str

DEGREE_BUCKETS: tuple[tuple[int, str], ...] = (
    (5, "1-5"),
    (10, "6-10"),
    (50, "11-50"),
    (100, "51-100"),
    (500, "101-500"),
    (1000, "501-1000"),
)


def degree_bucket(degree: int) -> str:
    for upper, label in DEGREE_BUCKETS:
        if degree <= upper:
            return label
    return "1000+"


@dataclass(slots=True, frozen=True)
class Neighbor:
    target_id: VertexId
    relationship: str = "edge"


@dataclass(slots=True, frozen=True)
class ParentLink:
    parent: VertexId
    relationship: str


def path_signature(from_seed: int, to_seed: int, nodes: list[VertexId] | tuple[VertexId, ...]) -> str:
    """Direction-normalised key for a path between two seeds.

    The node sequence is always written starting from the lower-indexed seed, so a
    path and its reverse (with swapped seed indices) share one signature.
    """
    if from_seed <= to_seed:
        low, high, ordered = from_seed, to_seed, list(nodes)
    else:
        low, high, ordered = to_seed, from_seed, list(reversed(nodes))
    return f"{low}-{high}-{','.join(ordered)}"


@dataclass(slots=True, frozen=True)
class PathRecord:
    from_seed: int
    to_seed: int
    nodes: tuple[VertexId, ...]
    salience: float | None = None

    def __post_init__(self) -> None:
        if self.from_seed < 0 or self.to_seed < 0:
            raise ValueError("seed indices must be >= 0")
        if self.from_seed == self.to_seed:
            raise ValueError("a path must connect two distinct frontiers")
        if not self.nodes:
            raise ValueError("nodes is required")
        if not isinstance(self.nodes, tuple):
            object.__setattr__(self, "nodes", tuple(self.nodes))

    @property
    def signature(self) -> str:
        return path_signature(self.from_seed, self.to_seed, self.nodes)

    @property
    def is_simple(self) -> bool:
        return len(set(self.nodes)) == len(self.nodes)

    def reversed(self) -> PathRecord:
        return PathRecord(
            from_seed=self.to_seed,
            to_seed=self.from_seed,
            nodes=tuple(reversed(self.nodes)),
            salience=self.salience,
        )


@dataclass(slots=True)
class ExpansionStats:
    nodes_expanded: int = 0
    edges_traversed: int = 0
    iterations: int = 0
    rejected_paths: int = 0
    degree_distribution: dict[str, int] = field(default_factory=dict)
    first_hub_encounter_fraction: float | None = None
    mean_hub_encounter_fraction: float | None = None

    def record_degree(self, degree: int) -> None:
        bucket = degree_bucket(degree)
        self.degree_distribution[bucket] = self.degree_distribution.get(bucket, 0) + 1


@dataclass(slots=True)
class ExpansionResult:
    paths: list[PathRecord]
    sampled_nodes: set[VertexId]
    sampled_edges: set[str]
    visited_per_frontier: list[set[VertexId]]
    stats: ExpansionStats
    discovery_iteration: dict[VertexId, int]
    hub_encounter_order: dict[VertexId, int] = field(default_factory=dict)
    termination_reason: str = "exhausted"
    final_phase: str | None = None

    def path_diversity(self) -> float:
        return path_diversity(self.paths)

    def mean_path_salience(self) -> float | None:
        values = [p.salience for p in self.paths if p.salience is not None]
        if not values:
            return None
        return sum(values) / len(values)

    def to_dict(self) -> dict[str, Any]:
        return {
            "paths": [
                {
                    "from_seed": p.from_seed,
                    "to_seed": p.to_seed,
                    "nodes": list(p.nodes),
                    "salience": p.salience,
                }
                for p in self.paths
            ],
            "sampled_nodes": sorted(self.sampled_nodes),
            "sampled_edges": sorted(self.sampled_edges),
            "visited_per_frontier": [sorted(v) for v in self.visited_per_frontier],
            "stats": {
                "nodes_expanded": self.stats.nodes_expanded,
                "edges_traversed": self.stats.edges_traversed,
                "iterations": self.stats.iterations,
                "rejected_paths": self.stats.rejected_paths,
                "degree_distribution": dict(self.stats.degree_distribution),
                "first_hub_encounter_fraction": self.stats.first_hub_encounter_fraction,
                "mean_hub_encounter_fraction": self.stats.mean_hub_encounter_fraction,
            },
            "discovery_iteration": dict(self.discovery_iteration),
            "hub_encounter_order": dict(self.hub_encounter_order),
            "termination_reason": self.termination_reason,
            "final_phase": self.final_phase,
        }


def path_diversity(paths: list[PathRecord]) -> float:
    """Unique path vertices divided by total vertex occurrences across paths."""
    total = 0
    unique: set[VertexId] = set()
    for path in paths:
        unique.update(path.nodes)
        total += len(path.nodes)
    if total == 0:
        return 0.0
    return len(unique) / total


def jaccard_similarity(left: set[VertexId], right: set[VertexId]) -> float:
    union = len(left | right)
    if union == 0:
        return 0.0
    return len(left & right) / union
