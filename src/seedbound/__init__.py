"""Multi-seed priority-ordered graph expansion with path discovery."""

from .comparison import ComparisonConfig, ComparisonReport, ComparisonRow, compare_policies
from .engine import ExpansionEngine
from .frontier import FrontierState
from .models import (
    ExpansionResult,
    ExpansionStats,
    Neighbor,
    ParentLink,
    PathRecord,
    degree_bucket,
    jaccard_similarity,
    path_diversity,
    path_signature,
)
from .paths import estimate_path_salience, rank_paths_by_salience, reconstruct_path
from .policies import (
    AdaptiveConfig,
    AdaptiveSalienceFeedback,
    AnyOf,
    CommonConvergence,
    DegreePriority,
    DelayedOverlapTermination,
    EntropyPriority,
    FifoPriority,
    FrontierExhaustion,
    PathPotentialPriority,
    PathTargetPerPair,
    Phase,
    PriorityPolicy,
    RandomPriority,
    RetrospectiveSaliencePriority,
    SaliencePriority,
    TerminationPolicy,
    TransitiveConnectivity,
    compute_node_salience_scores,
)
from .presets import (
    breadth_first,
    degree_prioritised,
    entropy_guided,
    heterogeneity_aware,
    intelligent_delayed,
    multi_frontier_adaptive,
    overlap_convergence,
    overlap_pairwise,
    path_preserving,
    random_priority,
    retrospective_salience,
    salience_prioritised,
)
from .priority_queue import PriorityQueue
from .providers import GraphProvider, MappingGraphProvider, NetworkXGraphProvider
from .state import ExpansionState

__all__ = [
    "PriorityQueue",
    "FrontierState",
    "ExpansionState",
    "ExpansionEngine",
    "Neighbor",
    "ParentLink",
    "PathRecord",
    "ExpansionStats",
    "ExpansionResult",
    "degree_bucket",
    "path_signature",
    "path_diversity",
    "jaccard_similarity",
    "reconstruct_path",
    "estimate_path_salience",
    "rank_paths_by_salience",
    "GraphProvider",
    "MappingGraphProvider",
    "NetworkXGraphProvider",
    "PriorityPolicy",
    "TerminationPolicy",
    "DegreePriority",
    "EntropyPriority",
    "PathPotentialPriority",
    "FifoPriority",
    "RandomPriority",
    "SaliencePriority",
    "RetrospectiveSaliencePriority",
    "compute_node_salience_scores",
    "FrontierExhaustion",
    "TransitiveConnectivity",
    "PathTargetPerPair",
    "CommonConvergence",
    "DelayedOverlapTermination",
    "AnyOf",
    "Phase",
    "AdaptiveConfig",
    "AdaptiveSalienceFeedback",
    "degree_prioritised",
    "entropy_guided",
    "heterogeneity_aware",
    "path_preserving",
    "multi_frontier_adaptive",
    "breadth_first",
    "random_priority",
    "salience_prioritised",
    "retrospective_salience",
    "intelligent_delayed",
    "overlap_pairwise",
    "overlap_convergence",
    "ComparisonConfig",
    "ComparisonRow",
    "ComparisonReport",
    "compare_policies",
]
