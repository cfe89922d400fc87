from .adaptive import AdaptiveConfig, AdaptiveSalienceFeedback, Phase, next_phase, salience_plateaued
from .base import PriorityPolicy, TerminationPolicy
from .priority import (
    DegreePriority,
    EntropyPriority,
    FifoPriority,
    PathPotentialPriority,
    RandomPriority,
    path_potential,
    shannon_entropy,
)
from .registry import (
    PRIORITIES,
    TERMINATIONS,
    get_priority,
    get_termination,
    list_priorities,
    list_terminations,
    register_priority,
    register_termination,
)
from .salience import RetrospectiveSaliencePriority, SaliencePriority, compute_node_salience_scores
from .termination import (
    AnyOf,
    CommonConvergence,
    DelayedOverlapTermination,
    FrontierExhaustion,
    PathTargetPerPair,
    TransitiveConnectivity,
)

# Built-in priority registrations.
register_priority("degree", DegreePriority)
register_priority("entropy", EntropyPriority)
register_priority("path_potential", PathPotentialPriority)
register_priority("fifo", FifoPriority)
register_priority("random", RandomPriority)
register_priority("adaptive", AdaptiveSalienceFeedback)
register_priority("salience", SaliencePriority)
register_priority("retrospective", RetrospectiveSaliencePriority)

# Built-in termination registrations.
register_termination("exhaustion", FrontierExhaustion)
register_termination("transitive", TransitiveConnectivity)
register_termination("path_target", lambda target=1: PathTargetPerPair(target))
register_termination("full_pairwise", lambda: PathTargetPerPair(1))
register_termination("convergence", CommonConvergence)
register_termination("delayed_overlap", DelayedOverlapTermination)

__all__ = [
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
    "path_potential",
    "shannon_entropy",
    "FrontierExhaustion",
    "TransitiveConnectivity",
    "PathTargetPerPair",
    "CommonConvergence",
    "DelayedOverlapTermination",
    "AnyOf",
    "Phase",
    "next_phase",
    "salience_plateaued",
    "AdaptiveConfig",
    "AdaptiveSalienceFeedback",
    "PRIORITIES",
    "TERMINATIONS",
    "register_priority",
    "get_priority",
    "list_priorities",
    "register_termination",
    "get_termination",
    "list_terminations",
]
