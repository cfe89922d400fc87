from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from ..models import PathRecord, VertexId, path_diversity
from ..paths import estimate_path_salience
from .base import PriorityPolicy, TerminationPolicy
from .priority import path_potential

if TYPE_CHECKING:
    from ..state import ExpansionState


logger = logging.getLogger(__name__)

PLATEAU_EPSILON = 0.001


class Phase(Enum):
    DISCOVERY = "discovery"
    EXPLOITATION = "exploitation"
    STABILITY = "stability"


def next_phase(phase: Phase, path_count: int, plateaued: bool, min_paths: int) -> Phase:
    """One step of the phase machine; every phase maps to exactly one successor."""
    if phase is Phase.DISCOVERY:
        return Phase.EXPLOITATION if path_count >= min_paths else Phase.DISCOVERY
    if phase is Phase.EXPLOITATION:
        return Phase.STABILITY if plateaued else Phase.EXPLOITATION
    return Phase.STABILITY


@dataclass(slots=True)
class AdaptiveConfig:
    min_paths: int = 3
    diversity_threshold: float = 0.5
    salience_feedback_weight: float = 1.0
    plateau_window_size: int = 5
    plateau_threshold: float = 0.01

    def __post_init__(self) -> None:
        if self.min_paths < 1:
            raise ValueError("min_paths must be >= 1")
        if not 0.0 <= self.diversity_threshold <= 1.0:
            raise ValueError("diversity_threshold must be in [0, 1]")
        if self.salience_feedback_weight < 0:
            raise ValueError("salience_feedback_weight must be >= 0")
        if self.plateau_window_size < 1:
            raise ValueError("plateau_window_size must be >= 1")
        if self.plateau_threshold < 0:
            raise ValueError("plateau_threshold must be >= 0")


def salience_plateaued(history: list[float], window: int, threshold: float) -> bool:
    """Compare the mean of the last window against the window before it.

    Needs two full windows; the improvement ratio is (recent - previous) / (previous + eps).
    """
    if len(history) < 2 * window:
        return False
    values = np.asarray(history[-2 * window :], dtype=np.float64)
    previous = float(values[:window].mean())
    recent = float(values[window:].mean())
    improvement = (recent - previous) / (previous + PLATEAU_EPSILON)
    return improvement < threshold


class AdaptiveSalienceFeedback(PriorityPolicy, TerminationPolicy):
    """Three-phase controller: path-potential search, salience feedback, stability gate.

    Pass the same instance as both priority and termination policy. Phase transitions
    depend only on the accepted paths, so they are re-evaluated whenever a path is
    accepted and before every expansion.
    """

    name = "adaptive"

    def __init__(self, config: AdaptiveConfig | None = None) -> None:
        self.config = config or AdaptiveConfig()
        self.current_phase = Phase.DISCOVERY
        self.salience_feedback: dict[VertexId, float] = {}
        self.salience_history: list[float] = []
        self.transitions: list[tuple[Phase, Phase, int]] = []
        self._reorder_pending = False

    def seed_priority(self, vertex: VertexId, state: ExpansionState) -> float:
        return self._base_priority(vertex, state)

    async def priority(self, vertex: VertexId, state: ExpansionState) -> float:
        base = self._base_priority(vertex, state)
        if self.current_phase is Phase.DISCOVERY:
            return base
        feedback = self.salience_feedback.get(vertex, 0.0)
        return base / (1.0 + self.config.salience_feedback_weight * feedback)

    def annotate_path(self, path: PathRecord, state: ExpansionState) -> PathRecord:
        if path.salience is not None:
            return path
        salience = estimate_path_salience(path.nodes, state.provider.degree)
        return PathRecord(path.from_seed, path.to_seed, path.nodes, salience=salience)

    async def observe_path(self, path: PathRecord, state: ExpansionState) -> None:
        salience = path.salience
        if salience is None:
            salience = estimate_path_salience(path.nodes, state.provider.degree)

        self.salience_history.append(salience)
        limit = 2 * self.config.plateau_window_size
        if len(self.salience_history) > limit:
            del self.salience_history[: len(self.salience_history) - limit]

        half = 0.5 * salience
        for node in path.nodes:
            self._raise_feedback(node, salience)
            for neighbor in await state.fetch_neighbors(node):
                self._raise_feedback(neighbor.target_id, half)

        self._advance(state)

    def take_reorder_request(self) -> bool:
        pending = self._reorder_pending
        self._reorder_pending = False
        return pending

    def should_stop(self, state: ExpansionState) -> bool:
        self._advance(state)
        if self.current_phase is not Phase.STABILITY:
            return False
        return (
            len(state.paths) >= self.config.min_paths
            and path_diversity(state.paths) >= self.config.diversity_threshold
        )

    def phase(self) -> str:
        return self.current_phase.value

    def _advance(self, state: ExpansionState) -> None:
        plateaued = salience_plateaued(
            self.salience_history,
            self.config.plateau_window_size,
            self.config.plateau_threshold,
        )
        updated = next_phase(self.current_phase, len(state.paths), plateaued, self.config.min_paths)
        if updated is self.current_phase:
            return
        logger.debug(
            "adaptive phase %s -> %s after %d paths",
            self.current_phase.value,
            updated.value,
            len(state.paths),
        )
        self.transitions.append((self.current_phase, updated, state.stats.nodes_expanded))
        if self.current_phase is Phase.DISCOVERY:
            # Queued priorities were computed without feedback.
            self._reorder_pending = True
        self.current_phase = updated

    def _raise_feedback(self, vertex: VertexId, value: float) -> None:
        if value > self.salience_feedback.get(vertex, 0.0):
            self.salience_feedback[vertex] = value

    def _base_priority(self, vertex: VertexId, state: ExpansionState) -> float:
        return state.provider.degree(vertex) / (1 + path_potential(vertex, state))
