from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..models import PathRecord, VertexId

if TYPE_CHECKING:
    from ..state import ExpansionState


class PriorityPolicy(ABC):
    """Maps a vertex to a scalar; lower values are expanded sooner.

    Instances may hold per-run caches, so each engine gets its own policy object.
    """

    name: str = "base"

    def seed_priority(self, vertex: VertexId, state: ExpansionState) -> float:
        """Priority for seeds, assigned before the run starts and without provider I/O."""
        return float(state.provider.degree(vertex))

    @abstractmethod
    async def priority(self, vertex: VertexId, state: ExpansionState) -> float:
        raise NotImplementedError

    def annotate_path(self, path: PathRecord, state: ExpansionState) -> PathRecord:
        """Hook applied to every candidate path before deduplication."""
        return path

    async def observe_path(self, path: PathRecord, state: ExpansionState) -> None:
        """Hook awaited once per accepted path; may fetch neighbours through the state."""
        return None

    def take_reorder_request(self) -> bool:
        """True once after the policy changes how already-queued vertices should rank."""
        return False


class TerminationPolicy(ABC):
    """Decides, before each expansion, whether the run should stop early."""

    name: str = "base"

    @abstractmethod
    def should_stop(self, state: ExpansionState) -> bool:
        raise NotImplementedError

    def on_path(self, path: PathRecord, state: ExpansionState) -> None:
        return None

    def phase(self) -> str | None:
        return None
