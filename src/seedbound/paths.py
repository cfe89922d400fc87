from __future__ import annotations

from collections.abc import Callable, Iterable

import numpy as np

from .frontier import FrontierState
from .models import PathRecord, VertexId


def reconstruct_path(
    active: FrontierState,
    owner: FrontierState,
    meeting: VertexId,
) -> list[VertexId] | None:
    """Join the two parent chains that meet at ``meeting``.

    Returns the vertex sequence from ``active.seed`` to ``owner.seed``, or None when
    either chain does not reach its seed or the joined walk repeats a vertex.
    """
    from_active = active.chain_to_seed(meeting)
    if from_active[0] != active.seed:
        return None

    # Owner side runs meeting -> owner seed; the meeting vertex is already in from_active.
    from_owner = owner.chain_to_seed(meeting)
    from_owner.reverse()
    tail = from_owner[1:]
    if tail and tail[-1] != owner.seed and meeting != owner.seed:
        return None

    nodes = from_active + tail
    if len(set(nodes)) != len(nodes):
        return None
    return nodes


def estimate_path_salience(nodes: Iterable[VertexId], degree: Callable[[VertexId], int]) -> float:
    """Geometric mean of 1 / log(deg + 2) over the path, clipped to [0, 1].

    Low-degree vertices score higher, so paths through specific connections rank
    above paths routed through hubs.
    """
    degrees = np.array([degree(v) for v in nodes], dtype=np.float64)
    if degrees.size == 0:
        return 0.0
    log_terms = np.log(1.0 / np.log(degrees + 2.0))
    return float(min(1.0, np.exp(log_terms.mean())))


def rank_paths_by_salience(paths: list[PathRecord], degree: Callable[[VertexId], int]) -> list[PathRecord]:
    """Paths sorted by descending salience; ties keep discovery order."""
    scored = [(estimate_path_salience(p.nodes, degree), i, p) for i, p in enumerate(paths)]
    scored.sort(key=lambda item: (-item[0], item[1]))
    return [p for _, _, p in scored]
