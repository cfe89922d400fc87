from __future__ import annotations

import random
from dataclasses import dataclass

import networkx as nx

from .models import VertexId


RELATIONSHIP_LABELS = ("cites", "authored", "mentions", "related_to", "part_of")


@dataclass(slots=True)
class Scenario:
    scenario_id: str
    graph: nx.Graph
    seeds: list[VertexId]


def bridged_stars(spokes: int = 4) -> Scenario:
    """Two stars joined through one bridge vertex, seeds on an outer tip of each.

    Hub L connects to tips l0..lk and the bridge; hub R likewise. Any path between the
    seeds has to pass L, bridge, R.
    """
    if spokes < 1:
        raise ValueError("spokes must be >= 1")
    g = nx.Graph()
    for i in range(spokes):
        g.add_edge("L", f"l{i}", relationship="spoke")
        g.add_edge("R", f"r{i}", relationship="spoke")
    g.add_edge("L", "bridge", relationship="bridge")
    g.add_edge("bridge", "R", relationship="bridge")
    return Scenario(scenario_id="bridged_stars", graph=g, seeds=["l0", "r0"])


def labelled_barabasi_albert(
    n: int = 200,
    m: int = 2,
    num_seeds: int = 3,
    seed: int = 42,
    labels: tuple[str, ...] = RELATIONSHIP_LABELS,
) -> Scenario:
    """Preferential-attachment graph with random relationship labels and low-degree seeds."""
    if num_seeds < 1:
        raise ValueError("num_seeds must be >= 1")
    if n <= m:
        raise ValueError("n must be greater than m")
    rng = random.Random(seed)
    base = nx.barabasi_albert_graph(n, m, seed=seed)
    g = nx.Graph()
    for u, v in base.edges():
        g.add_edge(f"n{u}", f"n{v}", relationship=rng.choice(labels))

    by_degree = sorted(g.nodes, key=lambda node: (g.degree(node), node))
    pool = by_degree[: max(num_seeds, len(by_degree) // 4)]
    seeds = rng.sample(pool, k=min(num_seeds, len(pool)))
    return Scenario(scenario_id=f"ba_n{n}_m{m}_s{seed}", graph=g, seeds=seeds)


def generate_scenarios(num_scenarios: int = 5, n: int = 200, m: int = 2, num_seeds: int = 3, seed: int = 42) -> list[Scenario]:
    rng = random.Random(seed)
    scenarios = [bridged_stars()]
    for _ in range(max(0, num_scenarios - 1)):
        scenarios.append(labelled_barabasi_albert(n=n, m=m, num_seeds=num_seeds, seed=rng.randint(0, 10_000)))
    return scenarios
