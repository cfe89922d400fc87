from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from seedbound import ExpansionEngine, TransitiveConnectivity
from seedbound.models import Neighbor
from seedbound.policies import EntropyPriority
from seedbound.providers import GraphProvider


@dataclass(slots=True)
class Citation:
    citing: str
    cited: str
    kind: str = "cites"
    metadata: dict[str, str] = field(default_factory=dict)


class CitationProvider(GraphProvider):
    """Example provider over citation records held outside the core package.

    ``latency`` simulates a remote lookup so the single suspension point per
    expansion is visible when several runs share an event loop.
    """

    def __init__(self, citations: list[Citation], latency: float = 0.0) -> None:
        self.latency = latency
        self._adjacency: dict[str, list[Neighbor]] = {}
        for c in citations:
            self._adjacency.setdefault(c.citing, []).append(Neighbor(c.cited, c.kind))
            self._adjacency.setdefault(c.cited, []).append(Neighbor(c.citing, f"{c.kind}_by"))
        self.traversed: list[tuple[str, str, str]] = []

    async def neighbors(self, vertex: str) -> list[Neighbor]:
        if self.latency:
            await asyncio.sleep(self.latency)
        return list(self._adjacency.get(vertex, []))

    def degree(self, vertex: str) -> int:
        return len(self._adjacency.get(vertex, []))

    def record_edge(self, source: str, target: str, relationship: str) -> None:
        self.traversed.append((source, target, relationship))


def build_example_citations() -> list[Citation]:
    return [
        Citation("paper_a", "survey_1"),
        Citation("paper_b", "survey_1"),
        Citation("paper_b", "dataset_x", kind="uses"),
        Citation("paper_c", "dataset_x", kind="uses"),
        Citation("paper_c", "survey_2"),
        Citation("paper_d", "survey_2"),
        Citation("survey_1", "survey_2", kind="extends"),
    ]


async def main() -> None:
    provider = CitationProvider(build_example_citations(), latency=0.001)
    engine = ExpansionEngine(
        provider,
        ["paper_a", "paper_d"],
        priority=EntropyPriority(),
        termination=TransitiveConnectivity(),
    )
    result = await engine.run()
    for path in result.paths:
        print(f"{path.from_seed}->{path.to_seed}: {' -> '.join(path.nodes)}")
    print(f"expanded={result.stats.nodes_expanded} traversed={len(provider.traversed)} reason={result.termination_reason}")


if __name__ == "__main__":
    asyncio.run(main())
