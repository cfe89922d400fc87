from pathlib import Path
import asyncio
import math
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from seedbound import ExpansionState, MappingGraphProvider, PathRecord
from seedbound.models import Neighbor
from seedbound.policies import (
    AdaptiveSalienceFeedback,
    DegreePriority,
    EntropyPriority,
    FifoPriority,
    PathPotentialPriority,
    RandomPriority,
    RetrospectiveSaliencePriority,
    SaliencePriority,
    compute_node_salience_scores,
    get_priority,
    list_priorities,
    path_potential,
    shannon_entropy,
)


def _mixed_provider() -> MappingGraphProvider:
    # H has a homogeneous neighbourhood, X a heterogeneous one; both have degree 2.
    return MappingGraphProvider(
        {
            "H": [("h1", "cites"), ("h2", "cites")],
            "X": [("x1", "cites"), ("x2", "authored")],
            "h1": [("H", "cites")],
            "h2": [("H", "cites")],
            "x1": [("X", "cites")],
            "x2": [("X", "authored")],
        }
    )


class EntropyTests(unittest.TestCase):
    def test_shannon_entropy_of_labels(self) -> None:
        self.assertEqual(shannon_entropy([]), 0.0)
        self.assertEqual(shannon_entropy([Neighbor("a", "r"), Neighbor("b", "r")]), 0.0)
        self.assertAlmostEqual(shannon_entropy([Neighbor("a", "r"), Neighbor("b", "s")]), 1.0)

    def test_homogeneous_vertex_gets_larger_finite_priority(self) -> None:
        provider = _mixed_provider()
        state = ExpansionState(provider, ["H"])
        policy = EntropyPriority()
        homogeneous = asyncio.run(policy.priority("H", state))
        heterogeneous = asyncio.run(policy.priority("X", state))
        self.assertTrue(math.isfinite(homogeneous))
        self.assertGreater(homogeneous, heterogeneous)
        self.assertAlmostEqual(homogeneous, math.log(3) / 0.001)
        self.assertAlmostEqual(heterogeneous, math.log(3) / 1.001)

    def test_entropy_is_cached_per_vertex(self) -> None:
        provider = _mixed_provider()
        state = ExpansionState(provider, ["H"])
        policy = EntropyPriority()
        asyncio.run(policy.priority("X", state))
        asyncio.run(policy.priority("X", state))
        self.assertEqual(provider.neighbor_calls, 1)
        self.assertIn("X", policy.entropy_cache)

    def test_seed_priority_uses_log_degree(self) -> None:
        state = ExpansionState(_mixed_provider(), ["H"])
        self.assertAlmostEqual(EntropyPriority().seed_priority("H", state), math.log(3))

    def test_epsilon_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            EntropyPriority(epsilon=0.0)


class DegreeAndPotentialTests(unittest.TestCase):
    def test_degree_priority_respects_node_weights(self) -> None:
        provider = MappingGraphProvider.from_edges([("A", "B"), ("A", "C"), ("A", "D"), ("A", "E")])
        state = ExpansionState(provider, ["B"])
        self.assertAlmostEqual(asyncio.run(DegreePriority().priority("A", state)), 4.0)
        weighted = DegreePriority(node_weights={"A": 2.0})
        self.assertAlmostEqual(asyncio.run(weighted.priority("A", state)), 2.0)
        self.assertAlmostEqual(weighted.seed_priority("B", state), 1.0)

    def test_path_potential_counts_other_frontiers(self) -> None:
        provider = MappingGraphProvider.from_edges([("A", "V"), ("V", "C")])
        state = ExpansionState(provider, ["A", "C"])
        state.neighbor_cache["V"] = [Neighbor("A"), Neighbor("C")]
        state.claim("V", 0)
        self.assertEqual(path_potential("V", state), 1)
        self.assertAlmostEqual(asyncio.run(PathPotentialPriority().priority("V", state)), 1.0)
        # Without cached neighbours there is nothing to count.
        self.assertEqual(path_potential("A", state), 0)


class OrderingPolicyTests(unittest.TestCase):
    def test_fifo_is_monotone(self) -> None:
        state = ExpansionState(MappingGraphProvider({"A": []}), ["A"])
        policy = FifoPriority()
        values = [policy.seed_priority("A", state)] + [asyncio.run(policy.priority("A", state)) for _ in range(3)]
        self.assertEqual(values, sorted(values))
        self.assertEqual(len(set(values)), 4)

    def test_random_is_reproducible(self) -> None:
        state = ExpansionState(MappingGraphProvider({"A": []}), ["A"])
        a = RandomPriority(seed=7)
        b = RandomPriority(seed=7)
        self.assertEqual(
            [asyncio.run(a.priority("A", state)) for _ in range(3)],
            [asyncio.run(b.priority("A", state)) for _ in range(3)],
        )


class PriorityRegistryTests(unittest.TestCase):
    def test_registry_builds_fresh_instances(self) -> None:
        names = list_priorities()
        for name in ("adaptive", "degree", "entropy", "fifo", "path_potential", "random", "retrospective", "salience"):
            self.assertIn(name, names)
        first = get_priority("entropy")
        second = get_priority("entropy", epsilon=0.01)
        self.assertIsInstance(first, EntropyPriority)
        self.assertIsNot(first, second)
        self.assertEqual(second.epsilon, 0.01)
        self.assertIsInstance(get_priority("adaptive"), AdaptiveSalienceFeedback)
        with self.assertRaises(KeyError):
            get_priority("missing")



def _abcd_state(seeds: list[str]) -> ExpansionState:
    return ExpansionState(MappingGraphProvider.from_edges([("A", "B"), ("B", "C"), ("B", "D")]), seeds)


class SaliencePolicyTests(unittest.TestCase):
    def test_node_salience_counts_each_path_once(self) -> None:
        scores = compute_node_salience_scores([("A", "B", "C"), ("A", "B", "A"), ("D",)])
        self.assertEqual(scores, {"A": 2.0, "B": 2.0, "C": 1.0, "D": 1.0})

    def test_salience_dominates_degree(self) -> None:
        state = _abcd_state(["A", "C"])
        policy = SaliencePriority({"B": 1.0})
        self.assertAlmostEqual(asyncio.run(policy.priority("B", state)), 3.0 - 1000.0)
        self.assertAlmostEqual(asyncio.run(policy.priority("D", state)), 1.0)
        self.assertLess(policy.seed_priority("B", state), policy.seed_priority("A", state))
        with self.assertRaises(ValueError):
            SaliencePriority(scale=-1.0)

    def test_retrospective_uses_degree_until_first_path(self) -> None:
        state = _abcd_state(["A", "C"])
        policy = RetrospectiveSaliencePriority()
        self.assertAlmostEqual(asyncio.run(policy.priority("B", state)), 3.0)
        self.assertFalse(policy.take_reorder_request())

        state.frontiers[0].visit("B", "A", "edge")
        asyncio.run(policy.observe_path(PathRecord(0, 1, ("A", "B", "C")), state))
        self.assertTrue(policy.salience_active)
        self.assertTrue(policy.take_reorder_request())
        self.assertFalse(policy.take_reorder_request())
        # N(B) = {A, C, D} shares {A, C} with the path: MI = 2 / 4.
        self.assertAlmostEqual(policy.mutual_information["B"], 0.5)
        self.assertAlmostEqual(asyncio.run(policy.priority("B", state)), 1.5)
        # Unsampled vertices keep MI = 0.
        self.assertAlmostEqual(asyncio.run(policy.priority("D", state)), 1.0)

    def test_retrospective_keeps_best_overlap(self) -> None:
        state = _abcd_state(["A", "C"])
        state.frontiers[0].visit("B", "A", "edge")
        policy = RetrospectiveSaliencePriority()
        asyncio.run(policy.observe_path(PathRecord(0, 1, ("A", "B", "C")), state))
        self.assertTrue(policy.take_reorder_request())
        asyncio.run(policy.observe_path(PathRecord(0, 1, ("X", "Y")), state))
        self.assertAlmostEqual(policy.mutual_information["B"], 0.5)
        self.assertFalse(policy.take_reorder_request())


if __name__ == "__main__":
    unittest.main()
