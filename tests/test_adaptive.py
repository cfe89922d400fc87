from pathlib import Path
import asyncio
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from seedbound import ExpansionState, MappingGraphProvider, PathRecord
from seedbound.models import Neighbor
from seedbound.policies import AdaptiveConfig, AdaptiveSalienceFeedback, Phase, next_phase, salience_plateaued


def _state() -> ExpansionState:
    provider = MappingGraphProvider.from_edges([("A", "B"), ("B", "C"), ("B", "X")])
    return ExpansionState(provider, ["A", "C"])


class PhaseMachineTests(unittest.TestCase):
    def test_every_phase_has_a_successor(self) -> None:
        self.assertIs(next_phase(Phase.DISCOVERY, 0, True, 3), Phase.DISCOVERY)
        self.assertIs(next_phase(Phase.DISCOVERY, 3, False, 3), Phase.EXPLOITATION)
        self.assertIs(next_phase(Phase.EXPLOITATION, 10, False, 3), Phase.EXPLOITATION)
        self.assertIs(next_phase(Phase.EXPLOITATION, 10, True, 3), Phase.STABILITY)
        self.assertIs(next_phase(Phase.STABILITY, 0, False, 3), Phase.STABILITY)

    def test_plateau_needs_two_full_windows(self) -> None:
        self.assertFalse(salience_plateaued([0.5] * 9, 5, 0.01))
        self.assertTrue(salience_plateaued([0.5] * 10, 5, 0.01))
        self.assertFalse(salience_plateaued([0.1] * 5 + [0.5] * 5, 5, 0.01))

    def test_config_validation(self) -> None:
        cfg = AdaptiveConfig()
        self.assertEqual((cfg.min_paths, cfg.plateau_window_size), (3, 5))
        with self.assertRaises(ValueError):
            AdaptiveConfig(min_paths=0)
        with self.assertRaises(ValueError):
            AdaptiveConfig(diversity_threshold=1.5)
        with self.assertRaises(ValueError):
            AdaptiveConfig(plateau_window_size=0)
        with self.assertRaises(ValueError):
            AdaptiveConfig(salience_feedback_weight=-1.0)


class SalienceFeedbackTests(unittest.TestCase):
    def test_path_members_get_full_salience_and_neighbours_half(self) -> None:
        state = _state()
        state.neighbor_cache["B"] = [Neighbor("A"), Neighbor("C"), Neighbor("X")]
        policy = AdaptiveSalienceFeedback()
        asyncio.run(policy.observe_path(PathRecord(0, 1, ("A", "B", "C"), salience=0.8), state))
        self.assertAlmostEqual(policy.salience_feedback["A"], 0.8)
        self.assertAlmostEqual(policy.salience_feedback["B"], 0.8)
        self.assertAlmostEqual(policy.salience_feedback["X"], 0.4)

    def test_neighbours_of_unexpanded_path_members_are_fetched(self) -> None:
        state = _state()
        self.assertEqual(state.neighbor_cache, {})
        policy = AdaptiveSalienceFeedback()
        asyncio.run(policy.observe_path(PathRecord(0, 1, ("A", "B", "C"), salience=0.8), state))
        self.assertAlmostEqual(policy.salience_feedback["X"], 0.4)
        self.assertIn("B", state.neighbor_cache)
        # One lookup per path member; repeated paths reuse the cache.
        asyncio.run(policy.observe_path(PathRecord(0, 1, ("A", "B", "C"), salience=0.8), state))
        self.assertEqual(state.provider.neighbor_calls, 3)

    def test_history_is_bounded(self) -> None:
        state = _state()
        policy = AdaptiveSalienceFeedback(AdaptiveConfig(plateau_window_size=5))
        for _ in range(15):
            asyncio.run(policy.observe_path(PathRecord(0, 1, ("A", "B", "C"), salience=0.3), state))
        self.assertEqual(len(policy.salience_history), 10)

    def test_annotate_path_attaches_salience(self) -> None:
        state = _state()
        path = AdaptiveSalienceFeedback().annotate_path(PathRecord(0, 1, ("A", "B", "C")), state)
        self.assertIsNotNone(path.salience)
        self.assertGreater(path.salience, 0.0)
        self.assertLessEqual(path.salience, 1.0)

    def test_phases_advance_and_request_reorder(self) -> None:
        state = _state()
        policy = AdaptiveSalienceFeedback(AdaptiveConfig(min_paths=1, plateau_window_size=2))
        self.assertEqual(policy.phase(), "discovery")
        self.assertFalse(policy.should_stop(state))

        state.paths.append(PathRecord(0, 1, ("A", "B", "C"), salience=0.5))
        self.assertFalse(policy.should_stop(state))
        self.assertIs(policy.current_phase, Phase.EXPLOITATION)
        self.assertTrue(policy.take_reorder_request())
        self.assertFalse(policy.take_reorder_request())

        policy.salience_history.extend([0.5, 0.5, 0.5, 0.5])
        # One unique-vertex path has diversity 1.0, so stability stops immediately.
        self.assertTrue(policy.should_stop(state))
        self.assertIs(policy.current_phase, Phase.STABILITY)
        self.assertEqual(len(policy.transitions), 2)

    def test_feedback_lowers_priority_after_discovery(self) -> None:
        state = _state()
        policy = AdaptiveSalienceFeedback(AdaptiveConfig(min_paths=1, salience_feedback_weight=1.0))
        before = asyncio.run(policy.priority("B", state))
        self.assertAlmostEqual(before, 3.0)

        state.paths.append(PathRecord(0, 1, ("A", "B", "C"), salience=0.5))
        asyncio.run(policy.observe_path(state.paths[0], state))
        self.assertIs(policy.current_phase, Phase.EXPLOITATION)
        after = asyncio.run(policy.priority("B", state))
        self.assertAlmostEqual(after, 3.0 / 1.5)


if __name__ == "__main__":
    unittest.main()
