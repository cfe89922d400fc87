from pathlib import Path
import math
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from seedbound import PriorityQueue


class PriorityQueueTests(unittest.TestCase):
    def test_pops_lowest_priority_first(self) -> None:
        q: PriorityQueue[str] = PriorityQueue()
        q.push("c", 3.0)
        q.push("a", 1.0)
        q.push("b", 2.0)
        self.assertEqual([q.pop(), q.pop(), q.pop()], ["a", "b", "c"])
        self.assertIsNone(q.pop())

    def test_duplicate_push_keeps_first_priority(self) -> None:
        q: PriorityQueue[str] = PriorityQueue()
        self.assertTrue(q.push("x", 5.0))
        self.assertFalse(q.push("x", 0.1))
        q.push("y", 1.0)
        self.assertEqual(len(q), 2)
        self.assertEqual(q.pop(), "y")
        self.assertEqual(q.peek_priority(), 5.0)

    def test_empty_queue_reports_infinite_head(self) -> None:
        q: PriorityQueue[str] = PriorityQueue()
        self.assertTrue(math.isinf(q.peek_priority()))
        self.assertFalse(q)
        self.assertEqual(len(q), 0)

    def test_membership_tracks_push_and_pop(self) -> None:
        q: PriorityQueue[str] = PriorityQueue()
        q.push("a", 1.0)
        self.assertIn("a", q)
        q.pop()
        self.assertNotIn("a", q)
        # A popped item may be queued again.
        self.assertTrue(q.push("a", 2.0))

    def test_equal_priorities_pop_in_insertion_order(self) -> None:
        q: PriorityQueue[str] = PriorityQueue()
        for item in ("z", "m", "a"):
            q.push(item, 1.0)
        self.assertEqual([q.pop(), q.pop(), q.pop()], ["z", "m", "a"])

    def test_drain_empties_queue(self) -> None:
        q: PriorityQueue[str] = PriorityQueue()
        q.push("a", 2.0)
        q.push("b", 1.0)
        self.assertEqual(set(q), {"a", "b"})
        self.assertEqual(sorted(q.drain()), ["a", "b"])
        self.assertEqual(len(q), 0)
        self.assertNotIn("a", q)


if __name__ == "__main__":
    unittest.main()
