"""Tests for the event queue."""

import unittest

from smplsim.core.event_queue import Event, EventQueue, CancelMatch
from smplsim.core.exceptions import EmptyEventSetError, NegativeDelayError


class TestEventQueue(unittest.TestCase):
    """Test cases for EventQueue."""

    def test_empty_queue(self):
        """Test empty queue behavior."""
        queue = EventQueue()

        self.assertTrue(queue.is_empty())
        self.assertEqual(queue.size(), 0)
        self.assertIsNone(queue.peek())
        with self.assertRaises(EmptyEventSetError):
            queue.pop()

    def test_empty_pop_is_index_error(self):
        """Test popping an empty queue is also an IndexError."""
        with self.assertRaises(IndexError):
            EventQueue().pop()

    def test_push_pop(self):
        """Test push and pop operations."""
        queue = EventQueue()

        queue.push(Event(time=1, event_kind=1, transact_id=7))

        self.assertFalse(queue.is_empty())
        self.assertEqual(queue.size(), 1)

        popped = queue.pop()
        self.assertEqual(popped.time, 1)
        self.assertEqual(popped.transact_id, 7)
        self.assertTrue(queue.is_empty())

    def test_time_ordering(self):
        """Test events come out in time order."""
        queue = EventQueue()

        queue.push(Event(time=3, event_kind=1))
        queue.push(Event(time=1, event_kind=1))
        queue.push(Event(time=2, event_kind=1))

        self.assertEqual([queue.pop().time for _ in range(3)], [1, 2, 3])

    def test_kind_ordering(self):
        """Test events with same time are ordered by event kind."""
        queue = EventQueue()

        queue.push(Event(time=1, event_kind=3, transact_id=30))
        queue.push(Event(time=1, event_kind=1, transact_id=10))
        queue.push(Event(time=1, event_kind=2, transact_id=20))

        self.assertEqual([queue.pop().event_kind for _ in range(3)], [1, 2, 3])

    def test_duplicate_keys_are_kept(self):
        """Test events sharing (time, kind) are all delivered in push order."""
        queue = EventQueue()

        for transact_id in (5, 3, 9):
            queue.push(Event(time=4, event_kind=2, transact_id=transact_id))

        self.assertEqual(len(queue), 3)
        self.assertEqual([queue.pop().transact_id for _ in range(3)], [5, 3, 9])

    def test_transact_does_not_affect_order(self):
        """Test transact id is not part of the ordering key."""
        queue = EventQueue()

        queue.push(Event(time=1, event_kind=1, transact_id=99))
        queue.push(Event(time=1, event_kind=1, transact_id=1))

        self.assertEqual(queue.pop().transact_id, 99)

    def test_iteration_is_sorted_and_non_destructive(self):
        """Test iterating yields processing order without popping."""
        queue = EventQueue()
        queue.push(Event(time=5, event_kind=1))
        queue.push(Event(time=2, event_kind=2))
        queue.push(Event(time=2, event_kind=1))

        self.assertEqual([(e.time, e.event_kind) for e in queue], [(2, 1), (2, 2), (5, 1)])
        self.assertEqual(queue.size(), 3)

    def test_remove_first_takes_earliest_match(self):
        """Test remove_first scans in processing order."""
        queue = EventQueue()
        queue.push(Event(time=9, event_kind=1, transact_id=1))
        queue.push(Event(time=3, event_kind=1, transact_id=1))
        queue.push(Event(time=1, event_kind=2, transact_id=2))

        removed = queue.remove_first(lambda e: e.transact_id == 1)

        self.assertEqual(removed.time, 3)
        self.assertEqual([e.time for e in queue], [1, 9])
        self.assertEqual(queue.pop().time, 1)
        self.assertEqual(queue.pop().time, 9)

    def test_remove_first_without_match(self):
        """Test remove_first leaves the queue untouched when nothing matches."""
        queue = EventQueue()
        queue.push(Event(time=1, event_kind=1, transact_id=1))

        self.assertIsNone(queue.remove_first(lambda e: e.transact_id == 2))
        self.assertEqual(queue.size(), 1)

    def test_negative_time_rejected(self):
        """Test events cannot be created in negative time."""
        with self.assertRaises(NegativeDelayError):
            Event(time=-1, event_kind=1)

    def test_clear(self):
        """Test clear removes all events."""
        queue = EventQueue()
        queue.push(Event(time=1, event_kind=1))
        queue.clear()

        self.assertTrue(queue.is_empty())


class TestCancelMatch(unittest.TestCase):
    """Test cases for CancelMatch."""

    def setUp(self):
        """Set up test fixtures."""
        self.event = Event(time=1, event_kind=2, transact_id=7)

    def test_all_requires_both(self):
        """Test ALL needs kind and transact to match."""
        self.assertTrue(CancelMatch.ALL.matches(self.event, 2, 7))
        self.assertFalse(CancelMatch.ALL.matches(self.event, 2, 8))
        self.assertFalse(CancelMatch.ALL.matches(self.event, 3, 7))

    def test_any_requires_either(self):
        """Test ANY needs kind or transact to match."""
        self.assertTrue(CancelMatch.ANY.matches(self.event, 2, 8))
        self.assertTrue(CancelMatch.ANY.matches(self.event, 3, 7))
        self.assertFalse(CancelMatch.ANY.matches(self.event, 3, 8))


if __name__ == '__main__':
    unittest.main()
