"""Waiting line of transacts with time-weighted statistics."""

import heapq
import itertools
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .clock import Clock
from .exceptions import EmptyQueueError
from .statistics import QueueStats
from ..utils.logger import setup_logger


@dataclass(order=True)
class QueueItem:
    """A transact waiting in a queue.

    Items are ordered by arrival time, then priority (lower first), then
    insertion order.
    """
    arrival_time: int
    priority: int
    seq: int = field(default=0, repr=False)
    transact_id: int = field(default=0, compare=False)
    stage: int = field(default=0, compare=False)


class Queue:
    """Ordered waiting line feeding a device."""

    def __init__(self, name: str, clock: Clock):
        """Initialize queue.

        Args:
            name: Display name
            clock: Engine clock, read to timestamp arrivals and departures
        """
        self.name = name
        self._clock = clock
        self._items: List[QueueItem] = []
        self._counter = itertools.count()
        # Number of entries per waiting transact
        self._waiting = Counter()
        self.stats = QueueStats()
        self.logger = setup_logger(f"Queue-{name}")

    @property
    def max_length(self) -> int:
        return self.stats.max_length

    @property
    def length_time_sum(self) -> int:
        return self.stats.length_time_sum

    @property
    def wait_time_sum(self) -> int:
        return self.stats.wait_time_sum

    @property
    def wait_time_sum_squared(self) -> int:
        return self.stats.wait_time_sum_squared

    @property
    def last_change_time(self) -> int:
        return self.stats.last_change_time

    @property
    def dequeue_count(self) -> int:
        return self.stats.dequeue_count

    def enqueue(self, transact_id: int, priority: int = 0, stage: int = 0) -> None:
        """Put a transact at the current time into the queue.

        The same transact may be enqueued more than once; each call adds an
        independent entry.

        Args:
            transact_id: Waiting transact
            priority: Tie-break among equal arrival times, lower goes first
            stage: Opaque tag returned by ``head``
        """
        now = self._clock.now
        if self._waiting[transact_id] > 0:
            self.logger.warning(
                f"Transact {transact_id} enqueued in '{self.name}' at t={now} "
                f"while already waiting"
            )

        length_before = len(self._items)
        heapq.heappush(self._items, QueueItem(
            arrival_time=now,
            priority=priority,
            seq=next(self._counter),
            transact_id=transact_id,
            stage=stage,
        ))
        self._waiting[transact_id] += 1
        self.stats.record_length_change(length_before, len(self._items), now)

    def head(self) -> Tuple[int, int]:
        """Remove the first waiting transact.

        Returns:
            Tuple of (transact_id, stage)

        Raises:
            EmptyQueueError: If the queue is empty
        """
        now = self._clock.now
        if not self._items:
            raise EmptyQueueError(f"head() on empty queue '{self.name}' at t={now}")

        length_before = len(self._items)
        item = heapq.heappop(self._items)
        self._waiting[item.transact_id] -= 1
        if self._waiting[item.transact_id] == 0:
            del self._waiting[item.transact_id]
        self.stats.record_length_change(length_before, len(self._items), now)
        self.stats.record_wait(now - item.arrival_time)
        return item.transact_id, item.stage

    def length(self) -> int:
        """Number of waiting transacts."""
        return len(self._items)

    def items(self) -> List[QueueItem]:
        """Waiting items in the order they would be dequeued."""
        return sorted(self._items)

    def mean_wait(self) -> Optional[float]:
        return self.stats.mean_wait()

    def wait_std(self) -> Optional[float]:
        return self.stats.wait_std()

    def average_length(self) -> Optional[float]:
        return self.stats.average_length(self._clock.now)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue(name={self.name!r}, length={len(self._items)})"
