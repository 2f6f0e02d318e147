"""Event queue implementation for discrete event simulation."""

import heapq
import itertools
from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional

from .exceptions import EmptyEventSetError, NegativeDelayError


class CancelMatch(Enum):
    """How a cancel request is matched against pending events."""
    # Event kind and transact must both match
    ALL = "all"
    # Either the event kind or the transact matches
    ANY = "any"

    def matches(self, event: "Event", event_kind: int, transact_id: int) -> bool:
        """Check whether ``event`` satisfies this match mode.

        Args:
            event: Pending event
            event_kind: Requested event kind
            transact_id: Requested transact

        Returns:
            True if the event should be cancelled
        """
        same_kind = event.event_kind == event_kind
        same_transact = event.transact_id == transact_id
        if self is CancelMatch.ALL:
            return same_kind and same_transact
        return same_kind or same_transact


@dataclass(order=True)
class Event:
    """Event in the discrete event simulation.

    Attributes:
        time: Absolute simulation time of the event
        event_kind: Model-defined kind of event
        transact_id: Transact the event concerns
        seq: Insertion order, breaks ties between equal (time, kind) keys
    """
    time: int
    event_kind: int
    transact_id: int = field(default=0, compare=False)
    seq: int = field(default=0, repr=False)

    def __post_init__(self):
        """Validate event after initialization."""
        if self.time < 0:
            raise NegativeDelayError(f"Event time cannot be negative: {self.time}")


class EventQueue:
    """Priority queue for managing simulation events.

    Events are ordered by time, then by event kind. Events sharing both are
    all kept and come out in the order they were pushed.
    """

    def __init__(self):
        """Initialize empty event queue."""
        self._queue: List[Event] = []
        self._counter = itertools.count()

    def push(self, event: Event) -> None:
        """Add event to the queue.

        Args:
            event: Event to add
        """
        event.seq = next(self._counter)
        heapq.heappush(self._queue, event)

    def pop(self) -> Event:
        """Remove and return the next event.

        Returns:
            Next event to process

        Raises:
            EmptyEventSetError: If queue is empty
        """
        if self.is_empty():
            raise EmptyEventSetError("Cannot pop from empty event queue")
        return heapq.heappop(self._queue)

    def peek(self) -> Optional[Event]:
        """Return the next event without removing it.

        Returns:
            Next event, or None if queue is empty
        """
        return self._queue[0] if self._queue else None

    def remove_first(self, predicate: Callable[[Event], bool]) -> Optional[Event]:
        """Remove the earliest event satisfying ``predicate``.

        Events are scanned in queue order, so with several matches the one
        that would be popped first is removed.

        Args:
            predicate: Match function

        Returns:
            The removed event, or None if nothing matched
        """
        for event in sorted(self._queue):
            if predicate(event):
                self._queue.remove(event)
                heapq.heapify(self._queue)
                return event
        return None

    def is_empty(self) -> bool:
        """Check if queue is empty."""
        return len(self._queue) == 0

    def size(self) -> int:
        """Get number of events in queue."""
        return len(self._queue)

    def clear(self) -> None:
        """Remove all events from queue."""
        self._queue.clear()

    def __iter__(self) -> Iterator[Event]:
        """Iterate over pending events in processing order."""
        return iter(sorted(self._queue))

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        """String representation of event queue."""
        return f"EventQueue(size={len(self._queue)}, next={self.peek()})"
