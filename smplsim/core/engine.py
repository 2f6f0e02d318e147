"""Simulation engine: clock, pending events and owned resources."""

from typing import List, Optional, Tuple

from .clock import Clock
from .device import Device
from .event_queue import CancelMatch, Event, EventQueue
from .exceptions import EmptyEventSetError, EventNotFoundError, NegativeDelayError
from .queue import Queue
from ..utils.logger import setup_logger


class Engine:
    """Discrete event simulation engine.

    The engine is the only writer of simulation time. It owns:
    - the clock
    - the set of pending events
    - the devices and queues created through it

    A driving loop calls ``cause()`` to get the next event, dispatches on its
    kind and calls back into ``schedule``/``cancel`` and the resources.
    """

    def __init__(self, cancel_match: CancelMatch = CancelMatch.ALL):
        """Initialize engine.

        Args:
            cancel_match: Default matching rule used by ``cancel``
        """
        self.logger = setup_logger(self.__class__.__name__)
        self.clock = Clock()
        self.cancel_match = cancel_match
        self.event_queue = EventQueue()
        self._devices: List[Device] = []
        self._queues: List[Queue] = []

    @property
    def current_time(self) -> int:
        """Current simulation time."""
        return self.clock.now

    @property
    def devices(self) -> Tuple[Device, ...]:
        """Devices in creation order."""
        return tuple(self._devices)

    @property
    def queues(self) -> Tuple[Queue, ...]:
        """Queues in creation order."""
        return tuple(self._queues)

    def create_device(self, name: str) -> Device:
        """Create a device owned by this engine.

        Args:
            name: Display name

        Returns:
            The new device
        """
        device = Device(name, self.clock)
        self._devices.append(device)
        self.logger.info(f"Created device '{name}'")
        return device

    def create_queue(self, name: str) -> Queue:
        """Create a queue owned by this engine.

        Args:
            name: Display name

        Returns:
            The new queue
        """
        queue = Queue(name, self.clock)
        self._queues.append(queue)
        self.logger.info(f"Created queue '{name}'")
        return queue

    def schedule(self, event_kind: int, delay: int, transact_id: int) -> None:
        """Schedule an event ``delay`` time units from now.

        Args:
            event_kind: Model-defined event kind
            delay: Time until the event (>= 0)
            transact_id: Transact the event concerns

        Raises:
            NegativeDelayError: If delay is negative
        """
        if delay < 0:
            raise NegativeDelayError(
                f"schedule(event_kind={event_kind}, delay={delay}, "
                f"transact_id={transact_id}) at t={self.clock.now}: delay must be >= 0"
            )
        event = Event(
            time=self.clock.now + delay,
            event_kind=event_kind,
            transact_id=transact_id,
        )
        self.event_queue.push(event)
        self.logger.debug(f"Scheduled {event}")

    def cause(self) -> Tuple[int, int]:
        """Pop the earliest pending event and advance the clock to it.

        Returns:
            Tuple of (event_kind, transact_id)

        Raises:
            EmptyEventSetError: If no event is pending
        """
        if self.event_queue.is_empty():
            raise EmptyEventSetError(
                f"cause() at t={self.clock.now} with no pending events"
            )
        event = self.event_queue.pop()
        self.clock.advance_to(event.time)
        self.logger.debug(f"Caused {event}")
        return event.event_kind, event.transact_id

    def cancel(self, event_kind: int, transact_id: int,
               match: Optional[CancelMatch] = None) -> int:
        """Remove the first pending event matching the request.

        Args:
            event_kind: Event kind to match
            transact_id: Transact to match
            match: Matching rule, defaults to the engine's ``cancel_match``

        Returns:
            How far in the future the removed event was

        Raises:
            EventNotFoundError: If no pending event matches
        """
        match = match or self.cancel_match
        event = self.event_queue.remove_first(
            lambda e: match.matches(e, event_kind, transact_id)
        )
        if event is None:
            raise EventNotFoundError(
                f"cancel(event_kind={event_kind}, transact_id={transact_id}, "
                f"match={match.value}) at t={self.clock.now}: no pending event matches"
            )
        self.logger.debug(f"Cancelled {event}")
        return event.time - self.clock.now

    def pending_events(self) -> List[Event]:
        """Pending events in processing order."""
        return list(self.event_queue)

    def pending_count(self) -> int:
        return len(self.event_queue)

    def reset(self) -> None:
        """Drop all resources and pending events and start a new clock at 0.

        Devices and queues created before the reset keep the old clock, so
        they no longer follow this engine's time.
        """
        self._devices.clear()
        self._queues.clear()
        self.event_queue.clear()
        self.clock = Clock()

    def __repr__(self) -> str:
        return (
            f"Engine(time={self.clock.now}, pending={len(self.event_queue)}, "
            f"devices={len(self._devices)}, queues={len(self._queues)})"
        )
