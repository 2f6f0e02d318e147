"""Simulation clock shared read-only by devices and queues."""

from .exceptions import ClockError


class Clock:
    """Integer simulation time.

    Time advances only when the engine pops an event. Devices and queues keep
    a reference to the engine's clock and read ``now``; they never advance it.
    """

    def __init__(self, start_time: int = 0):
        """Initialize the clock.

        Args:
            start_time: Initial simulation time
        """
        self._now = start_time

    @property
    def now(self) -> int:
        """Current simulation time."""
        return self._now

    def advance_to(self, timestamp: int) -> None:
        """Move the clock forward to ``timestamp``.

        Args:
            timestamp: New simulation time (must be >= current time)

        Raises:
            ClockError: If timestamp is in the past
        """
        if timestamp < self._now:
            raise ClockError(
                f"Cannot go back in time: advance_to({timestamp}) with now={self._now}"
            )
        self._now = timestamp

    def __repr__(self) -> str:
        return f"Clock(now={self._now})"
