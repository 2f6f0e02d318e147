"""Single-capacity exclusive resource."""

from typing import Optional

from .clock import Clock
from .exceptions import DeviceBusyError, DeviceIdleError
from .statistics import DeviceStats


class Device:
    """A resource held by at most one transact at a time.

    ``occupant`` is 0 while the device is free, otherwise the id of the
    transact holding it.
    """

    FREE = 0

    def __init__(self, name: str, clock: Clock):
        """Initialize device.

        Args:
            name: Display name
            clock: Engine clock, read to timestamp reservations
        """
        self.name = name
        self._clock = clock
        self.occupant = self.FREE
        self.last_reserve_time = 0
        self.stats = DeviceStats()

    @property
    def completed_count(self) -> int:
        return self.stats.completed_count

    @property
    def busy_time(self) -> int:
        return self.stats.busy_time

    def reserve(self, transact_id: int) -> None:
        """Give the device to a transact.

        Args:
            transact_id: Transact taking the device (nonzero)

        Raises:
            DeviceBusyError: If the device is already held
            ValueError: If transact_id is the free marker 0
        """
        if self.occupant != self.FREE:
            raise DeviceBusyError(
                f"Device '{self.name}' reserved by transact {transact_id} "
                f"at t={self._clock.now} while held by transact {self.occupant}"
            )
        if transact_id == self.FREE:
            raise ValueError(
                f"Device '{self.name}' cannot be reserved by transact {self.FREE}"
            )
        self.occupant = transact_id
        self.last_reserve_time = self._clock.now

    def release(self) -> int:
        """Free the device and account for the finished reservation.

        Returns:
            Id of the transact that held the device

        Raises:
            DeviceIdleError: If the device is free
        """
        if self.occupant == self.FREE:
            raise DeviceIdleError(
                f"Device '{self.name}' released at t={self._clock.now} while free"
            )
        self.stats.record_service(self.last_reserve_time, self._clock.now)
        transact_id = self.occupant
        self.occupant = self.FREE
        return transact_id

    def status(self) -> int:
        """Occupant of the device, 0 when free."""
        return self.occupant

    def is_busy(self) -> bool:
        return self.occupant != self.FREE

    def mean_service_time(self) -> Optional[float]:
        return self.stats.mean_service_time()

    def utilization(self) -> Optional[float]:
        return self.stats.utilization(self._clock.now)

    def __repr__(self) -> str:
        return f"Device(name={self.name!r}, occupant={self.occupant})"
