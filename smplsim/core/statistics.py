"""Incremental statistics accumulators for devices and queues.

The accumulators never read a clock: every update receives the relevant
times as arguments, so they can be driven directly in tests.
"""

import math
from dataclasses import dataclass
from typing import Optional


@dataclass
class DeviceStats:
    """Busy-time accounting for one device.

    Attributes:
        completed_count: Number of finished reservations
        busy_time: Sum of the lengths of all finished reservations
    """
    completed_count: int = 0
    busy_time: int = 0

    def record_service(self, reserved_at: int, released_at: int) -> int:
        """Account for one finished reservation.

        Args:
            reserved_at: Time the device was reserved
            released_at: Time the device was released

        Returns:
            Length of the reservation
        """
        duration = released_at - reserved_at
        self.busy_time += duration
        self.completed_count += 1
        return duration

    def mean_service_time(self) -> Optional[float]:
        """Average reservation length, None before the first release."""
        if self.completed_count == 0:
            return None
        return self.busy_time / self.completed_count

    def utilization(self, now: int) -> Optional[float]:
        """Fraction of elapsed simulation time the device was busy.

        Only finished reservations are counted.
        """
        if now == 0:
            return None
        return self.busy_time / now


@dataclass
class QueueStats:
    """Length and waiting-time accounting for one queue.

    Attributes:
        max_length: Longest length seen
        length_time_sum: Sum of length x duration over every interval
            between length changes
        wait_time_sum: Sum of waiting times of dequeued items
        wait_time_sum_squared: Sum of squared waiting times
        last_change_time: Time of the last length change
        dequeue_count: Number of dequeued items
    """
    max_length: int = 0
    length_time_sum: int = 0
    wait_time_sum: int = 0
    wait_time_sum_squared: int = 0
    last_change_time: int = 0
    dequeue_count: int = 0

    def record_length_change(self, length_before: int, length_after: int, now: int) -> None:
        """Close the interval since the last change and open a new one.

        The length that held during the elapsed interval is ``length_before``,
        so that is what gets charged.

        Args:
            length_before: Queue length before the change
            length_after: Queue length after the change
            now: Time of the change
        """
        self.length_time_sum += length_before * (now - self.last_change_time)
        self.max_length = max(self.max_length, length_after)
        self.last_change_time = now

    def record_wait(self, wait: int) -> None:
        """Account for one item leaving the queue after ``wait`` time units."""
        self.wait_time_sum += wait
        self.wait_time_sum_squared += wait * wait
        self.dequeue_count += 1

    def mean_wait(self) -> Optional[float]:
        """Average waiting time, None before the first dequeue."""
        if self.dequeue_count == 0:
            return None
        return self.wait_time_sum / self.dequeue_count

    def wait_std(self) -> Optional[float]:
        """Population standard deviation of waiting times."""
        mean = self.mean_wait()
        if mean is None:
            return None
        variance = self.wait_time_sum_squared / self.dequeue_count - mean * mean
        return math.sqrt(max(variance, 0.0))

    def average_length(self, now: int) -> Optional[float]:
        """Time-average queue length up to the last length change."""
        if now == 0:
            return None
        return self.length_time_sum / now
