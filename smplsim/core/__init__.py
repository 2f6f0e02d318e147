"""Core simulation components."""

from .clock import Clock
from .event_queue import Event, EventQueue, CancelMatch
from .statistics import DeviceStats, QueueStats
from .device import Device
from .queue import Queue, QueueItem
from .engine import Engine
from .metrics_collector import MetricsCollector
from .exceptions import (
    SimulationError,
    NegativeDelayError,
    EmptyEventSetError,
    EventNotFoundError,
    DeviceBusyError,
    DeviceIdleError,
    EmptyQueueError,
    ClockError,
)

__all__ = [
    "Clock",
    "Event",
    "EventQueue",
    "CancelMatch",
    "DeviceStats",
    "QueueStats",
    "Device",
    "Queue",
    "QueueItem",
    "Engine",
    "MetricsCollector",
    "SimulationError",
    "NegativeDelayError",
    "EmptyEventSetError",
    "EventNotFoundError",
    "DeviceBusyError",
    "DeviceIdleError",
    "EmptyQueueError",
    "ClockError",
]
