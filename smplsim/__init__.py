"""smplsim: discrete event simulation kernel with devices and queues."""

from .core.engine import Engine
from .core.event_queue import Event, EventQueue, CancelMatch
from .core.device import Device
from .core.queue import Queue, QueueItem
from .core.metrics_collector import MetricsCollector
from .core.exceptions import SimulationError
from .workload.random_streams import RandomStreams
from .utils.logger import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Engine",
    "Event",
    "EventQueue",
    "CancelMatch",
    "Device",
    "Queue",
    "QueueItem",
    "MetricsCollector",
    "SimulationError",
    "RandomStreams",
    "setup_logger",
]
