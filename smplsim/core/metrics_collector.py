"""Metrics collection and aggregation."""

import numpy as np
from typing import Dict, List, Optional
from collections import defaultdict

from .engine import Engine
from ..utils.logger import setup_logger


def _as_float(value) -> Optional[float]:
    return None if value is None else float(value)


class MetricsCollector:
    """Collect derived statistics from an engine.

    Produces a plain-dict snapshot of every device and queue (suitable for
    YAML/JSON export) and optionally records a timeline of queue lengths and
    device occupancy sampled by the driving model.
    """

    def __init__(self, engine: Engine):
        """Initialize metrics collector.

        Args:
            engine: Engine whose resources are measured
        """
        self.engine = engine
        self.logger = setup_logger(self.__class__.__name__)

        # Time-series sampled by record_snapshot
        self.timestamps: List[int] = []
        self.timeline = defaultdict(list)

    def record_snapshot(self, timestamp: int) -> None:
        """Record queue lengths and device occupancy at a point in time.

        Args:
            timestamp: Current simulation time
        """
        self.timestamps.append(timestamp)
        for queue in self.engine.queues:
            self.timeline[f'queue_length/{queue.name}'].append(queue.length())
        for device in self.engine.devices:
            self.timeline[f'device_busy/{device.name}'].append(int(device.is_busy()))

    def device_metrics(self) -> List[Dict]:
        """Per-device raw accumulators and derived statistics."""
        return [
            {
                'name': device.name,
                'status': device.status(),
                'completed_count': device.completed_count,
                'busy_time': device.busy_time,
                'mean_service_time': _as_float(device.mean_service_time()),
                'utilization': _as_float(device.utilization()),
            }
            for device in self.engine.devices
        ]

    def queue_metrics(self) -> List[Dict]:
        """Per-queue raw accumulators and derived statistics."""
        return [
            {
                'name': queue.name,
                'length': queue.length(),
                'max_length': queue.max_length,
                'length_time_sum': queue.length_time_sum,
                'wait_time_sum': queue.wait_time_sum,
                'wait_time_sum_squared': queue.wait_time_sum_squared,
                'dequeue_count': queue.dequeue_count,
                'mean_wait': _as_float(queue.mean_wait()),
                'wait_std': _as_float(queue.wait_std()),
                'average_length': _as_float(queue.average_length()),
            }
            for queue in self.engine.queues
        ]

    def compute_metrics(self) -> Dict:
        """Compute aggregate metrics.

        Returns:
            Dictionary of computed metrics
        """
        results = {
            'simulation_time': self.engine.current_time,
            'pending_events': self.engine.pending_count(),
            'devices': self.device_metrics(),
            'queues': self.queue_metrics(),
        }

        # Timeline summaries
        for metric_name, values in self.timeline.items():
            if values:
                results[f'mean_{metric_name}'] = float(np.mean(values))
                results[f'max_{metric_name}'] = int(np.max(values))

        if self.timestamps:
            results['timestamps'] = list(self.timestamps)
            results['timeline'] = {name: list(values) for name, values in self.timeline.items()}

        return results

    def get_summary(self) -> str:
        """Get human-readable summary of metrics.

        Returns:
            Formatted string with key metrics
        """
        summary = [
            "=== Metrics Summary ===",
            f"Simulation time: {self.engine.current_time}",
        ]

        for device in self.engine.devices:
            utilization = device.utilization()
            line = f"Device {device.name}: {device.completed_count} requests"
            if utilization is not None:
                line += f", utilization {utilization:.2%}"
            summary.append(line)

        for queue in self.engine.queues:
            line = f"Queue {queue.name}: {queue.dequeue_count} served, max length {queue.max_length}"
            mean_wait = queue.mean_wait()
            if mean_wait is not None:
                line += f", mean wait {mean_wait:.2f}"
            summary.append(line)

        return "\n".join(summary)
