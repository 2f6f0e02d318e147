"""Single-server queueing model driving the engine."""

import copy
import time
from enum import IntEnum
from typing import Dict, Optional

from configs import merge_configs
from ..core.engine import Engine
from ..core.metrics_collector import MetricsCollector
from ..reports.report_generator import monitor, report
from ..workload.random_streams import RandomStreams
from ..utils.logger import setup_logger


class EventKind(IntEnum):
    """Event kinds of the single-server model."""
    GENERATE = 1
    RELEASE = 2
    RESERVE = 3
    END = 4


DEFAULT_CONFIG: Dict = {
    'simulation': {
        'duration': 480,
        'random_seed': 42,
        'monitor': False,
    },
    'model': {
        'device_name': 'Master',
        'queue_name': 'Accumulator',
    },
    'workload': {
        'interarrival': {'distribution': 'uniform', 'low': 14, 'high': 26},
        # None draws the first arrival from the interarrival distribution
        'first_arrival': None,
        'max_transacts': None,
    },
    'service': {
        'service_time': {'distribution': 'uniform', 'low': 12, 'high': 20},
    },
    'metrics': {
        'collect_timeline': False,
    },
}


class SingleServerModel:
    """Transacts arrive, wait for one device, get served and leave.

    Each arrival tries to reserve the device immediately. If the device is
    busy the transact joins the queue; every release hands the device to the
    head of the queue.
    """

    def __init__(self, config: Optional[Dict] = None):
        """Initialize model.

        Args:
            config: Configuration overriding DEFAULT_CONFIG
        """
        self.config = merge_configs(copy.deepcopy(DEFAULT_CONFIG), config or {})
        self.logger = setup_logger(self.__class__.__name__)

        sim_cfg = self.config['simulation']
        self.duration = sim_cfg['duration']
        self.random = RandomStreams(sim_cfg.get('random_seed'))

        self.engine = Engine()
        self.device = self.engine.create_device(self.config['model']['device_name'])
        self.queue = self.engine.create_queue(self.config['model']['queue_name'])
        self.metrics_collector = MetricsCollector(self.engine)
        self.collect_timeline = self.config['metrics'].get('collect_timeline', False)

        workload_cfg = self.config['workload']
        self.max_transacts = workload_cfg.get('max_transacts')
        self.next_transact_id = 1
        self.transacts_generated = 0

        self.logger.info(f"Simulation duration: {self.duration}")

    def run(self) -> Dict:
        """Run the model until the end event.

        Returns:
            Dictionary containing metrics of the run
        """
        start_time = time.time()
        self.logger.info("Starting simulation...")

        self._initialize()

        while True:
            event_kind, transact_id = self.engine.cause()
            if event_kind == EventKind.END:
                break

            self._process_event(event_kind, transact_id)

            if self.collect_timeline:
                self.metrics_collector.record_snapshot(self.engine.current_time)

        results = self._finalize()

        elapsed_time = time.time() - start_time
        self.logger.info(f"Simulation completed in {elapsed_time:.2f}s")

        return results

    def _initialize(self) -> None:
        """Seed the first arrival and the end of the run."""
        first_arrival = self.config['workload'].get('first_arrival')
        if first_arrival is None:
            first_arrival = self._interarrival()

        self.engine.schedule(EventKind.GENERATE, first_arrival, self._new_transact())
        self.engine.schedule(EventKind.END, self.duration, 0)

    def _new_transact(self) -> int:
        transact_id = self.next_transact_id
        self.next_transact_id += 1
        return transact_id

    def _interarrival(self) -> int:
        return self.random.sample(self.config['workload']['interarrival'])

    def _service_time(self) -> int:
        return self.random.sample(self.config['service']['service_time'])

    def _process_event(self, event_kind: int, transact_id: int) -> None:
        """Dispatch a single event.

        Args:
            event_kind: Kind of the caused event
            transact_id: Transact the event concerns
        """
        handler = {
            EventKind.GENERATE: self._handle_generate,
            EventKind.RESERVE: self._handle_reserve,
            EventKind.RELEASE: self._handle_release,
        }.get(event_kind)

        if handler is None:
            self.logger.warning(f"Unknown event kind {event_kind} for transact {transact_id}")
            return
        handler(transact_id)

    def _handle_generate(self, transact_id: int) -> None:
        """A new transact arrives and asks for the device right away."""
        self.transacts_generated += 1
        self.engine.schedule(EventKind.RESERVE, 0, transact_id)

        if self.max_transacts is None or self.next_transact_id <= self.max_transacts:
            self.engine.schedule(EventKind.GENERATE, self._interarrival(), self._new_transact())

    def _handle_reserve(self, transact_id: int) -> None:
        """Take the device if free, otherwise wait in the queue."""
        if self.device.status() == 0:
            self.device.reserve(transact_id)
            self.engine.schedule(EventKind.RELEASE, self._service_time(), transact_id)
        else:
            self.queue.enqueue(transact_id, 0, 1)

    def _handle_release(self, transact_id: int) -> None:
        """Free the device and hand it to the next waiting transact."""
        self.device.release()
        if self.queue.length() > 0:
            # Handed over directly so a simultaneous arrival cannot overtake it
            next_transact, _ = self.queue.head()
            self.device.reserve(next_transact)
            self.engine.schedule(EventKind.RELEASE, self._service_time(), next_transact)

    def _finalize(self) -> Dict:
        """Compute results and log the report.

        Returns:
            Dictionary containing all results and metrics
        """
        self.logger.info("Finalizing simulation...")

        if self.config['simulation'].get('monitor'):
            self.logger.info("\n" + monitor(self.engine))
        self.logger.info("\n" + report(self.engine))

        return {
            'transacts_generated': self.transacts_generated,
            **self.metrics_collector.compute_metrics(),
        }
