# smplsim/reports/report_generator.py
"""
Render engine state and statistics as text tables, and write report files.
"""
from typing import Any, Dict, List, Optional
import os

import pandas as pd

from ..core.engine import Engine
from ..core.metrics_collector import MetricsCollector
from ..utils.io import save_json, save_yaml

MISSING = "-"


def _fmt(value: Optional[float], spec: str = "{:.2f}") -> str:
    return MISSING if value is None else spec.format(value)


def format_table(rows: List[Dict[str, Any]], columns: List[str]) -> str:
    """Render rows as an aligned text table."""
    if not rows:
        return "  (empty)"
    return pd.DataFrame(rows, columns=columns).to_string(index=False)


def events_table(engine: Engine) -> str:
    """Pending events: time, kind and transact."""
    rows = [
        {'Time': e.time, 'Event': int(e.event_kind), 'Transact': e.transact_id}
        for e in engine.pending_events()
    ]
    return format_table(rows, ['Time', 'Event', 'Transact'])


def devices_state_table(engine: Engine) -> str:
    """Current occupant of each device."""
    rows = [{'Device': d.name, 'Transact': d.status()} for d in engine.devices]
    return format_table(rows, ['Device', 'Transact'])


def queues_state_table(engine: Engine) -> str:
    """Waiting items of every queue in dequeue order."""
    rows = [
        {
            'Queue': q.name,
            'Priority': item.priority,
            'Arrival': item.arrival_time,
            'Transact': item.transact_id,
        }
        for q in engine.queues
        for item in q.items()
    ]
    return format_table(rows, ['Queue', 'Priority', 'Arrival', 'Transact'])


def monitor(engine: Engine) -> str:
    """Current time plus pending events, devices and queue contents."""
    return "\n".join([
        f"*** Simulation time: {engine.current_time}",
        "Pending events:",
        events_table(engine),
        "Devices:",
        devices_state_table(engine),
        "Queues:",
        queues_state_table(engine),
    ])


def devices_report_table(engine: Engine) -> str:
    rows = [
        {
            'Device': d.name,
            'Mean service': _fmt(d.mean_service_time()),
            'Busy %': _fmt(None if d.utilization() is None else d.utilization() * 100),
            'Requests': d.completed_count,
        }
        for d in engine.devices
    ]
    return format_table(rows, ['Device', 'Mean service', 'Busy %', 'Requests'])


def queues_report_table(engine: Engine) -> str:
    rows = [
        {
            'Queue': q.name,
            'Mean wait': _fmt(q.mean_wait()),
            'Wait std': _fmt(q.wait_std()),
            'Max': q.max_length,
            'Mean length': _fmt(q.average_length()),
            'Length': q.length(),
        }
        for q in engine.queues
    ]
    return format_table(
        rows, ['Queue', 'Mean wait', 'Wait std', 'Max', 'Mean length', 'Length']
    )


def report(engine: Engine) -> str:
    """Statistics of all devices and queues."""
    return "\n".join([
        f"Simulation time: {engine.current_time}",
        "Devices:",
        devices_report_table(engine),
        "Queues:",
        queues_report_table(engine),
    ])


def generate_report(engine: Engine, out_dir: str, format: str = 'yaml',
                    metrics: Optional[Dict[str, Any]] = None) -> str:
    """
    Write ``report.txt`` and a results file and return the results file path.

    Args:
        engine: Engine after the run
        out_dir: Output directory
        format: Results format ('yaml' or 'json')
        metrics: Precomputed metrics, collected from the engine if omitted

    Returns:
        Path to the results file
    """
    if format not in ('yaml', 'json'):
        raise ValueError(f"Unknown report format: {format}")

    os.makedirs(out_dir, exist_ok=True)

    text_path = os.path.join(out_dir, "report.txt")
    with open(text_path, "w", encoding="utf-8") as f:
        f.write(monitor(engine))
        f.write("\n\n")
        f.write(report(engine))
        f.write("\n")

    if metrics is None:
        metrics = MetricsCollector(engine).compute_metrics()

    results_path = os.path.join(out_dir, f"results.{format}")
    if format == 'json':
        save_json(metrics, results_path)
    else:
        save_yaml(metrics, results_path)

    return results_path
