"""Visualization utilities for simulation results."""

import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path
from typing import Dict, List

sns.set_style("whitegrid")
sns.set_palette("husl")


def plot_results(results: Dict, output_dir: Path) -> List[Path]:
    """Generate all visualization plots.

    Args:
        results: Metrics dictionary from MetricsCollector.compute_metrics
        output_dir: Directory to save plots

    Returns:
        Paths of the written images
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []

    if results.get('devices') or results.get('queues'):
        path = output_dir / "resource_statistics.png"
        plot_resource_statistics(results, path)
        written.append(path)

    # Timeline is only present when the model sampled snapshots
    if 'timestamps' in results:
        path = output_dir / "timeline.png"
        plot_timeline(results, path)
        written.append(path)

    return written


def plot_resource_statistics(results: Dict, output_path: Path) -> None:
    """Bar charts of device utilization and queue waiting times.

    Args:
        results: Metrics dictionary
        output_path: Output file path
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    devices = results.get('devices', [])
    names = [d['name'] for d in devices]
    utilization = [(d['utilization'] or 0.0) * 100 for d in devices]
    ax1.bar(names, utilization, color='steelblue')
    ax1.set_ylabel('Busy time (%)')
    ax1.set_ylim([0, 100])
    ax1.set_title('Device Utilization')
    ax1.grid(axis='y', alpha=0.3)

    queues = results.get('queues', [])
    names = [q['name'] for q in queues]
    mean_wait = [q['mean_wait'] or 0.0 for q in queues]
    wait_std = [q['wait_std'] or 0.0 for q in queues]
    ax2.bar(names, mean_wait, yerr=wait_std, color='coral', capsize=4)
    ax2.set_ylabel('Waiting time')
    ax2.set_title('Queue Mean Wait (± std)')
    ax2.grid(axis='y', alpha=0.3)

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)


def plot_timeline(results: Dict, output_path: Path) -> None:
    """Plot sampled queue lengths and device occupancy over time.

    Args:
        results: Metrics dictionary with time-series data
        output_path: Output file path
    """
    timestamps = results['timestamps']
    timeline = results.get('timeline', {})

    fig, axes = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    ax = axes[0]
    for name, values in timeline.items():
        if name.startswith('queue_length/'):
            ax.step(timestamps, values, where='post', label=name.split('/', 1)[1])
    ax.set_ylabel('Length')
    ax.set_title('Queue Length Over Time')
    ax.grid(alpha=0.3)
    if ax.get_legend_handles_labels()[0]:
        ax.legend()

    ax = axes[1]
    for name, values in timeline.items():
        if name.startswith('device_busy/'):
            ax.step(timestamps, values, where='post', label=name.split('/', 1)[1])
    ax.set_xlabel('Simulation time')
    ax.set_ylabel('Busy')
    ax.set_title('Device Occupancy Over Time')
    ax.set_ylim([-0.1, 1.1])
    ax.grid(alpha=0.3)
    if ax.get_legend_handles_labels()[0]:
        ax.legend()

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
