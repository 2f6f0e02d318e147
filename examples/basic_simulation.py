"""Basic simulation example."""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from smplsim.models.single_server import SingleServerModel
from smplsim.utils.logger import setup_logger
from configs import load_config


def main():
    """Run a basic simulation."""
    logger = setup_logger("BasicSimulation")

    logger.info("=== Basic Single-Server Simulation ===")

    config = load_config(Path(__file__).parent.parent / "configs" / "default.yaml")

    # Customize for this example
    config['simulation']['duration'] = 1000
    config['simulation']['monitor'] = False
    config['service']['service_time'] = {'distribution': 'exponential', 'mean': 15}

    logger.info(f"Running simulation for {config['simulation']['duration']} time units")

    model = SingleServerModel(config)
    results = model.run()

    logger.info("\n=== Results ===")
    logger.info(f"Transacts generated: {results['transacts_generated']}")
    for device in results['devices']:
        logger.info(f"Device {device['name']}: {device['completed_count']} served")
        if device['utilization'] is not None:
            logger.info(f"  Utilization: {device['utilization']:.1%}")
    for queue in results['queues']:
        logger.info(f"Queue {queue['name']}: max length {queue['max_length']}")
        if queue['mean_wait'] is not None:
            logger.info(f"  Mean wait: {queue['mean_wait']:.2f}")

    logger.info("\nSimulation complete!")


if __name__ == "__main__":
    main()
