"""Main entry point for the smplsim reference model."""

import argparse
import sys
from pathlib import Path

from smplsim.models.single_server import SingleServerModel
from smplsim.reports.report_generator import generate_report
from smplsim.utils.logger import setup_logger
from configs import DEFAULT_CONFIG_PATH, load_config


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="smplsim: single-server discrete event simulation"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=str(DEFAULT_CONFIG_PATH),
        help="Path to configuration file",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="results",
        help="Directory to save results",
    )
    parser.add_argument(
        "--format",
        choices=["yaml", "json"],
        default="yaml",
        help="Results file format",
    )
    parser.add_argument(
        "--monitor",
        action="store_true",
        help="Log pending events, devices and queues at the end of the run",
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Generate visualization plots",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main function."""
    args = parse_args(argv)

    # Setup logging
    log_level = "DEBUG" if args.verbose else "INFO"
    logger = setup_logger("smplsim", level=log_level)

    logger.info("=== smplsim: single-server simulation ===")
    logger.info(f"Loading configuration from {args.config}")

    try:
        config = load_config(args.config)
        if args.monitor:
            config.setdefault('simulation', {})['monitor'] = True

        model = SingleServerModel(config)
        results = model.run()

        logger.info(f"Transacts generated: {results['transacts_generated']}")
        logger.info(model.metrics_collector.get_summary())

        output_dir = Path(args.output_dir)
        results_file = generate_report(model.engine, str(output_dir), args.format, results)
        logger.info(f"Results saved to {results_file}")

        if args.visualize:
            from smplsim.utils.visualization import plot_results

            logger.info("Generating visualization plots...")
            plot_results(results, output_dir)
            logger.info(f"Plots saved to {output_dir}")

        logger.info("Simulation completed successfully!")
        return 0

    except Exception as e:
        logger.error(f"Simulation failed: {str(e)}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
