"""
Monitor Client - Main Entry Point.

Prints the static inventory or runtime readings of the local machine.
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from .core.config import Config, get_default_config_path, setup_logging
from .core.errors import AccessorError, MonitorError
from .collectors.hardware import HardwareAccessor
from .collectors.local_collector import LocalCollector


logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Host inventory and utilization monitor"
    )

    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Path to configuration file (YAML)"
    )

    parser.add_argument(
        "-i", "--interface",
        default=None,
        help="Network interface to report (overrides configuration)"
    )

    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Sampling interval in seconds (default: 0.5)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--generate-config",
        action="store_true",
        help="Generate a sample configuration file"
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("interfaces", help="List network interface names")
    subparsers.add_parser("base", help="Print the static machine inventory")

    runtime = subparsers.add_parser("runtime", help="Print runtime utilization readings")
    runtime.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of readings to take (default: 1)"
    )
    runtime.add_argument(
        "--every",
        type=float,
        default=0.0,
        help="Seconds to wait between readings (default: 0)"
    )

    return parser.parse_args(argv)


def print_runtime(collector: LocalCollector, count: int, every: float):
    """Take ``count`` readings, skipping ones where the host query failed."""
    for i in range(count):
        try:
            detail = collector.get_runtime_detail()
        except AccessorError as e:
            logger.warning(f"Skipping runtime reading: {e}")
        else:
            print(json.dumps(detail.to_dict()))
            sys.stdout.flush()

        if every > 0 and i < count - 1:
            time.sleep(every)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Generate sample config if requested
    if args.generate_config:
        config = Config()
        config_path = "config/config.yaml"
        Path("config").mkdir(exist_ok=True)
        config.to_yaml(config_path)
        print(f"Generated sample configuration: {config_path}")
        return 0

    try:
        config_path = args.config or get_default_config_path()
        config = Config.from_yaml(config_path)
    except MonitorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Apply command line overrides
    if args.interface:
        config.monitor.network_interface = args.interface
    if args.interval is not None:
        config.monitor.sample_interval_seconds = args.interval
    if args.verbose:
        config.logging.level = "DEBUG"

    setup_logging(config.logging)
    logger.debug(f"Loaded configuration from {config_path}")

    try:
        collector = LocalCollector(HardwareAccessor(), config)

        if args.command == "interfaces":
            for name in collector.list_network_interface_names():
                print(name)
        elif args.command == "base":
            print(json.dumps(collector.get_base_detail().to_dict(), indent=2))
        elif args.command == "runtime":
            print_runtime(collector, args.count, args.every)
        else:
            print("No command given; use interfaces, base or runtime", file=sys.stderr)
            return 2
    except MonitorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def run():
    """Entry point for the application."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted")


if __name__ == "__main__":
    run()
