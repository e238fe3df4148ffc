#!/usr/bin/env python3
"""
DNS Record Cache - Command Line Interface

Main entry point for looking up DNS records through the zone record cache.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from ..core.lookup_manager import LookupManager
from ..parsers.csv import CSVParser

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="DNS Record Cache - Look up DNS records by zone and record id"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )

    parser.add_argument("--zone", "-z", help="DNS zone id to look records up in")

    parser.add_argument(
        "--record",
        "-r",
        action="append",
        default=[],
        help="Record id to look up in --zone (repeatable)",
    )

    parser.add_argument(
        "--lookups",
        "-f",
        help="CSV file with ZoneID and RecordID columns",
    )

    parser.add_argument(
        "--stats", action="store_true", help="Show cache counters after the lookups"
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if args.record and not args.zone:
        print("Error: --record requires --zone")
        sys.exit(1)

    if args.zone and not args.record:
        print("Error: --zone requires at least one --record")
        sys.exit(1)

    if not args.record and not args.lookups:
        print("Error: give --zone with --record, or --lookups")
        sys.exit(1)

    if args.lookups and not Path(args.lookups).exists():
        print(f"Error: CSV file '{args.lookups}' not found")
        sys.exit(1)

    config = load_config(args.config)
    config_logger(config, verbose=args.verbose)

    lookup_manager = None
    try:
        requests: List[Tuple[str, str]] = [(args.zone, r) for r in args.record]
        if args.lookups:
            requests.extend(CSVParser(args.lookups).parse())

        lookup_manager = LookupManager(config)
        results = lookup_manager.find_records(requests)
        lookup_manager.display_results(results)

        if args.stats:
            lookup_manager.display_stats()

        if all(result.found for result in results):
            sys.exit(0)
        else:
            print("Some DNS records were not found")
            sys.exit(1)

    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    finally:
        if lookup_manager is not None:
            lookup_manager.close()


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        print(f"Error: invalid configuration file '{config_path}': {e}")
        sys.exit(1)


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {"mock": {}},
        "default_provider": "mock",
        "cache": {"retry_failed_fetches": False},
    }


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging", None)
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if logging_config:
        log_level = "DEBUG" if verbose else logging_config.get("level", "INFO")
        log_file = logging_config.get("file")

        handlers = [logging.StreamHandler(sys.stdout)]
        if log_file:
            handlers.insert(0, logging.FileHandler(log_file))

        logging.basicConfig(level=log_level, format=log_format, handlers=handlers)
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


if __name__ == "__main__":
    main()
