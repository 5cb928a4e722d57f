#!/usr/bin/env python3
"""Run a randomized market simulation and export its ledger events.

The simulation registers synthetic properties, issues and trades shares,
deposits and claims rental income, and runs governance votes. At the end
the ledger is audited for share conservation and all recorded events are
exported to the selected sinks.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fractional_estate.config import FractionalEstateConfig
from fractional_estate.exceptions import ConfigurationError
from fractional_estate.logging import setup_logging
from fractional_estate.scenarios import MarketActivityScenario
from fractional_estate.sinks import ConsoleSink, JsonFileSink, KafkaSink

logger = logging.getLogger(__name__)


def build_sinks(names: list[str], config: FractionalEstateConfig, args: argparse.Namespace) -> list:
    """Instantiate the requested sinks."""
    sinks: list = []
    for name in names:
        if name == "console":
            sinks.append(ConsoleSink(pretty=config.output.pretty_json, max_records=args.max_records))
        elif name == "json":
            sinks.append(JsonFileSink(args.output_dir, pretty=config.output.pretty_json))
        elif name == "kafka":
            config.kafka.bootstrap_servers = args.kafka_bootstrap
            sinks.append(KafkaSink(config.kafka))
    return sinks


def main() -> int:
    """Main entry point."""
    config = FractionalEstateConfig.from_env()

    parser = argparse.ArgumentParser(
        description="Simulate fractional-ownership market activity"
    )
    parser.add_argument(
        "--properties",
        type=int,
        default=config.simulation.num_properties,
        help=f"Number of properties to register (default: {config.simulation.num_properties})",
    )
    parser.add_argument(
        "--investors",
        type=int,
        default=config.simulation.num_investors,
        help=f"Number of investors (default: {config.simulation.num_investors})",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=config.simulation.num_rounds,
        help=f"Number of random actions (default: {config.simulation.num_rounds})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--sink",
        action="append",
        choices=["console", "json", "kafka"],
        help="Event sink; repeat for several (default: console)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.json_output_dir,
        help="Directory for the json sink",
    )
    parser.add_argument(
        "--kafka-bootstrap",
        type=str,
        default=config.kafka.bootstrap_servers,
        help="Kafka bootstrap servers",
    )
    parser.add_argument(
        "--max-records",
        type=int,
        default=None,
        help="Maximum events printed per topic by the console sink",
    )
    parser.add_argument(
        "--purge-stale-listings",
        action="store_true",
        default=config.ledger.purge_stale_listings,
        help="Drop listings whose seller can no longer cover them",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help="Log level (default: INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log output format",
    )
    args = parser.parse_args()

    setup_logging(args.log_level, args.log_format)
    config.ledger.purge_stale_listings = args.purge_stale_listings

    try:
        scenario = MarketActivityScenario(
            num_properties=args.properties,
            num_investors=args.investors,
            num_rounds=args.rounds,
            seed=args.seed,
            locale=config.simulation.locale,
            config=config.ledger,
        )
    except ConfigurationError as exc:
        logger.error("Invalid simulation settings: %s", exc)
        return 2
    result = scenario.run()

    journal = result.ledger.journal
    journal.topic_prefix = config.output.topic_prefix
    sinks = build_sinks(args.sink or ["console"], config, args)
    try:
        journal.flush(sinks)
    finally:
        for sink in sinks:
            sink.close()

    logger.info("Operations: %s", result.operations)
    logger.info("Rejections: %s", result.rejections)
    logger.info(
        "Income deposited=%d claimed=%d", result.income_deposited, result.income_claimed
    )
    logger.info("Ledger summary: %s", result.ledger.summary())

    if not result.consistent:
        for problem in result.audit_problems:
            logger.error(problem)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
