#!/usr/bin/env python3
"""Generate a sample equipment registry and export it.

Runs the field network scenario and writes equipment, ownership transfers
and maintenance records either as JSON files or to the console.
"""

import argparse
import logging

from equipment_registry.config import RegistryConfig, ScenarioConfig
from equipment_registry.logging import setup_logging
from equipment_registry.scenarios import FieldNetworkScenario
from equipment_registry.sinks import ConsoleSink, JsonFileSink, export_registry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a sample equipment registry")
    parser.add_argument(
        "--equipment",
        type=int,
        default=20,
        help="Number of devices to register (default: 20)",
    )
    parser.add_argument(
        "--owners",
        type=int,
        default=5,
        help="Number of owner principals (default: 5)",
    )
    parser.add_argument(
        "--transfer-rate",
        type=float,
        default=0.2,
        help="Fraction of devices handed over to another owner (default: 0.2)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: SEED env var)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for JSON files (default: OUTPUT_DIR env var)",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Print to stdout instead of writing JSON files",
    )
    return parser


def main(argv: list[str] | None = None) -> dict[str, int]:
    args = build_parser().parse_args(argv)
    config = RegistryConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    scenario_config = ScenarioConfig(
        num_owners=args.owners,
        num_equipment=args.equipment,
        transfer_rate=args.transfer_rate,
        start_height=config.initial_block_height or ScenarioConfig.start_height,
    )
    seed = args.seed if args.seed is not None else config.seed
    service = FieldNetworkScenario.from_config(scenario_config, seed=seed).generate()

    if args.console:
        sink = ConsoleSink(pretty=config.output.pretty_json, max_records=10)
    else:
        output_dir = args.output_dir or config.output.json_output_dir
        sink = JsonFileSink(output_dir, pretty=config.output.pretty_json)

    counts = export_registry(service, sink)
    sink.close()
    logger.info("Exported %s", counts)
    return counts


if __name__ == "__main__":
    main()
