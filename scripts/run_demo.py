#!/usr/bin/env python3
"""Run the ledger and registry demo scenarios.

Examples::

    python scripts/run_demo.py                          # both scenarios, console output
    python scripts/run_demo.py --scenario registry --records 50 --seed 42
    python scripts/run_demo.py --output json --output-dir local/
    python scripts/run_demo.py --scenario ledger --accounts 10 --log-format json
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ledgerkit.config import LedgerKitConfig
from ledgerkit.exceptions import LedgerKitError
from ledgerkit.logging import LOG_FORMATS, setup_logging
from ledgerkit.scenarios import BankTransferScenario, StudentRegistryScenario
from ledgerkit.sinks import ConsoleSink, JsonFileSink

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--scenario",
        choices=["registry", "ledger", "all"],
        default="all",
        help="Scenario to run (default: all)",
    )
    parser.add_argument(
        "--output",
        choices=["console", "json"],
        default="console",
        help="Output sink (default: console)",
    )
    parser.add_argument(
        "--records",
        type=int,
        default=None,
        help="Generate N records instead of using the sample students",
    )
    parser.add_argument(
        "--accounts",
        type=int,
        default=0,
        help="Open N generated accounts in the ledger scenario (default: 0)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-level", default=None, help="Log level (default: from env or INFO)")
    parser.add_argument(
        "--log-format",
        choices=list(LOG_FORMATS),
        default=None,
        help="Log line format (default: from env or standard)",
    )
    parser.add_argument("--output-dir", type=Path, default=None, help="Directory for JSON output")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = LedgerKitConfig.from_env()
    setup_logging(args.log_level or config.log_level, args.log_format or config.log_format)

    seed = args.seed if args.seed is not None else config.seed
    sink = None

    try:
        if args.output == "json":
            sink = JsonFileSink(args.output_dir or config.output.json_output_dir, pretty=config.output.pretty_json)
        else:
            sink = ConsoleSink(pretty=True, max_records=20)

        if args.scenario in ("registry", "all"):
            scenario = StudentRegistryScenario(num_records=args.records, seed=seed, config=config.registry)
            scenario.generate()
            scenario.export([sink])

        if args.scenario in ("ledger", "all"):
            bank = BankTransferScenario(config=config.ledger, num_accounts=args.accounts, seed=seed)
            bank.generate()
            bank.export([sink])
    except LedgerKitError:
        logger.exception("Demo failed")
        return 1
    finally:
        if sink is not None:
            sink.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
