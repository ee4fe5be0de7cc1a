#!/usr/bin/env python3
"""
===============================================================================
LISTBENCH - MAIN ENTRY POINT
===============================================================================
Times the operation battery against ArraySequence, then LinkedSequence, and
prints the comparison table and conclusions to standard output.

USAGE:
    listbench                          # Fixed battery, 5000 operations
    listbench --operations 20000       # Larger repetition count
    listbench --config bench.yaml      # Settings from YAML
    listbench --derived-summary        # Also summarise the measured ratios
    listbench --no-derived-summary     # Override derived_summary: true from YAML

Log messages go to stderr; stdout carries only the report.
===============================================================================
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_config
from .containers import DEFAULT_VARIANTS
from .report import ReportPrinter
from .runner import BenchmarkRunner

logger = logging.getLogger("listbench")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare array-backed and linked sequences on seven operations",
    )
    parser.add_argument("--config", type=str, default=None,
                        help="Path to a YAML config file")
    parser.add_argument("--operations", type=int, default=None,
                        help="Operations per phase (default: 5000)")
    parser.add_argument("--derived-summary", action=argparse.BooleanOptionalAction,
                        default=None,
                        help="Print (or, with --no-derived-summary, suppress) a "
                             "summary computed from the measurements")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: INFO)")
    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, run both variants and print the report.

    Returns:
        Process exit code (always 0 on completion).
    """
    args = parse_args(argv)
    config = load_config(args.config).with_overrides(
        operation_count=args.operations,
        derived_summary=args.derived_summary,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    runner = BenchmarkRunner(config.operation_count)
    variant_a, variant_b = DEFAULT_VARIANTS
    printer = ReportPrinter(variant_a.label, variant_b.label)
    printer.print_banner()

    results_a = runner.run_all(variant_a())
    results_b = runner.run_all(variant_b())
    logger.info("Benchmark finished, rendering report")

    printer.render(results_a, results_b, derived=config.derived_summary, banner=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
