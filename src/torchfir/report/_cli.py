"""Command line driver that writes the example filter reports."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from torchfir._constants import DEFAULT_OUTPUT_DIRECTORY, NUM_FREQUENCIES
from torchfir._exceptions import FilterAnalysisError

from ._catalog import CATALOG
from ._table import write_catalog

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="torchfir-report",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description=(
            "Write the frequency response, phase response, difference "
            "equation and zeros of the example order-1 and order-2 FIR "
            "filters as one CSV table per filter."
        ),
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        default=DEFAULT_OUTPUT_DIRECTORY,
        help="Directory the CSV tables are written to.",
    )
    parser.add_argument(
        "--only",
        action="append",
        choices=[entry.name for entry in CATALOG],
        metavar="NAME",
        help="Report only this filter. May be repeated.",
    )
    parser.add_argument(
        "--num-frequencies",
        "-n",
        type=int,
        default=NUM_FREQUENCIES,
        help="Number of samples from DC to Nyquist.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the example filters and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable DEBUG-level logging.",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.list:
        for entry in CATALOG:
            values = (entry.coefficients.gain,) + entry.coefficients.alphas
            print(
                f"{entry.name:<8} order {entry.coefficients.order}  "
                f"{', '.join(f'{value:g}' for value in values):<16} "
                f"{entry.description}"
            )
        return 0

    try:
        written = write_catalog(
            args.output_dir,
            frequencies=args.num_frequencies,
            names=args.only,
        )
    except (FilterAnalysisError, ValueError) as error:
        logger.error("Fatal: %s", error)
        logger.debug("Traceback:", exc_info=True)
        return 1

    logger.info("wrote %d report(s) to %s", len(written), args.output_dir)

    return 0
