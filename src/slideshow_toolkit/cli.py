"""
Command-line entry point.

    slideshow-toolkit photos.txt -o out.txt --strategy localSearch --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .builder import (
    BuildError,
    OddVerticalPolicy,
    OrderingStrategy,
    SearchConfig,
    build_slideshow,
)

logger = logging.getLogger("slideshow_toolkit")


def _strategy(value: str) -> OrderingStrategy:
    try:
        return OrderingStrategy.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    defaults = SearchConfig()
    parser = argparse.ArgumentParser(
        prog="slideshow-toolkit",
        description="Arrange tagged photos into a high-scoring slideshow",
    )
    parser.add_argument("input", type=Path, help="Photo collection file")
    parser.add_argument(
        "-o", "--output", type=Path, default=Path("out.txt"),
        help="Slideshow output file (default: out.txt)",
    )
    parser.add_argument(
        "--iterations", type=int, default=defaults.iterations,
        help=f"Number of re-pairing iterations (default: {defaults.iterations})",
    )
    parser.add_argument(
        "--strategy", type=_strategy, default=defaults.ordering_strategy,
        help="Ordering strategy: exhaustive, greedy or localSearch "
             f"(default: {defaults.ordering_strategy})",
    )
    parser.add_argument(
        "--steps", type=int, default=defaults.local_search_steps,
        help=f"Local search reversal attempts per iteration (default: {defaults.local_search_steps})",
    )
    parser.add_argument(
        "--seed", type=int, default=defaults.seed,
        help=f"Random seed (default: {defaults.seed})",
    )
    parser.add_argument(
        "--keep-odd-vertical", action="store_true",
        help="Show an unpaired vertical photo on its own slide instead of dropping it",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        Process exit code: 0 on success, 1 on build failure, 2 on bad options
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        config = SearchConfig(
            iterations=args.iterations,
            ordering_strategy=args.strategy,
            seed=args.seed,
            local_search_steps=args.steps,
            odd_vertical_policy=(
                OddVerticalPolicy.KEEP if args.keep_odd_vertical else OddVerticalPolicy.DROP
            ),
        )
    except ValueError as e:
        logger.error(f"Invalid options: {e}")
        return 2

    try:
        build_slideshow(args.input, args.output, config)
    except BuildError as e:
        logger.error(str(e))
        return 1
    return 0
