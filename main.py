import sys
import os
import argparse
import logging
from typing import List, Optional

# Add project root to path for imports
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config.config import GeneratorConfig
from core.bounded_random import BoundedRandomGenerator
from core.errors import InvalidRangeError
from utils.stats import summarize


def main(argv: Optional[List[str]] = None, configure_logging: bool = False) -> int:
    """
    Entry point for the bounded random sanity harness.
    Draws a batch and prints its summary next to the theoretical midpoint.
    Root logging is only configured when `configure_logging` is set.
    """
    parser = argparse.ArgumentParser(description="Bounded random sanity harness")
    parser.add_argument("--upper", type=int, required=True, help="Exclusive upper bound")
    parser.add_argument("--lower", type=int, default=0, help="Inclusive lower bound")
    parser.add_argument("--count", type=int, default=100000, help="Number of draws")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible draws")
    parser.add_argument("--verbose", action="store_true", help="Log every draw")
    args = parser.parse_args(argv)

    if configure_logging:
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    config = GeneratorConfig(seed=args.seed, log_draws=args.verbose)
    generator = BoundedRandomGenerator.from_config(config)

    try:
        values = generator.get_random_long_values(args.count, args.upper, args.lower)
    except (InvalidRangeError, OverflowError) as e:
        print(f"Error: {e}")
        return 2

    if not values:
        print("No values drawn.")
        return 0

    summary = summarize(values)
    midpoint = args.lower + (args.upper - 1 - args.lower) // 2
    print(f"Bounds: [{args.lower}, {args.upper})  count={summary.count}")
    print(f"  Min: {summary.minimum}  Max: {summary.maximum}  Range: {summary.value_range}")
    print(f"  Mean: {summary.mean:.2f}  Median: {summary.median:.1f}  Midpoint: {midpoint}")
    return 0


if __name__ == "__main__":
    sys.exit(main(configure_logging=True))
