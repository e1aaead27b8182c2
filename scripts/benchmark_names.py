"""
Measure normalise / is_normalised throughput over a generated name corpus.
"""

import sys
import logging
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from namecase.names import run_performance_test

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark the name case normaliser.")
    parser.add_argument("--count", type=int, default=20000, help="Number of names to generate.")
    parser.add_argument("--seed", type=int, default=13, help="Random seed for the generated corpus.")
    parser.add_argument("--debug", action="store_true", help="Log every rewrite decision (slow).")
    args = parser.parse_args()

    assert args.count > 0, "Count must be positive"
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    run_performance_test(count=args.count, seed=args.seed)
