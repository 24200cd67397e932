"""Summing a sequence of integers, split across workers."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from chunkwork.pool import _default_workers, map_chunks, split_evenly

DEFAULT_VALUES = tuple(range(1, 11))


def parallel_sum(values: Sequence[int], workers: int) -> int:
    """Sum ``values`` by adding partial sums computed by ``workers`` workers."""
    chunks = split_evenly(list(values), workers)
    return sum(map_chunks(sum, chunks, workers))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sum of the given integers, or of 1 to 10 when none are given."""
    parser = argparse.ArgumentParser(description="Sum integers across workers.")
    parser.add_argument("values", type=int, nargs="*")
    parser.add_argument("-w", "--workers", type=int, default=_default_workers())
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    values = args.values or DEFAULT_VALUES
    print(f"Sum of array is: {parallel_sum(values, args.workers)} .")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())