"""Finding the largest integer in a sequence, split across workers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from chunkwork.pool import _default_workers, map_chunks, split_evenly


def parallel_max(values: Sequence[int], workers: int) -> int:
    """Return the maximum of ``values`` from the local maxima of ``workers`` slices."""
    items = list(values)
    if not items:
        raise ValueError("cannot take the maximum of an empty sequence")
    chunks = [chunk for chunk in split_evenly(items, workers) if chunk]
    return max(map_chunks(max, chunks, workers))


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _read_values() -> list[int]:
    tokens = _tokens()
    print("Enter size of the array: ")
    size = int(next(tokens))
    if size < 0:
        raise ValueError("array size must not be negative")
    print("Enter the desired array: ")
    return [int(next(tokens)) for _ in range(size)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the maximum of integers from the arguments or standard input."""
    parser = argparse.ArgumentParser(description="Find the maximum across workers.")
    parser.add_argument("values", type=int, nargs="*")
    parser.add_argument("-w", "--workers", type=int, default=_default_workers())
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    print("Hello from master process.")
    print(f"Number of slave processes is {args.workers}")
    try:
        values = args.values or _read_values()
    except (ValueError, StopIteration):
        print("error: expected a size followed by that many integers", file=sys.stderr)
        return 1
    try:
        result = parallel_max(values, args.workers)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"The global maximum is : {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())