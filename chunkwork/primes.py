"""Counting primes in a range, split across workers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from chunkwork.pool import _default_workers, map_chunks, split_evenly


def is_prime(number: int) -> bool:
    """Return whether ``number`` is prime, by 6k±1 trial division."""
    if number <= 1:
        return False
    if number <= 3:
        return True
    if number % 2 == 0 or number % 3 == 0:
        return False
    i = 5
    while i * i <= number:
        if number % i == 0 or number % (i + 2) == 0:
            return False
        i += 6
    return True


def count_primes_in_range(start: int, end: int) -> int:
    """Count primes in the inclusive range ``[start, end]``."""
    return sum(1 for n in range(start, end + 1) if is_prime(n))


def _count_chunk(chunk: range) -> int:
    return sum(1 for n in chunk if is_prime(n))


def count_primes(start: int, end: int, workers: int) -> int:
    """Count primes in ``[start, end]`` using ``workers`` concurrent workers."""
    chunks = split_evenly(range(start, end + 1), workers)
    return sum(map_chunks(_count_chunk, chunks, workers))


def _read_int(prompt: str) -> int:
    print(prompt)
    return int(input())


def main(argv: Sequence[str] | None = None) -> int:
    """Count the primes in a range read from the arguments or standard input."""
    parser = argparse.ArgumentParser(description="Count primes in a range.")
    parser.add_argument("start", type=int, nargs="?")
    parser.add_argument("end", type=int, nargs="?")
    parser.add_argument("-w", "--workers", type=int, default=_default_workers())
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    try:
        start = args.start if args.start is not None else _read_int(
            "Enter the starting point: "
        )
        end = args.end if args.end is not None else _read_int("Enter the end point: ")
    except (ValueError, EOFError):
        print("error: expected an integer", file=sys.stderr)
        return 1
    total = count_primes(start, end, args.workers)
    print(f"The range [{start}, {end}] has {total} prime numbers.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())