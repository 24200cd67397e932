"""Splitting work into chunks and running it on a pool of workers."""

from __future__ import annotations

import argparse
import os
import socket
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def _default_workers() -> int:
    return os.cpu_count() or 1


def _check_workers(workers: int) -> None:
    if workers < 1:
        raise ValueError(f"at least one worker is required, got {workers}")


def processor_name() -> str:
    """Return the name of the machine this process runs on."""
    return socket.gethostname()


def split_evenly(items: Sequence[T], parts: int) -> list[Sequence[T]]:
    """Split ``items`` into ``parts`` contiguous slices.

    Every slice but the last holds ``len(items) // parts`` items; the last
    slice also takes whatever is left over.
    """
    _check_workers(parts)
    size = len(items) // parts
    chunks = [items[rank * size:(rank + 1) * size] for rank in range(parts - 1)]
    chunks.append(items[(parts - 1) * size:])
    return chunks


def map_chunks(
    func: Callable[[T], R], chunks: Iterable[T], workers: int
) -> list[R]:
    """Apply ``func`` to every chunk concurrently; results keep chunk order."""
    _check_workers(workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(func, chunks))


def greetings(workers: int) -> list[str]:
    """Return one greeting per worker rank."""
    _check_workers(workers)
    name = processor_name()
    return map_chunks(
        lambda rank: (
            f"Hello World from processor {name}, rank {rank} "
            f"out of {workers} processors"
        ),
        range(workers),
        workers,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print a greeting from every worker."""
    parser = argparse.ArgumentParser(description="Greet from every worker.")
    parser.add_argument("-w", "--workers", type=int, default=_default_workers())
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    for line in greetings(args.workers):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())