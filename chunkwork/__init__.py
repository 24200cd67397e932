"""Chunked jobs (primes, sums, Caesar cipher, maximum) split across a thread pool."""

__version__ = "0.1.0"