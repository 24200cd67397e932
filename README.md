# chunkwork

Small jobs that split their input into contiguous chunks, hand each chunk to
a worker in a thread pool, and combine the partial results.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Commands

Every command takes `-w`/`--workers N` (at least 1; the default is the
number of CPUs reported by the system).

- `chunkwork-hello`: prints one line per worker rank, naming the host,
  the rank and the total number of workers.
- `chunkwork-primes [START END]`: counts the primes in the inclusive range
  `[START, END]`. Missing bounds are asked for on standard input. Prints
  `The range [START, END] has N prime numbers.`
- `chunkwork-gauss [VALUE ...]`: adds up the given integers, or the numbers
  1 to 10 when none are given, and prints `Sum of array is: N .`
- `chunkwork-cipher [TEXT] [-f FILE] [-m encrypt|decrypt]`: applies a
  Caesar shift of three to ASCII letters, leaving everything else alone.
  Text comes from the argument, from the first line of `FILE`, or, when
  neither is given, interactively: choose 1 to type a line or 2 to name a
  file. Without `--mode` it asks for 1 (encrypt) or 2 (decrypt). Prints
  `The final result is: ...`
- `chunkwork-max [VALUE ...]`: prints the largest of the given integers.
  Without values it reads an array size and then that many integers from
  standard input. An empty array is an error.

Commands exit with status 1 and a message when input is not a number, a
file cannot be read, or a mode is invalid.

## Library use

```python
from chunkwork.primes import count_primes, count_primes_in_range, is_prime
from chunkwork.gauss import parallel_sum
from chunkwork.cipher import Mode, encode_char, decode_char, transform, parallel_transform
from chunkwork.maximum import parallel_max
from chunkwork.pool import split_evenly, map_chunks, greetings, processor_name

count_primes(1, 100, workers=4)            # 25
parallel_sum(range(1, 11), workers=3)      # 55
transform("Hello", Mode.ENCRYPT)           # "Khoor"
parallel_transform("Khoor", Mode.DECRYPT, workers=2)  # "Hello"
parallel_max([3, 9, 2, 7], workers=2)      # 9
```

`split_evenly(items, parts)` cuts a sequence into `parts` slices: each but
the last holds `len(items) // parts` items and the last takes the rest.
`map_chunks(func, chunks, workers)` applies `func` to each chunk in a
thread pool and returns the results in chunk order. Worker counts below 1
raise `ValueError`, as do invalid cipher modes and `parallel_max` on an
empty sequence.

## What it does not do

All work runs on threads inside one Python process. Nothing is spread
across separate processes or machines, so the worker count shapes how the
input is split rather than how fast the job finishes.