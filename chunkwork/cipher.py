"""Caesar cipher (shift of three) applied to text split across workers."""

from __future__ import annotations

import argparse
import enum
import sys
from collections.abc import Sequence
from functools import partial

from chunkwork.pool import _default_workers, map_chunks, split_evenly

SHIFT = 3
_ALPHABET_SIZE = 26
_MAX_LINE = 999


class Mode(enum.IntEnum):
    """Direction of the cipher."""

    ENCRYPT = 1
    DECRYPT = 2


def _shift_char(c: str, offset: int) -> str:
    for base in ("a", "A"):
        first = ord(base)
        if first <= ord(c) <= first + _ALPHABET_SIZE - 1:
            return chr(first + (ord(c) - first + offset) % _ALPHABET_SIZE)
    return c


def encode_char(c: str) -> str:
    """Shift an ASCII letter three places forward; leave anything else alone."""
    return _shift_char(c, SHIFT)


def decode_char(c: str) -> str:
    """Shift an ASCII letter three places back; leave anything else alone."""
    return _shift_char(c, -SHIFT)


def _coerce_mode(mode: Mode | int) -> Mode:
    try:
        return Mode(mode)
    except ValueError:
        raise ValueError(f"Invalid Operation Code: {mode!r}") from None


def transform(text: str, mode: Mode | int) -> str:
    """Encrypt or decrypt ``text`` according to ``mode``."""
    convert = encode_char if _coerce_mode(mode) is Mode.ENCRYPT else decode_char
    return "".join(map(convert, text))


def parallel_transform(text: str, mode: Mode | int, workers: int) -> str:
    """Encrypt or decrypt ``text`` with ``workers`` workers, one slice each."""
    mode = _coerce_mode(mode)
    chunks = split_evenly(text, workers)
    return "".join(map_chunks(partial(transform, mode=mode), chunks, workers))


def _strip_line(line: str) -> str:
    line = line[:_MAX_LINE]
    return line[:-1] if line.endswith("\n") else line


def _read_file_line(path: str) -> str:
    with open(path, encoding="utf-8") as handle:
        line = handle.readline()
    if not line:
        raise EOFError(path)
    return _strip_line(line)


def _ask_int(prompt_lines: Sequence[str]) -> int:
    for line in prompt_lines:
        print(line)
    return int(input().strip())


def _read_text(args: argparse.Namespace) -> str:
    """Return the text to process; raises ValueError, OSError or EOFError."""
    if args.text is not None:
        return args.text
    if args.file is not None:
        return _read_file_line(args.file)
    input_mode = _ask_int(
        [
            "Welcome to the Encryption/Decryption Program!",
            "Choose input mode:",
            "1. Console",
            "2. Input File",
        ]
    )
    if input_mode == 1:
        print("Input: ")
        return _strip_line(input())
    if input_mode == 2:
        print("Enter input file's name: ")
        return _read_file_line(input().strip())
    raise LookupError("Invalid Input Mode!")


def main(argv: Sequence[str] | None = None) -> int:
    """Encrypt or decrypt text from the arguments, a file or standard input."""
    parser = argparse.ArgumentParser(description="Caesar-shift text across workers.")
    parser.add_argument("text", nargs="?")
    parser.add_argument("-f", "--file")
    parser.add_argument("-m", "--mode", choices=("encrypt", "decrypt"))
    parser.add_argument("-w", "--workers", type=int, default=_default_workers())
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    if args.text is not None and args.file is not None:
        parser.error("give either text or --file, not both")

    try:
        text = _read_text(args)
    except LookupError as exc:
        print(exc)
        return 1
    except EOFError:
        print("Error reading file!", file=sys.stderr)
        return 1
    except OSError:
        print("Input File Failed to Open!", file=sys.stderr)
        return 1
    except ValueError:
        print("error: expected an integer", file=sys.stderr)
        return 1

    if args.mode is not None:
        mode: Mode | int = Mode.ENCRYPT if args.mode == "encrypt" else Mode.DECRYPT
    else:
        try:
            mode = _ask_int(["Choose :", "1. Encrypt", "2. Decrypt"])
        except (ValueError, EOFError):
            print("error: expected an integer", file=sys.stderr)
            return 1

    try:
        result = parallel_transform(text, mode, args.workers)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"The final result is: {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())