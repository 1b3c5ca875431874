"""A small greeting command."""

from __future__ import annotations

import argparse
from typing import Iterator, Sequence


def greeting_lines(name: str, count: int) -> Iterator[str]:
    """Yield a welcome line followed by ``100 // i`` for ``i`` in 1..count."""
    yield f"Hello and welcome, {name}!"
    for i in range(1, count + 1):
        yield f"i = {100 // i}"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print a greeting and a few quotients.")
    parser.add_argument("name", nargs="?", default="gopher")
    parser.add_argument("--count", type=int, default=5)
    args = parser.parse_args(argv)
    for line in greeting_lines(args.name, args.count):
        print(line)
    return 0