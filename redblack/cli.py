"""Command loop driving a red-black tree from integer commands on standard input."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from .tree import RedBlackTree

INSERT = 1
PRINT = 2
REMOVE = 3
QUIT = 99


def _tokens(stream: Iterable[str]) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise ValueError(f"expected an integer, got {token!r}") from None


def run(stream: Iterable[str], out: TextIO) -> RedBlackTree:
    """Execute commands from ``stream``, writing listings to ``out``.

    Commands: ``1 v`` inserts, ``2`` prints the pre-order listing, ``3 v``
    removes and ``99`` stops. Other numbers are ignored. Returns the tree.
    """
    tree = RedBlackTree()
    tokens = _tokens(stream)
    for option in tokens:
        if option == INSERT:
            value = next(tokens, None)
            if value is None:
                break
            tree.insert(value)
        elif option == PRINT:
            out.write(tree.format_preorder() + "\n")
        elif option == REMOVE:
            value = next(tokens, None)
            if value is None:
                break
            tree.remove(value)
        elif option == QUIT:
            break
    return tree


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="redblack",
        description=(
            "Read commands from standard input: '1 v' insert, '2' print "
            "pre-order, '3 v' remove, '99' quit."
        ),
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())