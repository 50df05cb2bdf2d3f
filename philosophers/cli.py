"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .args import ArgumentError, parse_args
from .table import RED, RESET, Table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation; return 0 on success, 1 for bad arguments,
    2 if the table cannot be set, 3 if threads cannot be started."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_args(args)
    except ArgumentError as error:
        sys.stderr.write(f"{RED}{error}{RESET}\n")
        return 1
    try:
        table = Table(settings)
    except MemoryError:
        return 2
    try:
        table.run()
    except RuntimeError:
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())