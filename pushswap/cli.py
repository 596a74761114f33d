"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import index_values, sort_stack
from pushswap.stacks import Stacks


def run(
    args: Sequence[str],
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Write one operation per line to ``out``; on bad input write ``Error`` to ``err``.

    Returns the exit status.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    try:
        values = parse_arguments(args)
    except InputError:
        err.write("Error\n")
        return 1
    if not values:
        return 0
    stacks = Stacks(index_values(values), stream=out)
    sort_stack(stacks)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the command."""
    if argv is None:
        argv = sys.argv[1:]
    return run(argv, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())