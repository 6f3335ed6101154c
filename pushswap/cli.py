"""Command-line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from .parsing import InputError, assign_indices, has_duplicates, parse_arguments
from .sorting import solve
from .stacks import Stacks


def push_swap(args: Iterable[str]) -> List[str]:
    """Return the moves that sort the numbers held in ``args``.

    Raises :class:`InputError` for malformed, out-of-range or repeated numbers.
    """
    values = parse_arguments(args)
    if has_duplicates(values):
        raise InputError("duplicate values")
    stacks = Stacks(assign_indices(values))
    solve(stacks, len(values))
    return stacks.moves


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one move per line; on bad input print ``Error`` to stderr."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        moves = push_swap(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    sys.exit(main())