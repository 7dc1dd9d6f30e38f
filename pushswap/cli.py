"""Command-line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import EmptyInput, InputError, parse_arguments
from .turk import solve


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the numbers, write one operation per line and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_arguments(args)
    except EmptyInput:
        return 1
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    for operation in solve(numbers):
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())