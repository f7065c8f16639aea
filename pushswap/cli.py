"""Command line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .output import put_endl
from .parsing import InputError, parse_arguments
from .sorting import solve

_ERROR_STATUS = 255


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the integers in ``argv`` and print one operation per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        operations = solve(parse_arguments(args))
    except InputError:
        put_endl("Error", sys.stderr)
        return _ERROR_STATUS
    for name in operations:
        put_endl(name, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())