"""Command-line entry point for the dining simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import ArgumentError, NoMealsRequired, parse_args
from .simulation import Table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run: count time_to_die time_to_eat time_to_sleep [meals]."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_args(args)
    except NoMealsRequired:
        return 0
    except ArgumentError as err:
        print(err)
        return 1
    Table(config).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())