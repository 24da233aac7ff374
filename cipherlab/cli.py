"""Command entry point selecting one of the chapter exercises."""

from __future__ import annotations

import sys
from collections.abc import Callable

from cipherlab import exercise01, exercise05

_EXERCISES: dict[str, Callable[[list[str] | None], int]] = {
    "01": exercise01.main,
    "05": exercise05.main,
}
_DEFAULT_EXERCISE = "05"


def main(argv: list[str] | None = None) -> int:
    """Run an exercise; the first argument may name it ('01' or '05'), default '05'."""
    args = list(sys.argv[1:] if argv is None else argv)
    name = _DEFAULT_EXERCISE
    if args and args[0] in _EXERCISES:
        name = args.pop(0)
    return _EXERCISES[name](args)


if __name__ == "__main__":
    sys.exit(main())