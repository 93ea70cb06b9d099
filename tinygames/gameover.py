"""Print the game-over banner."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

MESSAGE = "Game Over !"


def _show_banner(out: TextIO) -> None:
    out.write(f"{MESSAGE}\n")
    out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Write the banner to standard output; any arguments are ignored."""
    _show_banner(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())