"""Print the contents of the files named on the command line."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path


def main(argv: Sequence[str] | None = None) -> int:
    """Print each named file, decoded as UTF-8, followed by a newline."""
    paths = sys.argv[1:] if argv is None else list(argv)
    for path in paths:
        text = Path(path).read_bytes().decode("utf-8")
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())