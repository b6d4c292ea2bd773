"""Reading opening positions from a file."""

from __future__ import annotations

import os
import random

DEFAULT_OPENING = "x5o/7/7/7/7/7/o5x x 0 1"

_MIN_FEN_LENGTH = len("7/7/7/7/7/7/7")


def load_openings(path: str | os.PathLike[str], shuffle: bool = False) -> list[str]:
    """Read one FEN per line, skipping comments and short lines.

    A file that cannot be opened gives the standard starting position alone.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            lines = [line.rstrip("\n") for line in handle]
    except OSError:
        return [DEFAULT_OPENING]

    openings = [
        line for line in lines if len(line) >= _MIN_FEN_LENGTH and not line.startswith("#")
    ]
    if not openings:
        raise ValueError("Must be at least 1 opening position")

    if shuffle:
        random.shuffle(openings)

    return openings