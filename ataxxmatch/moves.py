"""Squares and moves on the 7x7 board, and parsing of engine move strings."""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 7


@dataclass(frozen=True)
class Square:
    """A board square by file ``x`` (a-g) and rank ``y`` (1-7), both from zero."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if not (0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE):
            raise ValueError(f"Square out of range: ({self.x}, {self.y})")

    def __str__(self) -> str:
        return f"{chr(ord('a') + self.x)}{self.y + 1}"


@dataclass(frozen=True)
class Move:
    """A move to ``to``, jumping from ``origin`` for doubles; no squares means a pass."""

    to: Square | None = None
    origin: Square | None = None

    def __str__(self) -> str:
        if self.to is None:
            return "0000"
        if self.origin is None:
            return str(self.to)
        return f"{self.origin}{self.to}"


def _on_board(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def _coords(file_char: str, rank_char: str) -> tuple[int, int]:
    return ord(file_char) - ord("a"), ord(rank_char) - ord("1")


def parse_move(text: str) -> Move:
    """Parse a move as engines write it; raise ValueError if it is not one."""
    move = text.lower()

    # Passes come in several spellings, including a square to itself.
    if move in ("0000", "pass", "null") or (
        len(move) == 4 and move[0] == move[2] and move[1] == move[3]
    ):
        return Move()

    if len(move) == 2 or (len(move) == 4 and move[1] == "@"):
        x, y = _coords(move[-2], move[-1])
        if not _on_board(x, y):
            raise ValueError(f"Not a move. ({move[2:4]})")
        return Move(Square(x, y))

    if len(move) == 4:
        x1, y1 = _coords(move[0], move[1])
        x2, y2 = _coords(move[2], move[3])

        if not _on_board(x1, y1) or not _on_board(x2, y2):
            raise ValueError(f"Invalid move. ({move})")

        origin = Square(x1, y1)
        target = Square(x2, y2)
        if origin == target:
            raise ValueError("Source and destination square are the same")

        dx = abs(x1 - x2)
        dy = abs(y1 - y2)
        if dx > 2 or dy > 2:
            raise ValueError(f"Invalid move. ({move})")

        # A single written in long form, such as "b2b3".
        if dx <= 1 and dy <= 1:
            return Move(target)

        return Move(target, origin)

    raise ValueError(f"Invalid move. ({move})")