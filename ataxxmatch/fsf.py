"""Position strings for engines that use the chess-variant piece letters."""

from __future__ import annotations

_BOARD_PIECES = str.maketrans({"x": "P", "o": "p"})
_SIDES = {"x": "w", "o": "b"}


def fen_to_fsf_fen(fen: str) -> str:
    """Rewrite a FEN: pieces x/o become P/p and the side to move x/o becomes w/b."""
    board, separator, rest = fen.partition(" ")
    board = board.translate(_BOARD_PIECES)
    if rest:
        rest = _SIDES.get(rest[0], rest[0]) + rest[1:]
    return board + separator + rest