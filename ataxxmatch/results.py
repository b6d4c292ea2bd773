"""Running scores of a match."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass, field


class GameResult(enum.Enum):
    """The outcome of one game; black moves first."""

    BLACK_WIN = "1-0"
    WHITE_WIN = "0-1"
    DRAW = "1/2-1/2"
    NONE = "*"


@dataclass
class Score:
    """One engine's tally."""

    wins: int = 0
    draws: int = 0
    losses: int = 0
    crashes: int = 0
    played: int = 0

    def __str__(self) -> str:
        points = self.wins + self.draws / 2
        rate = points / self.played if self.played else math.nan
        return f"{self.wins} - {self.losses} - {self.draws}  [{rate:.3f}]"


@dataclass
class Results:
    """Totals of a match and a score per engine name."""

    games_started: int = 0
    games_played: int = 0
    black_wins: int = 0
    white_wins: int = 0
    draws: int = 0
    scores: dict[str, Score] = field(default_factory=dict)

    @classmethod
    def for_engines(cls, names: Iterable[str]) -> Results:
        """Empty results with a score for each name, ordered by name."""
        return cls(scores={name: Score() for name in sorted(set(names))})

    def record(self, player1: str, player2: str, result: GameResult) -> None:
        """Count a finished game; ``player1`` played black."""
        self.games_played += 1
        first = self.scores.setdefault(player1, Score())
        second = self.scores.setdefault(player2, Score())
        first.played += 1
        second.played += 1

        if result is GameResult.BLACK_WIN:
            first.wins += 1
            second.losses += 1
            self.black_wins += 1
        elif result is GameResult.WHITE_WIN:
            first.losses += 1
            second.wins += 1
            self.white_wins += 1
        elif result is GameResult.DRAW:
            first.draws += 1
            second.draws += 1
            self.draws += 1