"""Pairing schedules for gauntlet and round-robin tournaments."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class GameInfo:
    """One scheduled game: its number, opening index and the two player indices."""

    id: int = 0
    idx_opening: int = 0
    idx_player1: int = 0
    idx_player2: int = 0


class TournamentType(enum.Enum):
    """The kinds of tournament a match can be run as."""

    ROUND_ROBIN = "roundrobin"
    ROUND_ROBIN_MIXED = "roundrobin_mixed"
    GAUNTLET = "gauntlet"


class TournamentGenerator(ABC):
    """Produces the games of a tournament one after another.

    Once ``expected()`` games have been produced the generator is finished,
    but ``next()`` keeps cycling through the schedule from the start.
    """

    @abstractmethod
    def is_finished(self) -> bool:
        """Whether every expected game has been handed out."""

    @abstractmethod
    def expected(self) -> int:
        """The number of games in the tournament."""

    @abstractmethod
    def next(self) -> GameInfo:
        """Hand out the next game."""

    def __iter__(self) -> Iterator[GameInfo]:
        while not self.is_finished():
            yield self.next()


class GauntletGenerator(TournamentGenerator):
    """Player 0 plays every other player ``games`` times."""

    def __init__(self, players: int, games: int, openings: int, repeat: bool) -> None:
        self._num_players = players
        self._num_games = games
        self._num_openings = openings
        self._repeat = repeat
        self._idx = 0
        self._opening = 0
        self._player2 = 1
        self._match_game = 0

    def is_finished(self) -> bool:
        return self._idx >= self.expected()

    def expected(self) -> int:
        return self._num_games * (self._num_players - 1)

    def next(self) -> GameInfo:
        is_mirror = self._match_game % 2 == 1
        if is_mirror and self._repeat:
            result = GameInfo(self._idx, self._opening, self._player2, 0)
        else:
            result = GameInfo(self._idx, self._opening, 0, self._player2)
        self._advance()
        return result

    def _advance(self) -> None:
        self._idx += 1
        self._match_game += 1

        if self._match_game >= self._num_games:
            self._match_game = 0
            self._player2 += 1

        if self._player2 >= self._num_players:
            self._player2 = 1

        if self._repeat:
            self._opening = (self._match_game // 2) % self._num_openings
        else:
            self._opening = self._match_game % self._num_openings


class RoundRobinGenerator(TournamentGenerator):
    """Every pair of players meets ``games`` times, one pairing after another."""

    def __init__(self, players: int, games: int, openings: int, repeat: bool) -> None:
        self._num_players = players
        self._num_games = games
        self._num_openings = openings
        self._repeat = repeat
        self._idx = 0
        self._opening = 0
        self._player1 = 0
        self._player2 = 1
        self._match_game = 0

    def is_finished(self) -> bool:
        return self._idx >= self.expected()

    def expected(self) -> int:
        games_per_player = self._num_games * (self._num_players - 1)
        return games_per_player * self._num_players // 2

    def next(self) -> GameInfo:
        is_mirror = self._match_game % 2 == 1
        if is_mirror and self._repeat:
            result = GameInfo(self._idx, self._opening, self._player2, self._player1)
        else:
            result = GameInfo(self._idx, self._opening, self._player1, self._player2)
        self._advance()
        return result

    def _advance(self) -> None:
        self._idx += 1
        self._match_game += 1

        if self._match_game >= self._num_games:
            self._match_game = 0
            self._player2 += 1

        if self._player2 >= self._num_players:
            self._player1 += 1
            self._player2 = self._player1 + 1

        if self._player1 >= self._num_players - 1:
            self._player1 = 0
            self._player2 = 1

        if self._repeat:
            self._opening = (self._match_game // 2) % self._num_openings
        else:
            self._opening = self._match_game % self._num_openings


class RoundRobinMixedGenerator(TournamentGenerator):
    """Round robin scheduled by the circle method, so pairings interleave.

    With an odd number of players a phantom player gives each round a bye.
    """

    def __init__(self, players: int, games: int, openings: int, repeat: bool) -> None:
        self._num_players = players
        self._num_games = games
        self._num_openings = openings
        self._repeat = repeat
        self._idx = 0
        self._player1 = 0
        self._player2 = 1
        self._opening = openings - 1
        self._circle = [0, *range(2, players + players % 2), 1]

    def is_finished(self) -> bool:
        return self._idx >= self.expected()

    def expected(self) -> int:
        games_per_player = self._num_games * (self._num_players - 1)
        return games_per_player * self._num_players // 2

    def next(self) -> GameInfo:
        self._advance()
        first = self._circle[self._player1]
        second = self._circle[self._player2]
        if self._repeat and self._idx % 2 == 0:
            return GameInfo(self._idx - 1, self._opening, second, first)
        return GameInfo(self._idx - 1, self._opening, first, second)

    def _step(self) -> None:
        self._player1 += 1
        self._player2 -= 1

    def _advance(self) -> None:
        if not self._repeat or self._idx % 2 == 0:
            self._step()
            self._opening += 1

        while True:
            okay = True

            if self._player1 >= self._player2:
                # New round: keep the first seat fixed, rotate the rest by one.
                self._circle[1:] = [self._circle[-1], *self._circle[1:-1]]
                self._player1 = 0
                self._player2 = len(self._circle) - 1
                okay = False

            bye = self._num_players in (
                self._circle[self._player1],
                self._circle[self._player2],
            )
            if bye:
                self._step()
                okay = False

            if okay:
                break

        self._opening %= self._num_openings
        self._idx += 1


def make_generator(
    tournament_type: TournamentType,
    players: int,
    games: int,
    openings: int,
    repeat: bool,
) -> TournamentGenerator:
    """Build the generator for a tournament type."""
    generators = {
        TournamentType.ROUND_ROBIN: RoundRobinGenerator,
        TournamentType.GAUNTLET: GauntletGenerator,
        TournamentType.ROUND_ROBIN_MIXED: RoundRobinMixedGenerator,
    }
    try:
        generator_class = generators[tournament_type]
    except KeyError:
        raise ValueError(f"Unknown tournament type: {tournament_type!r}") from None
    return generator_class(players, games, openings, repeat)