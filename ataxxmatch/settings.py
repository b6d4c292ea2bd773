"""Settings for searches, engines, adjudication, PGN output and whole matches."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .tournament import TournamentType


class SearchType(enum.Enum):
    """How an engine is told to limit its search."""

    TIME = 0
    MOVETIME = 1
    DEPTH = 2
    NODES = 3


@dataclass
class SearchSettings:
    """The limits handed to an engine for one search."""

    type: SearchType = SearchType.DEPTH
    btime: int = 0
    wtime: int = 0
    binc: int = 0
    winc: int = 0
    movestogo: int = 0
    movetime: int = 0
    ply: int = 0
    nodes: int = 0

    @classmethod
    def as_time(cls, btime: int, wtime: int, binc: int, winc: int) -> SearchSettings:
        """Clock times and increments, in milliseconds."""
        return cls(type=SearchType.TIME, btime=btime, wtime=wtime, binc=binc, winc=winc)

    @classmethod
    def as_movetime(cls, movetime: int) -> SearchSettings:
        """A fixed time per move, in milliseconds."""
        return cls(type=SearchType.MOVETIME, movetime=movetime)

    @classmethod
    def as_depth(cls, ply: int) -> SearchSettings:
        """A fixed search depth."""
        return cls(type=SearchType.DEPTH, ply=ply)

    @classmethod
    def as_nodes(cls, nodes: int) -> SearchSettings:
        """A fixed node count."""
        return cls(type=SearchType.NODES, nodes=nodes)

    def __str__(self) -> str:
        if self.type is SearchType.DEPTH:
            return f"depth {self.ply}"
        if self.type is SearchType.NODES:
            return f"nodes {self.nodes}"
        if self.type is SearchType.MOVETIME:
            return f"movetime {self.movetime}ms"
        return f"{self.btime}+{self.binc}ms"


class EngineProtocol(enum.Enum):
    """The text protocol an engine process speaks."""

    UAI = "uai"
    FSF = "fsf"
    KATAGO = "katago"
    UNKNOWN = "unknown"


@dataclass
class EngineSettings:
    """How to start and configure one engine."""

    id: int = 0
    proto: EngineProtocol = EngineProtocol.UNKNOWN
    name: str = ""
    builtin: str = ""
    path: str = ""
    arguments: str = ""
    tc: SearchSettings = field(default_factory=SearchSettings)
    options: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class AdjudicationSettings:
    """Rules for ending a game early; None disables a rule."""

    gamelength: int | None = None
    material: int | None = None
    easyfill: bool | None = None
    timeout_buffer: int = 0


@dataclass
class PGNSettings:
    """Where and how finished games are written."""

    path: str = "games.pgn"
    event: str = "*"
    colour1: str = "black"
    colour2: str = "white"
    enabled: bool = True
    verbose: bool = False
    override: bool = False


@dataclass
class SPRTSettings:
    """Parameters of the sequential probability ratio test."""

    enabled: bool = False
    autostop: bool = False
    alpha: float = 0.05
    beta: float = 0.05
    elo0: float = 0.0
    elo1: float = 5.0


@dataclass
class Settings:
    """Everything needed to run a match."""

    ratinginterval: int = 10
    concurrency: int = 1
    num_games: int = 100
    debug: bool = False
    recover: bool = False
    verbose: bool = False
    repeat: bool = True
    shuffle: bool = False
    print_early: bool = True
    tournament_type: TournamentType = TournamentType.ROUND_ROBIN
    openings_path: str = ""
    engines: list[EngineSettings] = field(default_factory=list)
    tc: SearchSettings = field(default_factory=SearchSettings)
    adjudication: AdjudicationSettings = field(default_factory=AdjudicationSettings)
    pgn: PGNSettings = field(default_factory=PGNSettings)
    sprt: SPRTSettings = field(default_factory=SPRTSettings)