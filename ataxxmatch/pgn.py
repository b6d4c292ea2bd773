"""Text used in PGN records of finished games."""

from __future__ import annotations

import enum
import time

from .results import GameResult


class ResultReason(enum.Enum):
    """Why a game ended."""

    NORMAL = 0
    OUT_OF_TIME = 1
    MATERIAL_IMBALANCE = 2
    EASY_FILL = 3
    GAMELENGTH = 4
    ILLEGAL_MOVE = 5
    ENGINE_CRASH = 6
    NONE = 7


_ADJUDICATIONS = {
    ResultReason.NORMAL: "",
    ResultReason.OUT_OF_TIME: "Out of time",
    ResultReason.MATERIAL_IMBALANCE: "Material imbalance",
    ResultReason.EASY_FILL: "Easy fill",
    ResultReason.GAMELENGTH: "Max game length reached",
    ResultReason.ILLEGAL_MOVE: "Illegal move",
}


def result_string(result: GameResult) -> str:
    """The PGN result token for a game outcome."""
    return result.value


def adjudication_string(reason: ResultReason) -> str:
    """The text of the Adjudicated tag for a reason; "*" when it has none."""
    return _ADJUDICATIONS.get(reason, "*")


def current_time_string() -> str:
    """The local date and time as ``yyyy-mm-dd hh:mm:ss``."""
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())