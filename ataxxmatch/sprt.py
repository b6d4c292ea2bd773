"""Sequential probability ratio test for a two-engine match."""

from __future__ import annotations

import math


def _elo_to_probability(elo: float, drawelo: float) -> tuple[float, float, float]:
    pwin = 1.0 / (1.0 + 10.0 ** ((-elo + drawelo) / 400.0))
    ploss = 1.0 / (1.0 + 10.0 ** ((elo + drawelo) / 400.0))
    pdraw = 1.0 - pwin - ploss
    return pwin, pdraw, ploss


def _probability_to_elo(pwin: float, ploss: float) -> tuple[float, float]:
    elo = 200.0 * math.log10(pwin / ploss * (1.0 - ploss) / (1.0 - pwin))
    draw_elo = 200.0 * math.log10((1.0 - ploss) / ploss * (1.0 - pwin) / pwin)
    return elo, draw_elo


def get_llr(wins: int, losses: int, draws: int, elo0: float, elo1: float) -> float:
    """Log-likelihood ratio of the hypotheses elo1 against elo0."""
    wins = max(wins, 1)
    losses = max(losses, 1)
    draws = max(draws, 1)
    total = wins + losses + draws

    _, drawelo = _probability_to_elo(wins / total, losses / total)

    p0win, p0draw, p0loss = _elo_to_probability(elo0, drawelo)
    p1win, p1draw, p1loss = _elo_to_probability(elo1, drawelo)

    return (
        wins * math.log(p1win / p0win)
        + losses * math.log(p1loss / p0loss)
        + draws * math.log(p1draw / p0draw)
    )


def get_lbound(alpha: float, beta: float) -> float:
    """Lower stopping bound for the log-likelihood ratio."""
    return math.log(beta / (1.0 - alpha))


def get_ubound(alpha: float, beta: float) -> float:
    """Upper stopping bound for the log-likelihood ratio."""
    return math.log((1.0 - beta) / alpha)