"""Elo difference, error margin and likelihood of superiority from match scores."""

from __future__ import annotations

import math

# The approximation of the inverse error function is tuned with this value of pi.
_PI = 3.14159


def _mu(wins: int, losses: int, draws: int) -> float:
    return (wins + draws / 2.0) / (wins + losses + draws)


def _erf_inv(x: float) -> float:
    a = 8.0 * (_PI - 3.0) / (3.0 * _PI * (4.0 - _PI))
    y = math.log(1.0 - x * x)
    z = 2.0 / (_PI * a) + y / 2.0
    root = math.sqrt(math.sqrt(z * z - y / a) - z)
    return root if x >= 0.0 else -root


def _phi_inv(p: float) -> float:
    return math.sqrt(2.0) * _erf_inv(2.0 * p - 1.0)


def _diff(p: float) -> float:
    if p >= 1.0:
        return math.inf
    if p <= 0.0:
        return -math.inf
    return -400.0 * math.log10(1.0 / p - 1.0)


def los(wins: int, losses: int) -> float:
    """Likelihood of superiority in percent; NaN when no decisive games were played."""
    if wins + losses == 0:
        return math.nan
    return 100.0 * (0.5 + 0.5 * math.erf((wins - losses) / math.sqrt(2.0 * (wins + losses))))


def get_elo(wins: int, losses: int, draws: int) -> float:
    """Elo difference implied by a score; NaN when no games were played."""
    if wins + losses + draws == 0:
        return math.nan
    value = _diff(_mu(wins, losses, draws))
    # Normalise negative zero.
    return 0.0 if value == 0.0 else value


def get_err(wins: int, losses: int, draws: int) -> float:
    """Half-width of the 95% confidence interval of the Elo difference."""
    total = wins + losses + draws
    if total == 0:
        return math.nan

    mu = _mu(wins, losses, draws)

    dev_w = wins / total * (1.0 - mu) ** 2
    dev_l = losses / total * (0.0 - mu) ** 2
    dev_d = draws / total * (0.5 - mu) ** 2

    stdev = math.sqrt(dev_w + dev_l + dev_d) / math.sqrt(total)

    mu_min = mu + _phi_inv(0.025) * stdev
    mu_max = mu + _phi_inv(0.975) * stdev

    return (_diff(mu_max) - _diff(mu_min)) / 2.0