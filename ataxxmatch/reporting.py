"""Text reports printed while and after a match runs."""

from __future__ import annotations

import math

from .elo import get_elo, get_err, los
from .results import Results
from .settings import Settings
from .sprt import get_lbound, get_llr, get_ubound


def _sprt_values(settings: Settings, results: Results) -> tuple[float, float, float]:
    score = results.scores[settings.engines[0].name]
    sprt = settings.sprt
    llr = get_llr(score.wins, score.losses, score.draws, sprt.elo0, sprt.elo1)
    return llr, get_lbound(sprt.alpha, sprt.beta), get_ubound(sprt.alpha, sprt.beta)


def is_sprt_stop(settings: Settings, results: Results) -> bool:
    """Whether a two-engine match has crossed an SPRT bound and should stop."""
    sprt = settings.sprt
    if not sprt.enabled or not sprt.autostop or len(settings.engines) != 2:
        return False
    llr, lbound, ubound = _sprt_values(settings, results)
    return llr <= lbound or llr >= ubound


def _format_pair(settings: Settings, results: Results) -> str:
    first, second = settings.engines
    score = results.scores[first.name]
    w, l, d = score.wins, score.losses, score.draws
    played = results.games_played

    llr, lbound, ubound = _sprt_values(settings, results)
    sprt_stop = settings.sprt.enabled and settings.sprt.autostop and (llr <= lbound or llr >= ubound)
    print_early = played < settings.ratinginterval and settings.print_early
    print_late = played % settings.ratinginterval == 0
    complete = settings.num_games == played

    if not (print_early or print_late or sprt_stop or complete):
        return ""

    print_elo = played >= settings.ratinginterval or sprt_stop or complete
    print_sprt = settings.sprt.enabled and print_elo

    percentage = (2.0 * w + d) / (2.0 * played) if played else math.nan
    lines = [f"Score of {first.name} vs {second.name}: {w} - {l} - {d}  [{percentage:.3f}] {played}\n"]

    if print_elo:
        draw_ratio = 100.0 * d / played if played else math.nan
        lines.append(
            f"Elo difference: {get_elo(w, l, d):.2f} +/- {get_err(w, l, d):.2f}"
            f", LOS: {los(w, l):.2f} %, DrawRatio: {draw_ratio:.2f} %\n"
        )

    if print_sprt:
        lines.append(f"SPRT: llr {llr:.2f}, lbound {lbound:.2f}, ubound {ubound:.2f}\n")

    if print_elo or print_sprt:
        lines.append("\n")

    return "".join(lines)


def _format_table(settings: Settings, results: Results) -> str:
    played = results.games_played
    if not (played % settings.ratinginterval == 0 or settings.num_games == played):
        return ""

    scores = sorted(results.scores.items())

    name_length = 8
    max_wins, max_losses, max_draws, max_played = 999, 9999, 9999, 999999
    for name, score in scores:
        if len(name) > name_length:
            name_length = len(name) + 2
        max_wins = max(max_wins, score.wins)
        max_losses = max(max_losses, score.losses)
        max_draws = max(max_draws, score.draws)

    win_length = len(str(max_wins)) + 2
    lose_length = len(str(max_losses)) + 2
    draw_length = len(str(max_draws)) + 2
    played_length = len(str(max_played)) + 2

    def row(name: str, wins: object, losses: object, draws: object, games: object, rate: str) -> str:
        return (
            f"{name:<{name_length}}{wins!s:>{win_length}}{losses!s:>{lose_length}}"
            f"{draws!s:>{draw_length}}{games!s:>{played_length}}{rate:>7}\n"
        )

    lines = [row("Engines", "Win", "Lose", "Draw", "Played", "Rate")]
    for name, score in scores:
        points = score.wins + score.draws / 2
        rate = points / score.played if score.played else 0.0
        lines.append(row(name, score.wins, score.losses, score.draws, score.played, f"{rate:.3f}"))
    lines.append("\n")
    return "".join(lines)


def format_results(settings: Settings, results: Results) -> str:
    """The progress report after a game; empty when nothing is due."""
    if len(settings.engines) == 2:
        return _format_pair(settings, results)
    return _format_table(settings, results)


def format_settings_summary(settings: Settings, num_openings: int) -> str:
    """The summary of the settings printed before a match starts."""
    return (
        "Settings:\n"
        f"- games {settings.num_games}\n"
        f"- engines {len(settings.engines)}\n"
        f"- concurrency {settings.concurrency}\n"
        f"- timecontrol {settings.tc}\n"
        f"- openings {num_openings}\n"
        "\n"
    )


def format_match_summary(settings: Settings, results: Results, elapsed_ms: int) -> str:
    """Timing and result statistics printed after a match ends."""
    elapsed_ms = int(elapsed_ms)
    total_seconds = elapsed_ms // 1000
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    lines = [
        "\n",
        f"Time taken: {hours:02d}h {minutes:02d}m {seconds:02d}s\n",
        f"Total games: {results.games_played}\n",
        f"Threads: {settings.concurrency}\n",
    ]
    if elapsed_ms > 0:
        games_per_sec = results.games_played / elapsed_ms * 1000
        precision = 0 if games_per_sec >= 100 else 2
        lines.append(f"games/sec: {games_per_sec:.{precision}f}\n")
        lines.append(f"games/min: {games_per_sec * 60.0:.{precision}f}\n")
    lines.append("\n")
    lines.append("Result  Games\n")
    lines.append(f"1-0     {results.black_wins}\n")
    lines.append(f"0-1     {results.white_wins}\n")
    lines.append(f"1/2-1/2 {results.draws}\n")
    return "".join(lines)