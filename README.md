# ataxxmatch

Building blocks for matches and tournaments between Ataxx engines:

- **Pairings** (`ataxxmatch.tournament`) – round-robin, gauntlet and mixed
  round-robin schedules, with colour-reversed repeats of each opening.
- **Statistics** (`ataxxmatch.elo`, `ataxxmatch.sprt`) – Elo difference with a
  95% error margin, likelihood of superiority, and the sequential probability
  ratio test (SPRT).
- **Moves** (`ataxxmatch.moves`) – squares, moves, and a forgiving parser for
  the many ways engines write Ataxx moves (`a1a3`, `b3`, `x@b3`, `0000`,
  `pass`, ...).
- **Configuration** (`ataxxmatch.config`, `ataxxmatch.settings`,
  `ataxxmatch.openings`) – JSON match settings and opening books.
- **Results and reports** (`ataxxmatch.results`, `ataxxmatch.reporting`,
  `ataxxmatch.pgn`) – running scores, progress reports, match summaries and
  PGN tag text.
- **Helpers** – `ataxxmatch.fsf.fen_to_fsf_fen`, `ataxxmatch.cache.Cache` and
  `ataxxmatch.text.split`.

The package has no runtime dependencies beyond the standard library.

## Statistics

```python
from ataxxmatch.elo import get_elo, get_err, los
from ataxxmatch.sprt import get_llr, get_lbound, get_ubound

wins, losses, draws = 300, 100, 100
round(get_elo(wins, losses, draws))   # 147
round(get_err(wins, losses, draws))   # 29
los(wins, losses)                     # likelihood of superiority, in percent

llr = get_llr(3415, 3270, 5763, -1, 4)    # about 2.16
lower = get_lbound(0.05, 0.05)            # about -2.94
upper = get_ubound(0.05, 0.05)            # about 2.94
```

`get_elo` and `get_err` return NaN when no games were played; `los` returns
NaN when no decisive games were played. An SPRT run stops once the
log-likelihood ratio leaves the interval `[lower, upper]`.

## Parsing moves

```python
from ataxxmatch.moves import Move, Square, parse_move

parse_move("a1a3")   # Move(to=Square(0, 2), origin=Square(0, 0)), a jump
parse_move("x@b2")   # Move(to=Square(1, 1)), a single move
parse_move("a1a2")   # longhand single move, same as "a2"
parse_move("0000")   # Move(), a pass; "pass", "null" and "a1a1" also work
str(parse_move("A1A3"))   # "a1a3"
```

Input is case-insensitive. Anything that is not a move on the 7x7 board
raises `ValueError`.

## Pairings

```python
from ataxxmatch.tournament import RoundRobinGenerator, TournamentType, make_generator

gen = RoundRobinGenerator(4, 2, 2, True)   # players, games per pairing, openings, repeat
gen.expected()                              # 12 games in the schedule
for game in gen:                            # stops once expected() games are handed out
    print(game.id, game.idx_opening, game.idx_player1, game.idx_player2)

gen = make_generator(TournamentType.GAUNTLET, 3, 4, 4, True)
```

With `repeat` enabled each opening is played twice, with the players'
colours swapped in the second game. Calling `next()` after the schedule is
finished starts it over from the beginning.

## Settings files

Match settings are JSON. Recognised top-level keys are `games`,
`ratinginterval`, `concurrency`, `colour1`, `colour2`, `debug`, `verbose`,
`print_early`, `tournament` (`roundrobin`, `roundrobinmixed`,
`roundrobin-mixed`, `roundrobin_mixed`, `gauntlet`), `adjudicate`,
`openings`, `timecontrol`, `pgn`, `sprt`, `options` and the required
`engines` list. Each engine may set `name`, `path`, `protocol` (`uai`, `fsf`,
`katago`), `builtin`, `arguments`, `options` and its own `timecontrol`.

```json
{
    "games": 100,
    "concurrency": 2,
    "openings": {"path": "openings.txt", "shuffle": false},
    "timecontrol": {"time": 10000, "inc": 100},
    "sprt": {"enabled": true, "autostop": true, "elo0": 0, "elo1": 5},
    "engines": [
        {"name": "first", "builtin": "mostcaptures"},
        {"name": "second", "builtin": "random"}
    ]
}
```

```python
from ataxxmatch.config import load_settings, parse_settings, SettingsError
from ataxxmatch.openings import load_openings

try:
    settings = load_settings("match.json")
except SettingsError as exc:
    print(exc)

openings = load_openings(settings.openings_path, settings.shuffle)
```

`parse_settings` takes an already decoded JSON object. Both raise
`SettingsError` (a `ValueError`) when the openings path or a non-builtin
engine's path does not exist, when an engine's protocol is not recognised,
when there are fewer than two engines, or when concurrency is below one.

An opening book is a text file with one FEN per line; lines starting with `#`
and lines shorter than an empty board are ignored. When the file cannot be
opened the standard start position is used; a file with no openings raises
`ValueError`.

## Results and reports

```python
from ataxxmatch.results import GameResult, Results
from ataxxmatch.reporting import (
    format_match_summary, format_results, format_settings_summary, is_sprt_stop,
)

print(format_settings_summary(settings, len(openings)), end="")

results = Results.for_engines(engine.name for engine in settings.engines)
results.record("first", "second", GameResult.BLACK_WIN)   # first played black

print(format_results(settings, results), end="")
if is_sprt_stop(settings, results):
    print(format_match_summary(settings, results, elapsed_ms=61_000), end="")
```

For a two-engine match `format_results` shows the score, Elo difference, LOS,
draw ratio and SPRT bounds; with more engines it gives a results table. It
returns an empty string when no report is due for the current game count.

`ataxxmatch.pgn` supplies `ResultReason`, `result_string`,
`adjudication_string` and `current_time_string` for building PGN tags.

## What this package does not do

It does not start or talk to engine processes, play or adjudicate games,
or write PGN files, and it has no command-line program. It provides the
scheduling, parsing, configuration, scoring and reporting pieces that a
match runner is built from.