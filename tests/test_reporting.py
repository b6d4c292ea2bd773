from ataxxmatch.reporting import (
    format_match_summary,
    format_results,
    format_settings_summary,
    is_sprt_stop,
)
from ataxxmatch.results import Results, Score
from ataxxmatch.settings import EngineSettings, SearchSettings, Settings


def make_settings(names, **kwargs):
    settings = Settings(**kwargs)
    settings.engines = [EngineSettings(id=i, name=name) for i, name in enumerate(names)]
    return settings


def make_results(scores):
    results = Results.for_engines(scores)
    for name, score in scores.items():
        results.scores[name] = score
    return results


def pair_results(wins, losses, draws):
    played = wins + losses + draws
    results = make_results(
        {
            "A": Score(wins=wins, losses=losses, draws=draws, played=played),
            "B": Score(wins=losses, losses=wins, draws=draws, played=played),
        }
    )
    results.games_played = played
    results.games_started = played
    return results


def sprt_settings(names=("A", "B")):
    settings = make_settings(names)
    settings.sprt.enabled = True
    settings.sprt.autostop = True
    settings.sprt.elo0 = -1
    settings.sprt.elo1 = 4
    return settings


def test_sprt_stop_crosses_upper_bound():
    assert is_sprt_stop(sprt_settings(), pair_results(4413, 4218, 7481)) is True


def test_sprt_stop_inside_bounds():
    assert is_sprt_stop(sprt_settings(), pair_results(3415, 3270, 5763)) is False


def test_sprt_stop_disabled():
    settings = sprt_settings()
    settings.sprt.enabled = False
    assert is_sprt_stop(settings, pair_results(4413, 4218, 7481)) is False


def test_sprt_stop_needs_autostop():
    settings = sprt_settings()
    settings.sprt.autostop = False
    assert is_sprt_stop(settings, pair_results(4413, 4218, 7481)) is False


def test_sprt_stop_needs_two_engines():
    settings = sprt_settings(("A", "B", "C"))
    results = pair_results(4413, 4218, 7481)
    results.scores["C"] = Score()
    assert is_sprt_stop(settings, results) is False


def test_early_report_has_score_only():
    settings = make_settings(["A", "B"])
    text = format_results(settings, pair_results(3, 1, 1))
    assert text.startswith("Score of A vs B: 3 - 1 - 1  [")
    assert text.rstrip("\n").endswith(" 5")
    assert "Elo difference" not in text
    assert "SPRT" not in text


def test_no_report_when_not_due():
    settings = make_settings(["A", "B"], print_early=False)
    assert format_results(settings, pair_results(3, 1, 1)) == ""


def test_report_at_interval_includes_elo():
    settings = make_settings(["A", "B"])
    text = format_results(settings, pair_results(10, 10, 10))
    lines = text.split("\n")
    assert lines[0].startswith("Score of A vs B: 10 - 10 - 10  [0.500] 30")
    assert lines[1].startswith("Elo difference: 0.00 +/- ")
    assert "LOS: " in lines[1] and "DrawRatio: " in lines[1]
    assert text.endswith("\n\n")
    assert "SPRT" not in text


def test_report_with_sprt_line():
    settings = make_settings(["A", "B"])
    settings.sprt.enabled = True
    text = format_results(settings, pair_results(10, 10, 10))
    sprt_lines = [line for line in text.split("\n") if line.startswith("SPRT: ")]
    assert len(sprt_lines) == 1
    sprt_line = sprt_lines[0]
    assert sprt_line.endswith(", lbound -2.94, ubound 2.94")
    llr_text = sprt_line.split(",")[0].removeprefix("SPRT: llr ")
    assert len(llr_text.split(".")[1]) == 2
    assert abs(float(llr_text)) < 2.94


def test_report_on_completion():
    settings = make_settings(["A", "B"], num_games=7, print_early=False)
    text = format_results(settings, pair_results(4, 2, 1))
    assert text.startswith("Score of A vs B")
    assert "Elo difference" in text


def test_table_for_several_engines():
    settings = make_settings(["A", "B", "C"])
    results = make_results(
        {
            "C": Score(wins=1, losses=2, draws=2, played=5),
            "A": Score(wins=3, losses=1, draws=1, played=5),
            "B": Score(),
        }
    )
    results.games_played = 10
    text = format_results(settings, results)
    lines = text.split("\n")
    assert lines[0].startswith("Engines")
    assert lines[0].endswith("Rate")
    assert [line[0] for line in lines[1:4]] == ["A", "B", "C"]
    assert len({len(line) for line in lines[:4]}) == 1
    assert lines[2].endswith("0.000")
    assert text.endswith("\n\n")


def test_table_widens_for_long_names():
    long_name = "averyveryverylongname"
    settings = make_settings([long_name, "B", "C"])
    results = make_results({long_name: Score(), "B": Score(), "C": Score()})
    results.games_played = 10
    lines = format_results(settings, results).split("\n")
    assert lines[0].startswith("Engines" + " " * (len(long_name) + 2 - len("Engines")))
    assert len(lines[0]) == len(lines[1]) == len(lines[2])


def test_table_not_due():
    settings = make_settings(["A", "B", "C"])
    results = make_results({"A": Score(), "B": Score(), "C": Score()})
    results.games_played = 3
    assert format_results(settings, results) == ""


def test_settings_summary():
    settings = make_settings(["A", "B"], num_games=40, concurrency=3)
    settings.tc = SearchSettings.as_movetime(10)
    text = format_settings_summary(settings, 12)
    assert text.startswith("Settings:\n")
    assert "- games 40\n" in text
    assert "- engines 2\n" in text
    assert "- concurrency 3\n" in text
    assert f"- timecontrol {settings.tc}\n" in text
    assert text.endswith("- openings 12\n\n")


def test_match_summary_time_and_results():
    settings = make_settings(["A", "B"], concurrency=2)
    results = Results(games_played=20, black_wins=7, white_wins=8, draws=5)
    text = format_match_summary(settings, results, 3_723_000)
    assert "Time taken: 01h 02m 03s\n" in text
    assert "Total games: 20\n" in text
    assert "Threads: 2\n" in text
    assert text.endswith("Result  Games\n1-0     7\n0-1     8\n1/2-1/2 5\n")


def test_match_summary_without_elapsed_time():
    settings = make_settings(["A", "B"])
    text = format_match_summary(settings, Results(games_played=4), 0)
    assert "games/sec" not in text
    assert "games/min" not in text


def test_match_summary_rate_precision():
    settings = make_settings(["A", "B"])
    fast = format_match_summary(settings, Results(games_played=1000), 1000)
    slow = format_match_summary(settings, Results(games_played=1), 1000)
    assert "games/sec: 1000\n" in fast
    assert "games/min: 60000\n" in fast
    assert "games/sec: 1.00\n" in slow
    assert "games/min: 60.00\n" in slow