from ataxxmatch.settings import (
    AdjudicationSettings,
    EngineProtocol,
    EngineSettings,
    PGNSettings,
    SearchSettings,
    SearchType,
    Settings,
    SPRTSettings,
)
from ataxxmatch.tournament import TournamentType


def test_as_time_sets_clock_fields():
    tc = SearchSettings.as_time(1000, 2000, 10, 20)
    assert tc.type is SearchType.TIME
    assert (tc.btime, tc.wtime, tc.binc, tc.winc) == (1000, 2000, 10, 20)


def test_as_movetime():
    tc = SearchSettings.as_movetime(50)
    assert tc.type is SearchType.MOVETIME
    assert tc.movetime == 50


def test_as_depth_and_nodes():
    assert SearchSettings.as_depth(3) == SearchSettings(type=SearchType.DEPTH, ply=3)
    assert SearchSettings.as_nodes(1000) == SearchSettings(type=SearchType.NODES, nodes=1000)


def test_str_formats():
    assert str(SearchSettings.as_depth(3)) == "depth 3"
    assert str(SearchSettings.as_nodes(1000)) == "nodes 1000"
    assert str(SearchSettings.as_movetime(50)) == "movetime 50ms"
    assert str(SearchSettings.as_time(1000, 2000, 10, 20)) == "1000+10ms"


def test_default_search_is_depth():
    assert SearchSettings().type is SearchType.DEPTH


def test_pgn_defaults():
    pgn = PGNSettings()
    assert pgn.path == "games.pgn"
    assert pgn.event == "*"
    assert (pgn.colour1, pgn.colour2) == ("black", "white")
    assert pgn.enabled and not pgn.verbose and not pgn.override


def test_sprt_defaults():
    sprt = SPRTSettings()
    assert not sprt.enabled and not sprt.autostop
    assert (sprt.alpha, sprt.beta, sprt.elo0, sprt.elo1) == (0.05, 0.05, 0.0, 5.0)


def test_adjudication_defaults_disabled():
    adjudication = AdjudicationSettings()
    assert adjudication.gamelength is None
    assert adjudication.material is None
    assert adjudication.easyfill is None
    assert adjudication.timeout_buffer == 0


def test_settings_defaults():
    settings = Settings()
    assert settings.ratinginterval == 10
    assert settings.concurrency == 1
    assert settings.num_games == 100
    assert settings.repeat and settings.print_early
    assert settings.tournament_type is TournamentType.ROUND_ROBIN
    assert settings.engines == []


def test_engine_settings_are_independent():
    first = EngineSettings()
    second = EngineSettings()
    first.options.append(("Hash", "16"))
    assert second.options == []
    assert first.proto is EngineProtocol.UNKNOWN