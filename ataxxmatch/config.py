"""Reading match settings from a JSON document."""

from __future__ import annotations

import dataclasses
import json
import os
from collections.abc import Mapping
from typing import Any

from .settings import (
    EngineProtocol,
    EngineSettings,
    SearchSettings,
    SearchType,
    Settings,
)
from .tournament import TournamentType


class SettingsError(ValueError):
    """The settings are missing, malformed or inconsistent."""


_TOURNAMENTS = {
    "roundrobin": TournamentType.ROUND_ROBIN,
    "roundrobinmixed": TournamentType.ROUND_ROBIN_MIXED,
    "roundrobin-mixed": TournamentType.ROUND_ROBIN_MIXED,
    "roundrobin_mixed": TournamentType.ROUND_ROBIN_MIXED,
    "gauntlet": TournamentType.GAUNTLET,
}

_PROTOCOLS = {
    "UAI": EngineProtocol.UAI,
    "uai": EngineProtocol.UAI,
    "FSF": EngineProtocol.FSF,
    "fsf": EngineProtocol.FSF,
    "KATAGO": EngineProtocol.KATAGO,
    "KataGo": EngineProtocol.KATAGO,
    "katago": EngineProtocol.KATAGO,
}


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, (int, float)):
        return int(value)
    raise SettingsError(f"Setting '{key}' must be a number")


def _as_float(value: Any, key: str) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise SettingsError(f"Setting '{key}' must be a number")


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    raise SettingsError(f"Setting '{key}' must be a boolean")


def _as_str(value: Any, key: str) -> str:
    if isinstance(value, str):
        return value
    raise SettingsError(f"Setting '{key}' must be a string")


def _as_object(value: Any, key: str) -> Mapping[str, Any]:
    if isinstance(value, Mapping):
        return value
    raise SettingsError(f"Setting '{key}' must be an object")


def _apply_timecontrol(tc: SearchSettings, data: Mapping[str, Any]) -> None:
    for key, val in data.items():
        if key == "movetime":
            tc.type = SearchType.MOVETIME
            tc.movetime = _as_int(val, key)
        elif key == "nodes":
            tc.type = SearchType.NODES
            tc.nodes = _as_int(val, key)
        elif key == "time":
            tc.type = SearchType.TIME
            tc.btime = tc.wtime = _as_int(val, key)
        elif key in ("increment", "inc"):
            tc.type = SearchType.TIME
            tc.binc = tc.winc = _as_int(val, key)
        elif key == "depth":
            tc.type = SearchType.DEPTH
            tc.ply = _as_int(val, key)


def _apply_section(settings: Settings, key: str, value: Any, options: list[tuple[str, str]]) -> None:
    if key == "games":
        settings.num_games = _as_int(value, key)
    elif key == "ratinginterval":
        settings.ratinginterval = _as_int(value, key)
    elif key == "concurrency":
        settings.concurrency = _as_int(value, key)
    elif key == "colour1":
        settings.pgn.colour1 = _as_str(value, key)
    elif key == "colour2":
        settings.pgn.colour2 = _as_str(value, key)
    elif key == "debug":
        settings.debug = _as_bool(value, key)
    elif key == "verbose":
        settings.verbose = _as_bool(value, key)
    elif key == "print_early":
        settings.print_early = _as_bool(value, key)
    elif key == "tournament":
        name = _as_str(value, key)
        settings.tournament_type = _TOURNAMENTS.get(name, settings.tournament_type)
    elif key == "adjudicate":
        adjudication = settings.adjudication
        for sub, val in _as_object(value, key).items():
            if sub == "material":
                adjudication.material = _as_int(val, sub)
            elif sub == "easyfill":
                adjudication.easyfill = _as_bool(val, sub)
            elif sub == "gamelength":
                adjudication.gamelength = _as_int(val, sub)
            elif sub == "timeout_buffer":
                adjudication.timeout_buffer = _as_int(val, sub)
    elif key == "openings":
        for sub, val in _as_object(value, key).items():
            if sub == "path":
                settings.openings_path = _as_str(val, sub)
            elif sub == "repeat":
                settings.repeat = _as_bool(val, sub)
            elif sub == "shuffle":
                settings.shuffle = _as_bool(val, sub)
    elif key == "timecontrol":
        _apply_timecontrol(settings.tc, _as_object(value, key))
    elif key == "pgn":
        pgn = settings.pgn
        for sub, val in _as_object(value, key).items():
            if sub == "enabled":
                pgn.enabled = _as_bool(val, sub)
            elif sub == "verbose":
                pgn.verbose = _as_bool(val, sub)
            elif sub == "override":
                pgn.override = _as_bool(val, sub)
            elif sub == "path":
                pgn.path = _as_str(val, sub)
            elif sub == "event":
                pgn.event = _as_str(val, sub)
    elif key == "sprt":
        sprt = settings.sprt
        for sub, val in _as_object(value, key).items():
            if sub == "enabled":
                sprt.enabled = _as_bool(val, sub)
            elif sub == "autostop":
                sprt.autostop = _as_bool(val, sub)
            elif sub == "confidence":
                sprt.alpha = sprt.beta = 1.0 - _as_float(val, sub)
            elif sub == "alpha":
                sprt.alpha = _as_float(val, sub)
            elif sub == "beta":
                sprt.beta = _as_float(val, sub)
            elif sub == "elo0":
                sprt.elo0 = _as_float(val, sub)
            elif sub == "elo1":
                sprt.elo1 = _as_float(val, sub)
    elif key == "options":
        for sub, val in _as_object(value, key).items():
            options.append((sub, _as_str(val, sub)))


def _parse_engine(
    data: Mapping[str, Any],
    engine_id: int,
    tc: SearchSettings,
    options: list[tuple[str, str]],
) -> EngineSettings:
    details = EngineSettings(id=engine_id, tc=dataclasses.replace(tc), options=list(options))

    for key, value in data.items():
        if key == "path":
            details.path = _as_str(value, key)
        elif key == "protocol":
            details.proto = _PROTOCOLS.get(_as_str(value, key), details.proto)
        elif key == "name":
            details.name = _as_str(value, key)
        elif key == "builtin":
            details.builtin = _as_str(value, key)
        elif key == "arguments":
            details.arguments = _as_str(value, key)
        elif key == "options":
            for name, val in _as_object(value, key).items():
                text = _as_str(val, name)
                for position, (existing, _) in enumerate(details.options):
                    if existing == name:
                        del details.options[position]
                        break
                details.options.append((name, text))
        elif key == "timecontrol":
            _apply_timecontrol(details.tc, _as_object(value, key))

    # The path doubles as a name when none is given.
    if not details.name:
        details.name = details.path

    return details


def parse_settings(data: Mapping[str, Any]) -> Settings:
    """Build match settings from a decoded JSON object and check them."""
    if not isinstance(data, Mapping):
        raise SettingsError("Settings must be a JSON object")
    if "engines" not in data:
        raise SettingsError("Engines not found")

    settings = Settings()
    settings.tc = SearchSettings.as_movetime(10)
    options: list[tuple[str, str]] = []

    for key, value in data.items():
        _apply_section(settings, key, value, options)

    engines = data["engines"]
    if isinstance(engines, Mapping):
        engines = list(engines.values())
    if not isinstance(engines, list):
        raise SettingsError("Setting 'engines' must be a list")

    for entry in engines:
        engine = _parse_engine(
            _as_object(entry, "engines"), len(settings.engines), settings.tc, options
        )
        settings.engines.append(engine)

    if not os.path.exists(settings.openings_path):
        raise SettingsError(f"Openings path not found: '{settings.openings_path}'")

    for engine in settings.engines:
        if engine.builtin:
            continue
        if not os.path.exists(engine.path):
            raise SettingsError(f"Engine path not found: '{engine.path}'")
        if engine.proto is EngineProtocol.UNKNOWN:
            raise SettingsError("Unrecognised engine protocol")

    if len(settings.engines) < 2:
        raise SettingsError("Must be at least 2 engines")
    if settings.concurrency < 1:
        raise SettingsError("Must be at least 1 thread")

    return settings


def load_settings(path: str | os.PathLike[str]) -> Settings:
    """Read and check match settings from a JSON file."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise SettingsError(f"Could not open settings file {os.fspath(path)}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SettingsError("Failure parsing .json") from exc
    return parse_settings(data)