from __future__ import annotations

from typing import Any

import pytest

from pyflatset.config import MatchConfig
from pyflatset.exceptions import FlatSetConfigError


def test_defaults() -> None:
    cfg = MatchConfig()
    assert cfg.sentinel == "*"
    assert cfg.separator == "."
    assert cfg.log_max_string == 512


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYFLATSET_SENTINEL", "#")
    monkeypatch.setenv("PYFLATSET_SEPARATOR", "/")
    monkeypatch.setenv("PYFLATSET_LOG_MAX_STRING", "64")
    cfg = MatchConfig.from_env()
    assert cfg == MatchConfig(sentinel="#", separator="/", log_max_string=64)


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYFLATSET_SENTINEL", "#")
    monkeypatch.setenv("PYFLATSET_LOG_MAX_STRING", "64")
    cfg = MatchConfig.from_env(sentinel="?", log_max_string=8)
    assert cfg.sentinel == "?"
    assert cfg.log_max_string == 8


def test_from_env_rejects_bad_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYFLATSET_LOG_MAX_STRING", "lots")
    with pytest.raises(FlatSetConfigError):
        MatchConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"sentinel": ""},
        {"separator": ""},
        {"sentinel": ".", "separator": "."},
        {"log_max_string": 0},
        {"log_max_string": -5},
    ],
)
def test_invalid_config(kwargs: dict[str, Any]) -> None:
    with pytest.raises(FlatSetConfigError):
        MatchConfig(**kwargs)
