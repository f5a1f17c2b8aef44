import logging

import pytest

from sccgraph import config


def test_traversal_defaults_to_iterative(monkeypatch):
    monkeypatch.delenv(config._TRAVERSAL_ENV, raising=False)
    assert config.resolve_traversal() == config.DEFAULT_TRAVERSAL == "iterative"


def test_traversal_preference_beats_env(monkeypatch):
    monkeypatch.setenv(config._TRAVERSAL_ENV, " Recursive ")
    assert config.resolve_traversal() == "recursive"
    assert config.resolve_traversal("ITERATIVE") == "iterative"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("yes", True), ("true", True), ("0", False), ("no", False), ("", False), ("maybe", False)],
)
def test_check_invariants_flag(monkeypatch, raw, expected):
    monkeypatch.setenv(config._CHECK_INVARIANTS_ENV, raw)
    assert config.check_invariants_enabled() is expected


def test_check_invariants_off_by_default(monkeypatch):
    monkeypatch.delenv(config._CHECK_INVARIANTS_ENV, raising=False)
    assert config.check_invariants_enabled() is False


def test_log_level_resolution(monkeypatch):
    monkeypatch.delenv(config._LOG_LEVEL_ENV, raising=False)
    assert config.resolve_log_level() == logging.WARNING
    assert config.resolve_log_level("debug") == logging.DEBUG
    monkeypatch.setenv(config._LOG_LEVEL_ENV, "info")
    assert config.resolve_log_level() == logging.INFO


def test_unknown_log_level(monkeypatch):
    with pytest.raises(ValueError):
        config.resolve_log_level("chatty")
