from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_float, env_int, env_str
from common.logging import setup_default_logging


def test_env_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SFX_TEST_INT", raising=False)
    assert env_int("SFX_TEST_INT", 7) == 7
    monkeypatch.setenv("SFX_TEST_INT", "12")
    assert env_int("SFX_TEST_INT", 7) == 12
    monkeypatch.setenv("SFX_TEST_INT", "1")
    assert env_int("SFX_TEST_INT", 7, min_value=3) == 3
    monkeypatch.setenv("SFX_TEST_INT", "abc")
    assert env_int("SFX_TEST_INT", 7) == 7


def test_env_float_rejects_non_finite(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SFX_TEST_FLOAT", "0.25")
    assert env_float("SFX_TEST_FLOAT", 0.15) == 0.25
    for raw in ("nan", "inf", "-inf", "x"):
        monkeypatch.setenv("SFX_TEST_FLOAT", raw)
        assert env_float("SFX_TEST_FLOAT", 0.15) == 0.15
    monkeypatch.setenv("SFX_TEST_FLOAT", "-3")
    assert env_float("SFX_TEST_FLOAT", 1.0, min_value=0.0) == 0.0


def test_env_bool_and_str(monkeypatch: pytest.MonkeyPatch) -> None:
    for raw, expected in (("1", True), ("0", False), ("yes", True), ("off", False)):
        monkeypatch.setenv("SFX_TEST_BOOL", raw)
        assert env_bool("SFX_TEST_BOOL") is expected
    monkeypatch.setenv("SFX_TEST_BOOL", "maybe")
    assert env_bool("SFX_TEST_BOOL", True) is True
    monkeypatch.setenv("SFX_TEST_STR", "   ")
    assert env_str("SFX_TEST_STR", "INFO") == "INFO"
    monkeypatch.setenv("SFX_TEST_STR", " debug ")
    assert env_str("SFX_TEST_STR", "INFO") == "debug"


def test_settings_defaults(clean_settings) -> None:
    s = settings.get()
    assert s.PRIMITIVE_SIZE == 50.0
    assert s.SPHERE_SEGMENTS == 16
    assert s.ROUND_SEGMENTS == 16
    assert s.VOLUME_GRID == 12
    assert s.CULL_EPSILON == 0.15
    assert s.LOG_LEVEL == "INFO"


def test_settings_reload_from_env(clean_settings, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SFX_SPHERE_SEGMENTS", "8")
    monkeypatch.setenv("SFX_VOLUME_GRID", "1")
    monkeypatch.setenv("SFX_CULL_EPSILON", "0.05")
    settings.reload_from_env()
    s = settings.get()
    assert s.SPHERE_SEGMENTS == 8
    assert s.VOLUME_GRID == 2
    assert s.CULL_EPSILON == 0.05


def test_setup_default_logging_is_noop_when_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        before = list(root.handlers)
        level = root.level
        setup_default_logging("DEBUG")
        assert root.handlers == before
        assert root.level == level
    finally:
        root.removeHandler(handler)


def test_log_level_names_resolve(clean_settings) -> None:
    from common.logging import _resolve_level

    assert _resolve_level("debug") == logging.DEBUG
    assert _resolve_level(logging.WARNING) == logging.WARNING
    assert _resolve_level("chatty") == logging.INFO
    assert _resolve_level(None) == logging.INFO
