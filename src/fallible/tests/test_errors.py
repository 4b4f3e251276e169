"""Tests for location-tagged errors, settings and logging setup."""

from __future__ import annotations

import logging
import sys

import pytest
from pydantic import ValidationError

from fallible import ResultError, configure_logging, error, get_settings


# ═════════════════════════════════════════════════════════════════════════════
# error() / ResultError
# ═════════════════════════════════════════════════════════════════════════════


def test_errors_include_the_calling_function() -> None:
    assert error().function == "test_errors_include_the_calling_function"


def test_errors_include_the_source_file() -> None:
    assert error().file == __file__


def test_errors_include_the_source_line() -> None:
    line, made = sys._getframe().f_lineno, error()
    assert made.line == line


def test_error_message_and_overrides() -> None:
    made = error("disk full", function="save", file="store.py", line=12, code=28)
    assert made.message == "disk full"
    assert made.code == 28
    assert str(made) == "disk full (store.py:12 in save)"


def test_error_domain_defaults_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    assert error().domain == "fallible"
    monkeypatch.setenv("FALLIBLE_ERROR_DOMAIN", "billing")
    from fallible.config import clear_settings_cache

    clear_settings_cache()
    assert error().domain == "billing"


def test_result_error_is_frozen() -> None:
    made = error("x")
    with pytest.raises(ValidationError):
        made.message = "y"  # type: ignore[misc]


def test_str_without_message_or_location() -> None:
    assert str(ResultError(code=3)) == "fallible error 3"


def test_from_exception_points_at_raise_site() -> None:
    def explode() -> None:
        raise RuntimeError("kaput")

    try:
        explode()
    except RuntimeError as exc:
        made = ResultError.from_exception(exc)

    assert made.message == "kaput"
    assert made.function == "explode"
    assert made.file == __file__
    assert made.details is None


def test_from_exception_captures_traceback_when_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE_CAPTURE_TRACEBACK", "true")
    try:
        raise KeyError("k")
    except KeyError as exc:
        made = ResultError.from_exception(exc)
    assert made.details is not None
    assert "KeyError" in made.details


def test_from_exception_without_message_uses_type_name() -> None:
    assert ResultError.from_exception(ValueError()).message == "ValueError"


# ═════════════════════════════════════════════════════════════════════════════
# Settings & logging
# ═════════════════════════════════════════════════════════════════════════════


def test_settings_defaults() -> None:
    settings = get_settings()
    assert settings.error_domain == "fallible"
    assert settings.capture_traceback is False
    assert settings.logging.level == "WARNING"
    assert settings.logging.log_captured is True
    assert get_settings() is settings


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "debug")
    monkeypatch.setenv("FALLIBLE_CAPTURE_TRACEBACK", "1")
    settings = get_settings()
    assert settings.logging.level == "DEBUG"
    assert settings.capture_traceback is True


def test_configure_logging_applies_level(monkeypatch: pytest.MonkeyPatch) -> None:
    logger = logging.getLogger("fallible")
    previous = logger.level
    monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "ERROR")
    try:
        assert configure_logging() is logger
        assert logger.level == logging.ERROR
    finally:
        logger.setLevel(previous)
