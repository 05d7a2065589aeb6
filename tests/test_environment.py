import logging

import pytest

from PyMoji import logger as logger_module
from PyMoji.environment import get_bool, get_int
from PyMoji.logger import get_logger, logging_handler, setup_sentry


@pytest.mark.parametrize("value, expected", [("true", True), ("YES", True), ("1", True), ("no", False), ("0", False)])
def test_get_bool(monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
    monkeypatch.setenv("PYMOJI_TEST_BOOL", value)

    assert get_bool("PYMOJI_TEST_BOOL", not expected) == expected


def test_get_bool_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PYMOJI_TEST_BOOL", raising=False)

    assert get_bool("PYMOJI_TEST_BOOL", True)


@pytest.mark.parametrize("value, expected", [("5", 5), ("-2", 0), ("abc", 3), ("", 3)])
def test_get_int(monkeypatch: pytest.MonkeyPatch, value: str, expected: int) -> None:
    monkeypatch.setenv("PYMOJI_TEST_INT", value)

    assert get_int("PYMOJI_TEST_INT", 3) == expected


def test_get_int_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PYMOJI_TEST_INT", raising=False)

    assert get_int("PYMOJI_TEST_INT", 32, minimum=1) == 32


def test_get_logger() -> None:
    logger = get_logger("PyMoji.test")
    get_logger("PyMoji.test")

    assert isinstance(logger, logging.Logger)
    assert logger.handlers.count(logging_handler) == 1


def test_setup_sentry_without_dsn(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(logger_module, "SENTRY_DSN", None)
    monkeypatch.setattr(logger_module.sentry_sdk, "init", lambda **kwargs: calls.append(kwargs))

    assert not setup_sentry(None, "chat", "1.0.0")
    assert calls == []


def test_setup_sentry(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(logger_module.sentry_sdk, "init", lambda **kwargs: calls.append(kwargs))

    assert setup_sentry("https://key@sentry.example.com/1", "chat", "1.0.0")
    [kwargs] = calls
    assert kwargs["dsn"] == "https://key@sentry.example.com/1"
    assert kwargs["release"] == "chat@1.0.0"
