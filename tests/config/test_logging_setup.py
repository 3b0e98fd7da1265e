# topmark:header:start
#
#   project      : OptBind
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the logging helpers."""

from __future__ import annotations

import logging

import pytest

from optbind.config.logging import (
    ENV_LOG_LEVEL,
    TRACE_LEVEL,
    ChalkFormatter,
    OptbindLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        ("trace", TRACE_LEVEL),
        ("20", 20),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None) -> None:
    monkeypatch.setenv(ENV_LOG_LEVEL, raw)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_setup_logging_installs_one_handler() -> None:
    setup_logging(level=logging.INFO)
    setup_logging(level=logging.INFO)

    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ChalkFormatter)


def test_setup_logging_uses_env_when_level_omitted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_LOG_LEVEL, "ERROR")
    setup_logging()
    assert logging.getLogger().level == logging.ERROR


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger: OptbindLogger = get_logger("optbind.test")
    assert isinstance(logger, OptbindLogger)

    with caplog.at_level(TRACE_LEVEL):
        logger.trace("hello %s", "trace")
    assert any(r.levelno == TRACE_LEVEL and r.getMessage() == "hello trace" for r in caplog.records)


def test_chalk_formatter_keeps_message() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert "careful" in ChalkFormatter("%(message)s").format(record)


@parametrize("raw", ["0", "NOTSET"])
def test_setup_logging_honors_notset_env(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    """An explicit level 0 from the environment is kept, not replaced by the default."""
    monkeypatch.setenv(ENV_LOG_LEVEL, raw)
    setup_logging()
    assert logging.getLogger().level == logging.NOTSET
