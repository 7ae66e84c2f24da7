# topmark:header:start
#
#   project      : Printkit
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging configuration: TRACE level, env resolution, colored formatting."""

from __future__ import annotations

import logging

import pytest

from printkit.config import logging as pk_logging
from printkit.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    PrintkitLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from printkit.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("FATAL", logging.CRITICAL),
        ("15", 15),
        ("nonsense", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """Level names (any case) and numbers are honored; unknown names are ignored."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """Without the variable there is no override (the autouse fixture clears it)."""
    assert resolve_env_log_level() is None


def test_setup_logging_honors_notset_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """An explicit NOTSET (or 0) level is kept rather than replaced by the default."""
    root = logging.getLogger()
    saved_level = root.level
    saved_handlers = root.handlers[:]
    try:
        for value in ("NOTSET", "0"):
            monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
            setup_logging()
            assert root.level == logging.NOTSET
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_get_logger_returns_printkit_logger() -> None:
    """Library loggers support `.trace()`."""
    logger = get_logger("printkit.tests.sample")
    assert isinstance(logger, PrintkitLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_trace_is_emitted_at_trace_level(caplog: pytest.LogCaptureFixture) -> None:
    """`.trace()` records use the TRACE level."""
    logger = get_logger("printkit.tests.trace")
    with caplog.at_level(TRACE_LEVEL, logger="printkit.tests.trace"):
        logger.trace("hello %s", "trace")
    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [(TRACE_LEVEL, "hello trace")]


def test_setup_logging_uses_env_and_single_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    """`setup_logging()` reads the env level and never stacks handlers."""
    root = logging.getLogger()
    saved_level = root.level
    saved_handlers = root.handlers[:]
    try:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "INFO")
        setup_logging()
        setup_logging()
        assert root.level == logging.INFO
        chalk_handlers = [h for h in root.handlers if isinstance(h.formatter, ChalkFormatter)]
        assert len(chalk_handlers) == 1
        assert chalk_handlers[0].formatter is not None
        assert chalk_handlers[0].formatter._fmt == pk_logging.LOG_FORMAT  # type: ignore[union-attr]
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_chalk_formatter_keeps_message_text() -> None:
    """Coloring wraps, but never alters, the formatted message."""
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom %d", (1,), None)
    out = ChalkFormatter(pk_logging.LOG_FORMAT).format(record)
    assert "[ERROR] boom 1" in out
