"""Tests for logging setup."""

import json
import logging

import pytest
import structlog

import allrecipes_finder.observability.logging as logging_mod
from allrecipes_finder.observability import get_logger, setup_logging


@pytest.fixture
def fresh_logging(monkeypatch):
    """Allow setup_logging to run again and restore global logging afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    monkeypatch.setattr(logging_mod, "_configured", False)
    yield
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    logging_mod.configure_library_defaults()


def test_json_logs_go_to_stderr(fresh_logging, capsys):
    """Log lines are JSON on stderr; stdout stays clean for events."""
    setup_logging("INFO")
    get_logger("allrecipes_finder.test").info("agent_stream_started", run_id="abc123")

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["event"] == "agent_stream_started"
    assert record["run_id"] == "abc123"
    assert record["level"] == "info"


def test_level_filters_debug(fresh_logging, capsys):
    setup_logging("WARNING")
    get_logger("allrecipes_finder.test").info("hidden")
    assert "hidden" not in capsys.readouterr().err


def test_noisy_loggers_quieted(fresh_logging):
    setup_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("claude_agent_sdk").level == logging.WARNING


def test_setup_is_idempotent(fresh_logging):
    setup_logging("INFO")
    handlers = logging.getLogger().handlers[:]
    setup_logging("DEBUG")
    assert logging.getLogger().handlers == handlers
    assert logging.getLogger().level == logging.INFO
