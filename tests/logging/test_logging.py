"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from aspectgraph.logging import (
    LOG_LEVEL_ENV,
    cli_log_level,
    configure_cli_logging,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    level_from_env,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)
from aspectgraph.solver import ResearchSolver


@pytest.fixture(autouse=True)
def _reset_logging_each_test(monkeypatch):
    """Reset logging state before and after each test to avoid cross-test bleed."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("aspectgraph.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.removeHandler(handler)


def test_global_level_propagates_to_children_and_new_loggers():
    logger1 = get_logger("aspectgraph.solver")
    logger2 = get_logger("aspectgraph.model.loader")

    assert logger1.getEffectiveLevel() == logging.INFO
    assert logger2.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING

    logger3 = get_logger("aspectgraph.planning")
    assert logger3.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger("aspectgraph")
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1

    set_global_log_level(logging.ERROR)
    assert root_logger.level == logging.ERROR


def test_custom_format_string_applied():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=handler)

    logger = get_logger("aspectgraph.test.format")
    logger.info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:aspectgraph.test.format" in out
    assert "MSG:hello" in out


def test_solver_debug_messages(energy_recipes):
    """Building and searching emit debug records once debug logging is on."""
    capture = StringIO()
    setup_root_logger(level=logging.DEBUG, handler=logging.StreamHandler(capture))

    solver = ResearchSolver.build(energy_recipes)
    solver.solve("fire", "air", 2)
    solver.solve("fire", "air", 1)

    out = capture.getvalue()
    assert "Built connection graph: 3 nodes, 2 edges" in out
    assert "Solved fire -> air in 2 steps" in out
    assert "No 1-step walk from fire to air" in out


@pytest.mark.parametrize(
    "value, expected",
    [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        (" error ", logging.ERROR),
        ("chatty", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_level_from_env(monkeypatch, value, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV, value)
    assert level_from_env() == expected


def test_env_level_applied_on_setup(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "WARNING")
    reset_logging()
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    assert get_logger("aspectgraph.solver").getEffectiveLevel() == logging.WARNING


def test_explicit_level_overrides_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    setup_root_logger(level=logging.DEBUG, handler=logging.StreamHandler(StringIO()))
    assert logging.getLogger("aspectgraph").level == logging.DEBUG


def test_cli_log_level_flags(monkeypatch):
    assert cli_log_level(verbose=True) == logging.DEBUG
    assert cli_log_level(quiet=True) == logging.WARNING
    assert cli_log_level(verbose=True, quiet=True) == logging.DEBUG
    assert cli_log_level() == logging.INFO

    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    assert cli_log_level() == logging.ERROR


def test_configure_cli_logging_sets_global_level():
    assert configure_cli_logging(quiet=True) == logging.WARNING
    assert get_logger("aspectgraph.cli").getEffectiveLevel() == logging.WARNING
