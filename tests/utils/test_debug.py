"""Tests for rname.utils.debug."""

import logging

import pytest

from rname.utils.debug import debug_enabled, setup_logger


def test_setup_logger_levels() -> None:
    """The debug flag switches the rname logger between DEBUG and INFO."""
    logger = setup_logger(debug=True)
    assert logger.name == "rname"
    assert logger.level == logging.DEBUG
    setup_logger(debug=False)
    assert logger.level == logging.INFO


def test_setup_logger_adds_one_handler() -> None:
    """Repeated setup does not stack handlers."""
    setup_logger()
    setup_logger()
    assert len(logging.getLogger("rname").handlers) == 1


def test_debug_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    """RNAME_DEBUG=1 enables debug logging without the flag."""
    assert not debug_enabled()
    monkeypatch.setenv("RNAME_DEBUG", "1")
    assert debug_enabled()
    assert setup_logger().level == logging.DEBUG
