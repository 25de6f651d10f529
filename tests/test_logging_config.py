"""Tests for logging setup."""

import logging
import unittest
from unittest.mock import patch

import pytest

from influxtemplate.logging_config import CLIENT_LOGGERS, configure_logging, parse_level


@pytest.fixture(autouse=True)
def restore_logging():
    """Put root handlers and client logger levels back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    client_levels = {name: logging.getLogger(name).level for name in CLIENT_LOGGERS}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, client_level in client_levels.items():
        logging.getLogger(name).setLevel(client_level)


class TestParseLevel(unittest.TestCase):
    """Test conversion of level names to numeric levels."""

    def test_names_case_insensitive(self):
        """Test that level names are accepted in any case."""
        self.assertEqual(parse_level("debug"), logging.DEBUG)
        self.assertEqual(parse_level(" Warning "), logging.WARNING)

    def test_numeric_passthrough(self):
        """Test that numeric levels are returned unchanged."""
        self.assertEqual(parse_level(logging.ERROR), logging.ERROR)

    def test_unknown_name_rejected(self):
        """Test that an unknown level name raises ValueError."""
        with self.assertRaises(ValueError):
            parse_level("chatty")


def test_handlers_split_by_level() -> None:
    """Test that warnings go to the stdout handler and errors to the stderr handler."""
    configure_logging("INFO")
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 2

    stdout_handler, stderr_handler = root.handlers
    warning = logging.LogRecord("t", logging.WARNING, __file__, 1, "w", None, None)
    error = logging.LogRecord("t", logging.ERROR, __file__, 1, "e", None, None)
    assert stdout_handler.filter(warning)
    assert not stdout_handler.filter(error)
    assert stderr_handler.level == logging.ERROR


def test_client_loggers_quieted_above_debug() -> None:
    """Test that HTTP client loggers are held at WARNING outside debug mode."""
    configure_logging(logging.INFO)
    for name in CLIENT_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING

    configure_logging(logging.DEBUG)
    for name in CLIENT_LOGGERS:
        assert logging.getLogger(name).level == logging.NOTSET


def test_reconfigure_replaces_handlers() -> None:
    """Test that repeated configuration does not stack handlers."""
    configure_logging()
    configure_logging()
    assert len(logging.getLogger().handlers) == 2


def test_cli_rejects_unknown_log_level() -> None:
    """Test that the CLI exits with a usage error for an unknown --log-level."""
    from influxtemplate import main as cli

    with patch("influxtemplate.main.run") as mock_run:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--log-level", "chatty", "ping"])
    assert exc_info.value.code == 2
    mock_run.assert_not_called()
