"""Tests for logging setup."""

import logging

import pytest

from tablecopy.core.logging import get_logger, resolve_level, setup_logging


@pytest.mark.unit
class TestSetupLogging:
    def test_setup_without_errors(self):
        setup_logging()

    def test_setup_verbose(self):
        setup_logging(verbose=True)

    def test_setup_quiet(self):
        setup_logging(quiet=True)


@pytest.mark.unit
class TestResolveLevel:
    def test_default_is_info(self):
        assert resolve_level() == logging.INFO

    def test_verbose_is_debug(self):
        assert resolve_level(verbose=True) == logging.DEBUG

    def test_quiet_is_warning(self):
        assert resolve_level(quiet=True) == logging.WARNING

    def test_verbose_wins_over_quiet(self):
        assert resolve_level(verbose=True, quiet=True) == logging.DEBUG


@pytest.mark.unit
class TestGetLogger:
    def test_get_logger_without_name(self):
        setup_logging()
        assert get_logger() is not None

    def test_get_logger_with_name(self):
        setup_logging()
        assert get_logger("export") is not None


@pytest.mark.unit
class TestLogOutput:
    def test_log_to_stderr(self, capsys):
        """Log output goes to stderr, not stdout."""
        setup_logging(verbose=True)
        log = get_logger()
        log.info("test message")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "test message" in captured.err

    def test_quiet_suppresses_info(self, capsys):
        setup_logging(quiet=True)
        get_logger().info("hidden message")

        captured = capsys.readouterr()
        assert "hidden message" not in captured.err
