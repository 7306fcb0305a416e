#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the host logging helpers."""

import logging

import pytest

from scribex.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, reset_logging
from scribex.utils.html_sanitizer import sanitize_html


@pytest.fixture
def package_logger():
    """Provide the package logger and undo any configuration afterwards."""
    yield logging.getLogger(PACKAGE_LOGGER_NAME)
    reset_logging()


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_scoped_to_package_logger(self, package_logger):
        """Handlers go on the scribex logger; the root logger is untouched."""
        root = logging.getLogger()
        root_handlers = list(root.handlers)

        configured = configure_logging(logging.DEBUG)

        assert configured is package_logger
        assert configured.level == logging.DEBUG
        assert not configured.propagate
        assert [type(h) for h in configured.handlers] == [logging.StreamHandler]
        assert root.handlers == root_handlers

    def test_level_names(self, package_logger):
        """Level names are accepted; unknown names fall back to INFO."""
        assert configure_logging("warning").level == logging.WARNING
        assert configure_logging("chatty").level == logging.INFO

    def test_repeated_calls_replace_handlers(self, package_logger):
        """Configuring twice does not duplicate output."""
        configure_logging(logging.INFO)
        configure_logging(logging.INFO)
        assert len(package_logger.handlers) == 1

    def test_foreign_handlers_kept(self, package_logger):
        """Handlers a host attached itself survive reconfiguration and reset."""
        own = logging.NullHandler()
        package_logger.addHandler(own)
        try:
            configure_logging(logging.INFO)
            reset_logging()
            assert package_logger.handlers == [own]
        finally:
            package_logger.removeHandler(own)

    def test_trace_format_names_module(self, package_logger):
        """Trace mode includes the emitting logger name."""
        configured = configure_logging(logging.INFO, trace_mode=True)
        assert "%(name)s" in configured.handlers[0].formatter._fmt

    def test_sanitizer_records_reach_file(self, package_logger, tmp_path):
        """Debug records from library modules are written to the log file."""
        log_file = tmp_path / "scribex.log"
        configure_logging(logging.DEBUG, log_file=str(log_file))

        sanitize_html("<p>ok</p><script>bad()</script>")
        for handler in package_logger.handlers:
            handler.flush()

        assert "Stripping <script>" in log_file.read_text(encoding="utf-8")

    def test_unwritable_file(self, package_logger, tmp_path):
        """A bad log path keeps console logging working."""
        configured = configure_logging(logging.INFO, log_file=str(tmp_path / "missing" / "scribex.log"))
        assert len(configured.handlers) == 1

    def test_reset(self, package_logger):
        """reset_logging restores the unconfigured state."""
        configure_logging(logging.DEBUG)
        reset_logging()
        assert package_logger.handlers == []
        assert package_logger.level == logging.NOTSET
        assert package_logger.propagate
