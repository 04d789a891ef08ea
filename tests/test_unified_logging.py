"""
Tests for unified log formatting.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import io
import logging

from gpg_keytag.logging import (
    UnifiedFormatter,
    configure_cli_logging,
    create_unified_formatter,
    importance_from_level,
)


def _record(level: int, msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("gpg_keytag.test", level, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestImportance:
    """Tests for importance mapping."""

    def test_known_levels(self):
        """Test standard levels map to importance."""
        assert importance_from_level("DEBUG") == 2
        assert importance_from_level("warning") == 6
        assert importance_from_level("CRITICAL") == 10

    def test_unknown_level(self):
        """Test unknown names default to 4."""
        assert importance_from_level("") == 4
        assert importance_from_level(None) == 4


class TestUnifiedFormatter:
    """Tests for UnifiedFormatter."""

    def test_format_includes_importance(self):
        """Test level-derived importance is rendered."""
        formatter = create_unified_formatter()
        line = formatter.format(_record(logging.ERROR, "boom"))
        assert isinstance(formatter, UnifiedFormatter)
        assert line.endswith("| ERROR    | 8 | boom")

    def test_explicit_importance_kept(self):
        """Test importance passed via extra wins."""
        formatter = create_unified_formatter()
        line = formatter.format(_record(logging.INFO, "hi", importance=9))
        assert line.endswith("| INFO     | 9 | hi")


class TestConfigureCliLogging:
    """Tests for configure_cli_logging."""

    def test_writes_to_stream(self):
        """Test package loggers reach the configured stream."""
        stream = io.StringIO()
        configure_cli_logging("INFO", stream=stream)
        logging.getLogger("gpg_keytag.core.fields").info("hello")
        logging.getLogger("gpg_keytag.core.fields").debug("hidden")
        output = stream.getvalue()
        assert "| INFO     | 4 | hello" in output
        assert "hidden" not in output

    def test_repeat_calls_replace_handler(self):
        """Test handlers do not stack across invocations."""
        first = io.StringIO()
        second = io.StringIO()
        configure_cli_logging("INFO", stream=first)
        pkg_logger = configure_cli_logging("DEBUG", stream=second)
        pkg_logger.debug("once")
        assert len(pkg_logger.handlers) == 1
        assert first.getvalue() == ""
        assert second.getvalue().count("once") == 1
