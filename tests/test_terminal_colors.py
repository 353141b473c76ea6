"""Tests for terminal color utilities and the console log formatter."""

import io
import logging

from sitefold.console import ColorFormatter, setup_logging
from sitefold.environment import terminal


class TestColorDetection:
    """Test terminal color detection logic."""

    def test_no_color_disables(self, monkeypatch):
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        monkeypatch.setenv("NO_COLOR", "1")
        assert terminal._should_use_colors() is False

    def test_force_color_overrides_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert terminal._should_use_colors() is True

    def test_supports_color_reads_cached_value(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        assert not terminal.supports_color()

    def test_colorize_returns_plain_when_disabled(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        assert terminal.colorize("Warning", "yellow", "bold") == "Warning"

    def test_colorize_adds_codes_when_enabled(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        result = terminal.colorize("Warning", "yellow", "bold")
        assert "\033[33m" in result
        assert "\033[1m" in result
        assert result.endswith("\033[0m")

    def test_strip_colors_removes_ansi_codes(self):
        assert terminal.strip_colors("\033[31m\033[1mError\033[0m") == "Error"


class TestSemanticHelpers:
    def test_error_header_with_code(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        header = terminal.format_error_header("S-TPL-001", "missing")
        assert "\033[91m" in header
        assert terminal.strip_colors(header) == "S-TPL-001: missing"

    def test_error_header_without_code(self):
        assert terminal.format_error_header(None, "missing") == "missing"

    def test_warning_and_success_plain(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        assert terminal.warning("w") == "w"
        assert terminal.success("s") == "s"


class TestConsoleLogging:
    def _record(self, level: int, msg: str) -> logging.LogRecord:
        return logging.LogRecord("sitefold.test", level, __file__, 1, msg, None, None)

    def test_formatter_prefixes(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        fmt = ColorFormatter("%(message)s")
        assert fmt.format(self._record(logging.WARNING, "w")) == "Warning: w"
        assert fmt.format(self._record(logging.ERROR, "e")) == "Error: e"
        assert fmt.format(self._record(logging.INFO, "i")) == "i"

    def test_setup_logging_does_not_stack_handlers(self):
        stream = io.StringIO()
        setup_logging(logging.INFO, stream)
        logger = setup_logging(logging.INFO, stream)
        assert len([h for h in logger.handlers if h.get_name() == "sitefold-console"]) == 1

    def test_setup_logging_level(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        stream = io.StringIO()
        setup_logging(logging.WARNING, stream)
        logging.getLogger("sitefold.build").info("hidden")
        logging.getLogger("sitefold.build").warning("shown")
        assert stream.getvalue() == "Warning: shown\n"
