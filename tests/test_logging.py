"""Tests for structured logging."""

from __future__ import annotations

import json
from io import StringIO
from unittest.mock import AsyncMock, MagicMock

import pytest

from interview_solver.logging import add_logger_name, configure_logging, get_logger
from interview_solver.solver import ScreenshotSolver


def read_lines(output: StringIO) -> list[dict]:
    """Parse every JSON log line written to ``output``."""
    return [json.loads(line) for line in output.getvalue().splitlines() if line.strip()]


class TestLoggingConfig:
    """Test suite for logging configuration."""

    def test_logger_outputs_json_format(self):
        """Logger should output JSON format by default."""
        # Given
        output = StringIO()
        configure_logging(log_level="INFO", json_format=True, stream=output)
        logger = get_logger("test")

        # When
        logger.info("test message", key="value")

        # Then
        parsed = read_lines(output)[0]
        assert parsed["event"] == "test message"
        assert parsed["key"] == "value"
        assert parsed["level"] == "info"
        assert "timestamp" in parsed

    def test_log_includes_logger_name(self):
        """Log entries should include logger name."""
        output = StringIO()
        configure_logging(log_level="INFO", json_format=True, stream=output)
        logger = get_logger("interview_solver.solver")

        logger.info("test message")

        assert read_lines(output)[0]["logger"] == "interview_solver.solver"
        assert "logger_name" not in read_lines(output)[0]

    def test_add_logger_name_renames_key(self):
        """The bound module name is rendered under "logger"."""
        event_dict = {"event": "x", "logger_name": "interview_solver.images"}

        result = add_logger_name(None, "info", event_dict)

        assert result == {"event": "x", "logger": "interview_solver.images"}

    def test_add_logger_name_without_name(self):
        """Events without a bound name pass through unchanged."""
        assert add_logger_name(None, "info", {"event": "x"}) == {"event": "x"}

    def test_level_filtering(self):
        """Messages below the configured level are dropped."""
        output = StringIO()
        configure_logging(log_level="WARNING", json_format=True, stream=output)
        logger = get_logger("test")

        logger.info("hidden")
        logger.warning("shown")

        assert [line["event"] for line in read_lines(output)] == ["shown"]

    def test_console_format(self):
        """Console format is human readable, not JSON."""
        output = StringIO()
        configure_logging(log_level="INFO", json_format=False, stream=output)

        get_logger("test").info("console message")

        assert "console message" in output.getvalue()
        with pytest.raises(json.JSONDecodeError):
            json.loads(output.getvalue())

    def test_module_logger_follows_later_configuration(self):
        """Loggers created before configure_logging still use the new settings."""
        logger = get_logger("early")
        output = StringIO()

        configure_logging(log_level="INFO", json_format=True, stream=output)
        logger.info("late message")

        assert read_lines(output)[0]["event"] == "late message"


class TestSolverLogging:
    """Tests for logs emitted while processing screenshots."""

    @pytest.mark.asyncio
    async def test_call_id_bound_for_whole_call(
        self, configured_store, screenshot_files, sample_solution
    ):
        """Every log line of one call carries the same call_id."""
        output = StringIO()
        configure_logging(log_level="DEBUG", json_format=True, stream=output)
        generator = MagicMock()
        generator.generate = AsyncMock(return_value=sample_solution)
        solver = ScreenshotSolver(configured_store, generator_factory=lambda _: generator)

        await solver.process_screenshots(screenshot_files)

        lines = [line for line in read_lines(output) if "call_id" in line]
        events = [line["event"] for line in lines]
        assert events[0] == "process_screenshots_started"
        assert "screenshots_loaded" in events
        assert events[-1] == "process_screenshots_completed"
        assert len({line["call_id"] for line in lines}) == 1

    def test_credential_never_logged(self):
        """Configuration updates do not log the credential."""
        from interview_solver.config import ConfigStore

        output = StringIO()
        configure_logging(log_level="DEBUG", json_format=True, stream=output)

        ConfigStore().update("sk-very-secret", "Go")

        assert "sk-very-secret" not in output.getvalue()
        assert read_lines(output)[0]["event"] == "config_updated"
