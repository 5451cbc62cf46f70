# Area: Shared Tests
"""Tests for logging setup and structured round errors."""

import json
import logging

import pytest
from cup_game._shared.logging_config import (
    JSONFormatter,
    TerminalFormatter,
    log_round_error,
    setup_logging,
)
from cup_game.errors import ServerError


@pytest.fixture
def pkg_logger():
    pkg = logging.getLogger("cup_game")
    yield pkg
    for handler in list(pkg.handlers):
        handler.close()
    pkg.handlers.clear()
    pkg.propagate = True
    pkg.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_writes_json_lines(self, pkg_logger, tmp_path):
        """Test that the file handler writes JSON lines."""
        log_file = tmp_path / "logs" / "game.log"
        setup_logging(log_file_path=str(log_file))

        logging.getLogger("cup_game.round.orchestrator").info("Round finalized")
        for handler in pkg_logger.handlers:
            handler.flush()

        record = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert record["level"] == "INFO"
        assert record["logger"] == "cup_game.round.orchestrator"
        assert record["message"] == "Round finalized"

    def test_repeated_setup_does_not_stack_handlers(self, pkg_logger, tmp_path):
        """Test that setup_logging replaces existing handlers."""
        setup_logging(log_file_path=str(tmp_path / "a.log"))
        setup_logging(log_file_path=str(tmp_path / "b.log"))
        assert len(pkg_logger.handlers) == 2
        assert pkg_logger.propagate is False


class TestFormatters:
    """Tests for the terminal and JSON formatters."""

    def test_terminal_color_does_not_leak_into_record(self):
        """Test that coloring does not modify the shared record."""
        record = logging.LogRecord("cup_game", logging.WARNING, __file__, 1, "hi", None, None)
        output = TerminalFormatter(fmt="%(levelname)s %(message)s").format(record)

        assert "\033[33m" in output
        assert record.levelname == "WARNING"

    def test_json_includes_error_extras(self):
        """Test that error extras appear in JSON output."""
        record = logging.LogRecord("cup_game", logging.ERROR, __file__, 1, "RGS error", None, None)
        record.error_type = "SERVER_ERROR"
        record.status_code = 500

        data = json.loads(JSONFormatter().format(record))

        assert data["error_type"] == "SERVER_ERROR"
        assert data["status_code"] == 500
        assert "endpoint" not in data


class TestLogRoundError:
    """Tests for log_round_error()."""

    def test_prints_block_to_stderr(self, capsys):
        """Test that log_round_error prints the block to stderr."""
        log_round_error(ServerError("boom", endpoint="/wallet/play", status_code=500))
        err = capsys.readouterr().err

        assert "ROUND ABORTED" in err
        assert "Endpoint:     /wallet/play" in err
