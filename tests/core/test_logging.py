"""Tests for logging configuration and formatters."""

import json
import logging

from linmat import Settings, make_zeros, setup_logging
from linmat.core.logging import StructuredFormatter, TextFormatter, get_context_logger


def make_record(extra_data=None):
    record = logging.LogRecord(
        name="linmat.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg="Something %s",
        args=("happened",),
        exc_info=None,
    )
    if extra_data is not None:
        record.extra_data = extra_data
    return record


class TestFormatters:
    """Test the JSON and text formatters."""

    def test_structured_formatter_emits_json(self):
        """Test the JSON formatter merges extra_data into the payload."""
        payload = json.loads(StructuredFormatter().format(make_record({"pivot": 0})))
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "linmat.test"
        assert payload["message"] == "Something happened"
        assert payload["pivot"] == 0
        assert "timestamp" in payload

    def test_structured_formatter_serializes_tuples(self):
        """Test non-JSON values such as shapes are serialized."""
        payload = json.loads(StructuredFormatter().format(make_record({"shape": (2, 3)})))
        assert payload["shape"] == [2, 3]

    def test_text_formatter_appends_context(self):
        """Test the text formatter lists extra_data as key=value pairs."""
        line = TextFormatter().format(make_record({"routine": "lu", "pivot": 1}))
        assert line.endswith("Something happened [routine=lu pivot=1]")
        assert " - linmat.test - WARNING - " in line

    def test_text_formatter_without_context(self):
        """Test records without extra_data have no suffix."""
        assert TextFormatter().format(make_record()).endswith("Something happened")


class TestContextLogger:
    """Test the context-carrying adapter."""

    def test_context_merged_with_call_data(self, caplog):
        """Test permanent context and per-call data both reach the record."""
        logger = get_context_logger("linmat.test", routine="unit")
        with caplog.at_level(logging.INFO, logger="linmat"):
            logger.info("hello", extra_data={"step": 3})
        record = caplog.records[-1]
        assert record.extra_data == {"routine": "unit", "step": 3}


class TestSetupLogging:
    """Test setup_logging()."""

    def test_configures_package_logger(self, restore_package_logger):
        """Test level, handler and propagation are set from settings."""
        logger = setup_logging(Settings(LOG_LEVEL="DEBUG", LOG_FORMAT="json"))
        assert logger is restore_package_logger
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_repeated_setup_replaces_handlers(self, restore_package_logger):
        """Test calling setup twice does not duplicate handlers."""
        setup_logging(Settings())
        logger = setup_logging(Settings())
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, TextFormatter)

    def test_unknown_level_falls_back_to_warning(self, restore_package_logger):
        """Test an unrecognized level name means WARNING."""
        logger = setup_logging(Settings(LOG_LEVEL="chatty"))
        assert logger.level == logging.WARNING

    def test_log_file_receives_records(self, restore_package_logger, tmp_path):
        """Test LOG_FILE adds a file handler that library warnings reach."""
        log_file = tmp_path / "logs" / "linmat.log"
        logger = setup_logging(Settings(LOG_FILE=str(log_file), LOG_FORMAT="json"))
        assert len(logger.handlers) == 2

        make_zeros(2, 2).lu_decomposition()
        for handler in logger.handlers:
            handler.flush()

        lines = log_file.read_text().strip().splitlines()
        payload = json.loads(lines[-1])
        assert payload["message"] == "Zero pivot in LU decomposition"
        assert payload["routine"] == "lu_decomposition"

    def test_reads_cached_settings_by_default(self, restore_package_logger, monkeypatch):
        """Test LINMAT_LOG_LEVEL is honored when no settings are passed."""
        monkeypatch.setenv("LINMAT_LOG_LEVEL", "ERROR")
        logger = setup_logging()
        assert logger.level == logging.ERROR
