"""
Tests for the logging setup of the command-line tools.
"""

import io
import logging
from pathlib import Path

import pytest

from ..log import (
    VERBOSE_LEVEL,
    ChainSpecLogger,
    UTCFormatter,
    configure_logging,
    get_logger,
    parse_log_level,
)


def test_verbose_level():
    """Test that the verbose level is registered and logged by the custom logger."""
    assert logging.getLevelName(VERBOSE_LEVEL) == "VERBOSE"

    logger = get_logger("chainspec_test_verbose")
    assert isinstance(logger, ChainSpecLogger)
    output = io.StringIO()
    handler = logging.StreamHandler(output)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    try:
        logger.setLevel(VERBOSE_LEVEL)
        logger.verbose("Checking %s", "ecrecover.json")
        logger.debug("not shown")
    finally:
        logger.removeHandler(handler)
    assert output.getvalue() == "VERBOSE: Checking ecrecover.json\n"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("INFO", logging.INFO),
        ("debug", logging.DEBUG),
        ("Verbose", VERBOSE_LEVEL),
        ("30", logging.WARNING),
    ],
)
def test_parse_log_level(value: str, expected: int):
    """Test parsing log levels given on the command line."""
    assert parse_log_level(value) == expected


@pytest.mark.parametrize("value", ["chatty", "-10", ""])
def test_parse_log_level_invalid(value: str):
    """Test that unknown log levels are rejected."""
    with pytest.raises(ValueError, match="Invalid log level"):
        parse_log_level(value)


def test_utc_formatter():
    """Test that record times are formatted in UTC with milliseconds."""
    formatter = UTCFormatter(fmt="%(asctime)s %(message)s")
    record = logging.makeLogRecord({"msg": "decoded", "created": 1609459200.25})
    assert formatter.format(record) == "2021-01-01T00:00:00.250+00:00 decoded"


def test_configure_logging_stderr_only():
    """Test that the root logger gets a single stderr handler at the given level."""
    configure_logging(logging.WARNING)
    root_logger = logging.getLogger()
    assert root_logger.level == logging.WARNING
    assert len(root_logger.handlers) == 1
    assert not isinstance(root_logger.handlers[0], logging.FileHandler)


def test_configure_logging_with_file(tmp_path: Path):
    """Test that the log is also written to the given file."""
    log_file = tmp_path / "logs" / "check_builtins.log"
    configure_logging(VERBOSE_LEVEL, log_file=log_file)
    get_logger("chainspec_test_file").verbose("Checking late_start.json")
    get_logger("chainspec_test_file").debug("not shown")

    log_content = log_file.read_text()
    assert "[VERBOSE] cli.log: Logging at level VERBOSE" in log_content
    assert "[VERBOSE] chainspec_test_file: Checking late_start.json" in log_content
    assert "not shown" not in log_content
