from __future__ import annotations

import io
import logging

import pytest

from clusterfit.utils.log_utils import (
    VERBOSE,
    ColumnFormatter,
    ConsoleHandler,
    get_log_level,
    level_from_string,
    level_to_string,
    set_log_level,
)


@pytest.fixture
def restore_level():
    logger = logging.getLogger("clusterfit")
    level = logger.level
    yield logger
    logger.setLevel(level)


level_test_cases = [
    pytest.param("VERBOSE", VERBOSE, id="verbose"),
    pytest.param("debug", logging.DEBUG, id="lower case"),
    pytest.param("WARNING", logging.WARNING, id="warning"),
    pytest.param("ERROR", logging.ERROR, id="error"),
    pytest.param("LOUD", logging.INFO, id="unknown falls back to info"),
]


@pytest.mark.parametrize("name,expected", level_test_cases)
def test_level_from_string(name, expected):
    assert level_from_string(name) == expected


def test_level_to_string():
    assert level_to_string(VERBOSE) == "VERBOSE"
    assert level_to_string(logging.INFO) == "INFO"
    assert level_to_string(42) == "UNKNOWN"


def test_set_log_level(restore_level):
    assert set_log_level("DEBUG") == logging.DEBUG
    assert get_log_level() == "DEBUG"
    set_log_level(logging.ERROR)
    assert get_log_level() == "ERROR"
    assert not restore_level.isEnabledFor(logging.WARNING)


def test_column_formatter():
    record = logging.LogRecord("clusterfit.fitting.fit", logging.WARNING, __file__, 1,
                               "fit failed", None, None, func="perform_linear_fit")
    line = ColumnFormatter().format(record)

    assert line == f"{'fit':<10}  {'perform_linear_fit':<30}  {'WARNING':<7}  fit failed"


def test_console_handler_filters_by_severity(restore_level):
    stream = io.StringIO()
    handler = ConsoleHandler(stream)
    logger = logging.getLogger("clusterfit.test_console")
    logger.addHandler(handler)
    try:
        set_log_level("WARNING")
        logger.info("hidden")
        logger.warning("shown")
    finally:
        logger.removeHandler(handler)

    output = stream.getvalue()
    assert "shown" in output
    assert "hidden" not in output
