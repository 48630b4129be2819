"""Tests for logging utilities."""

import logging
from io import StringIO

from qgates.circuit import Circuit, HGate
from qgates.computer import StatevectorComputer
from qgates.logging import configure_logging, get_logger, set_log_level


def test_get_logger_is_cached_and_namespaced():
    """Test package logger naming and caching."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "qgates.test_module"
    assert get_logger("test_module") is logger
    assert get_logger("qgates.circuit.core").name == "qgates.circuit.core"
    assert get_logger().name == "qgates"
    assert logger.propagate is False


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_logger_output():
    """Test that configured loggers write formatted records to the stream."""
    captured = StringIO()
    try:
        configure_logging(level=logging.INFO, stream=captured)
        logger = get_logger("test_module")
        logger.info("Test message")
    finally:
        configure_logging(level=logging.WARNING)

    assert "[INFO] qgates.test_module: Test message" in captured.getvalue()


def test_circuit_logs_at_debug_level():
    """Test that circuits emit debug records when applied and inverted."""
    captured = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=captured)
        circuit = Circuit([HGate(0)])
        computer = StatevectorComputer(1)
        circuit.apply(computer)
        circuit.invert(computer)
    finally:
        configure_logging(level=logging.WARNING)

    output = captured.getvalue()
    assert "[DEBUG] qgates.circuit.core: Applying 1 gate(s)" in output
    assert "Inverting 1 gate(s)" in output


def test_set_log_level_accepts_names():
    """Test that string levels are resolved."""
    logger = get_logger("test_levels")
    try:
        set_log_level("INFO")
        assert logger.level == logging.INFO
    finally:
        set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_configure_logging_applies_to_later_loggers():
    """Test that stream and format carry over to loggers created afterwards."""
    captured = StringIO()
    try:
        configure_logging(level=logging.INFO, stream=captured, format_string="%(message)s!")
        get_logger("created_after_configure").info("hello")
    finally:
        configure_logging(level=logging.WARNING)

    assert captured.getvalue() == "hello!\n"


def test_set_log_level_ignores_non_level_names():
    """Test that names on the logging module that are not levels fall back to WARNING."""
    logger = get_logger("test_bad_level")
    try:
        set_log_level("basic_format")
        assert logger.level == logging.WARNING
        set_log_level("no_such_level")
        assert logger.level == logging.WARNING
    finally:
        set_log_level(logging.WARNING)
