# tests/utils_tests/test_logger_config.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Tests for logger configuration from command-line flags

import logging

import pytest
from utils.logger import DeducerFormatter, LogLevel, configure_logging, get_logger


class TestLoggerConfiguration:
    """Level selection and formatting of the shared logger."""

    def teardown_method(self):
        configure_logging(verbose=True)

    @pytest.mark.parametrize(
        "verbose, debug, expected",
        [
            (False, False, logging.WARNING),
            (True, False, logging.INFO),
            (False, True, logging.DEBUG),
            (True, True, logging.DEBUG),
        ],
    )
    def test_configure_logging(self, verbose, debug, expected):
        configure_logging(verbose=verbose, debug=debug)

        assert get_logger().level == expected

    def test_shared_instance(self):
        assert get_logger() is get_logger()

    def test_set_level_updates_handlers(self):
        logger = get_logger()
        logger.set_level(LogLevel.ERROR)

        assert all(h.level == logging.ERROR for h in logger.logger.handlers)

    def test_formatter(self):
        formatter = DeducerFormatter()

        def record(level):
            return logging.LogRecord("deducer", level, __file__, 1, "msg", None, None)

        assert formatter.format(record(logging.INFO)) == "msg"
        assert formatter.format(record(logging.ERROR)) == "msg"
        assert formatter.format(record(logging.DEBUG)) == "[DEBUG] msg"
