# utils/logger.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Logging utility for the deduction checker with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the deduction checker."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class DeducerLogger:
    """Centralized logger with solver-specific helpers and clean console output."""

    def __init__(self, name: str = "deducer", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(DeducerFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    @property
    def level(self) -> int:
        return self.logger.level

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for solver events
    def premise_loaded(self, index: int, source: str, rendered: str):
        """Log a premise as read and as normalized."""
        self.debug(f"Premise {index}: {source}  ⇒  {rendered}")

    def trivial_extracted(self, proposition: str, truth_value: bool, remaining: int):
        """Log extraction of a trivial premise."""
        self.debug(
            f"  🔎 Known: {proposition} = {truth_value} "
            f"(propagating into {remaining} premise(s))"
        )

    def premise_rewritten(self, before: str, after: str, constant: Optional[bool] = None):
        """Log the outcome of propagating into a single premise."""
        if constant is not None:
            self.debug(f"    {before} → constant {constant}")
        elif before != after:
            self.debug(f"    {before} → {after}")

    def solution_found(self, proposition: str, truth_value: bool, iterations: int):
        """Log that the target was forced."""
        self.debug(
            f"  🎉 Deduction {proposition} forced to {truth_value} "
            f"after {iterations} iteration(s)"
        )

    def solver_stuck(self, proposition: str, remaining: int):
        """Log that no trivial premise is left."""
        self.debug(
            f"  💥 No trivial premise left for {proposition}; "
            f"{remaining} premise(s) unresolved"
        )

    def final_verdict(self, verdict: str):
        """Log final verdict."""
        self.info(f"\n>>> FINAL VERDICT: {verdict} <<<")


class DeducerFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[DeducerLogger] = None


def get_logger(name: str = "deducer") -> DeducerLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "deducer")

    Returns:
        DeducerLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = DeducerLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
