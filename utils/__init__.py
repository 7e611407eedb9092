# utils/__init__.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Utility module exports

# premise_reader depends on the formula package, which itself logs through
# utils.logger; import it as utils.premise_reader to keep this package leaf-level.
from .logger import (
    LogLevel,
    configure_logging,
    get_logger,
    set_log_level,
)

__all__ = [
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
