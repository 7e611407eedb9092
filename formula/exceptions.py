# formula/exceptions.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula processing."""


class ParseError(RuntimeError):
    """Exception raised when a formula does not match the grammar.

    Covers unconsumed trailing tokens, unbalanced parentheses, operators with
    a missing operand, unrecognized characters and empty input. A parse either
    yields a complete formula or raises this; there is no partial result.
    """

    pass
