# formula/__init__.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Formula parsing components for propositional premises

"""Propositional formula parsing for the deduction checker.

The parsing pipeline turns one premise line into a formula tree in
NAND-normalized form (see ``formula.ast_nodes``). Lexing and parsing are
built on SLY; a fresh parser is used for every call.

Core Functions:
    parse: Converts a formula string into a formula tree
    parse_all: Parses an ordered sequence of premise strings

Supported Syntax:
    - Propositions: single ASCII letters, case-sensitive
    - NOT: ! or ¬
    - AND: & or ∧
    - OR: | or ∨
    - IMPLY: -> or →
    - Grouping with parentheses; one binary operator per group

Example:
    >>> from formula import parse
    >>> tree = parse("(f ∨ s) → m")
    >>> str(tree)
    '((f | s) -> m)'
"""

from typing import Iterable, List

from .exceptions import ParseError
from .grammar import _FormulaParser
from .ast_nodes import Atom, Connective, Expr, Nand, Proposition, connect
from utils.logger import get_logger


def parse(source: str) -> Expr:
    """Parse a formula string into its tree representation.

    Args:
        source: Well-formed formula string to parse

    Returns:
        Root node of the NAND-normalized formula tree

    Raises:
        ParseError: Formula syntax is malformed or the input is empty

    Example:
        >>> str(parse("a -> !b"))
        '!(a & b)'
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _FormulaParser()

    try:
        result = parser.parse(source)
        logger.debug(
            f"Formula parsed successfully into tree with root: {type(result).__name__}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_all(sources: Iterable[str]) -> List[Expr]:
    """Parse every premise string, failing on the first malformed one.

    Args:
        sources: Premise strings in input order

    Returns:
        Formula trees in the same order

    Raises:
        ParseError: Any premise is malformed
    """
    return [parse(source) for source in sources]


__all__ = [
    "parse",
    "parse_all",
    "ParseError",
    "Expr",
    "Atom",
    "Nand",
    "Proposition",
    "Connective",
    "connect",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing into NAND-normalized trees"
