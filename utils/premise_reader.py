# utils/premise_reader.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Text reader for premise lists terminated by a deduction line

"""Reads a deduction problem from text.

Expected format, one formula per line:

    (m ∧ ¬b) → j
    (f ∨ s) → m
    # comments and blank lines are skipped
    f
    ∴ j

The deduction line starts with ``∴`` (or the word ``therefore``) followed by
a single proposition letter. Reading stops at the deduction line.
"""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Union

from formula import ParseError, parse
from formula.ast_nodes import Expr, Proposition
from utils.logger import get_logger

DEDUCTION_MARKERS = ("∴", "therefore")
COMMENT_PREFIX = "#"


class PremiseFormatError(Exception):
    """Exception raised when premise input is missing or structurally invalid."""

    pass


@dataclass
class Problem:
    """Premises and the deduction to check against them.

    Attributes:
        deduction: Target proposition
        premises: Parsed premise trees in input order
        sources: Premise text as read, aligned with ``premises``
    """

    deduction: Proposition
    premises: List[Expr] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)


def parse_deduction(text: str) -> Proposition:
    """Turn deduction text such as ``"j"`` into a proposition.

    Raises:
        PremiseFormatError: Text is not exactly one ASCII letter
    """
    name = text.strip()
    if len(name) != 1 or not (name.isascii() and name.isalpha()):
        raise PremiseFormatError(
            f"Deduction must be a single proposition letter, got '{name}'"
        )
    return Proposition(name)


def _deduction_text(line: str) -> Optional[str]:
    """Return the text after a deduction marker, or None for other lines."""
    if line.startswith("∴"):
        return line[1:]
    head, _, rest = line.partition(" ")
    if head.lower() == "therefore" and rest:
        return rest
    return None


def read_premise_lines(
    lines: Iterable[str], deduction: Optional[str] = None
) -> Problem:
    """Build a problem from premise lines.

    Args:
        lines: Input lines, with or without trailing newlines
        deduction: Target letter; overrides any deduction line in the input

    Returns:
        Parsed problem

    Raises:
        ParseError: A premise line is malformed (message names the line)
        PremiseFormatError: No deduction was given, or the deduction is malformed
    """
    logger = get_logger()
    premises: List[Expr] = []
    sources: List[str] = []
    target = parse_deduction(deduction) if deduction is not None else None

    for line_num, raw in enumerate(lines, start=1):
        line = raw.strip()

        if not line or line.startswith(COMMENT_PREFIX):
            continue

        marker_text = _deduction_text(line)
        if marker_text is not None:
            if target is None:
                target = parse_deduction(marker_text)
            else:
                logger.debug(f"Ignoring deduction line {line_num}; using '{target}'")
            break

        try:
            premise = parse(line)
        except ParseError as e:
            raise ParseError(f"Line {line_num}: {e}") from e

        logger.premise_loaded(len(premises), line, str(premise))
        premises.append(premise)
        sources.append(line)

    if target is None:
        raise PremiseFormatError("No deduction found before end of input")

    logger.debug(f"Read {len(premises)} premise(s), deduction '{target}'")
    return Problem(target, premises, sources)


def read_premise_stream(
    stream: TextIO = None, deduction: Optional[str] = None
) -> Problem:
    """Read a problem from an open text stream (stdin by default)."""
    return read_premise_lines(stream if stream is not None else sys.stdin, deduction)


def read_premises(
    filepath: Union[str, Path], deduction: Optional[str] = None
) -> Problem:
    """Read a problem from a premise file.

    Args:
        filepath: Path to the premise file
        deduction: Target letter; overrides any deduction line in the file

    Returns:
        Parsed problem

    Raises:
        FileNotFoundError: The file does not exist
        PremiseFormatError: The file cannot be read or has no deduction
        ParseError: A premise line is malformed
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise FileNotFoundError(f"Premise file not found: {filepath}")

    logger.debug(f"Reading premise file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            return read_premise_lines(file, deduction)
    except UnicodeDecodeError as e:
        raise PremiseFormatError(f"Premise file is not valid UTF-8: {e}") from e
    except OSError as e:
        raise PremiseFormatError(f"Error reading premise file: {e}") from e
