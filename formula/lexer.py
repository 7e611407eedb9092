# formula/lexer.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks premise lines into tokens for parser consumption. Every
operator has an ASCII spelling and a logic-symbol spelling; both produce the
same token type.

Supported Tokens:
- Operators: ! or ¬, & or ∧, | or ∨, -> or →
- Grouping: ( and )
- Propositions: single ASCII letters, case-sensitive
- Whitespace: any Unicode whitespace, ignored during tokenization

Characters outside this alphabet do not stop the lexer. They are emitted as
ERROR tokens, one character each, and the parser rejects them.
"""

from sly import Lexer
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "PROP",
        "NOT",
        "AND",
        "OR",
        "IMPLY",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # Remaining Unicode whitespace (no-break space, em space, ...)
    ignore_unicode_space = r"\s+"

    LPAREN = r"\("
    RPAREN = r"\)"
    NOT = r"!|¬"
    AND = r"&|∧"
    OR = r"\||∨"
    IMPLY = r"->|→"

    # One letter per proposition: "ab" is two propositions, not one name
    PROP = r"[a-zA-Z]"

    def error(self, t):
        """Emit an ERROR token for an unrecognized character.

        SLY hands over the remainder of the input as ``t.value``; only the
        offending character is kept and scanning resumes right after it.

        Args:
            t: SLY token object positioned at the bad character

        Returns:
            The ERROR token, so it reaches the parser
        """
        logger = get_logger()

        t.value = t.value[0]
        logger.debug(f"Unrecognized character '{t.value}' at position {self.index}")

        self.index += 1
        return t
