# formula/grammar.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implemented with the SLY parser generator.

The grammar is deliberately flat: an expression holds at most one binary
operator, and anything deeper has to be parenthesized.

    start := expr
    expr  := unary | unary connective unary
    unary := NOT unary | atom
    atom  := PROP | LPAREN expr RPAREN

``a & b & c`` is therefore a syntax error while ``(a & b) & c`` is accepted.
Binary operators are NAND-normalized as soon as they are reduced, and each
NOT toggles the negation flag of its operand.
"""

from sly import Parser
from .lexer import FormulaLexer
from .ast_nodes import Atom, Connective, Expr, Proposition, connect
from .exceptions import ParseError
from utils.logger import get_logger


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Attributes:
        tokens: Token types from FormulaLexer
    """

    tokens = FormulaLexer.tokens

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: a premise line is a single expression."""
        return p.expr

    @_("unary")
    def expr(self, p) -> Expr:
        return p.unary

    @_("unary connective unary")
    def expr(self, p) -> Expr:
        """Single binary operation, normalized to a NAND node."""
        return connect(p.connective, p.unary0, p.unary1)

    @_("AND")
    def connective(self, p) -> Connective:
        return Connective.AND

    @_("OR")
    def connective(self, p) -> Connective:
        return Connective.OR

    @_("IMPLY")
    def connective(self, p) -> Connective:
        return Connective.IMPLY

    @_("NOT unary")
    def unary(self, p) -> Expr:
        """Negation flips the operand's flag, so !!a is a again."""
        return p.unary.negate()

    @_("atom")
    def unary(self, p) -> Expr:
        return p.atom

    @_("PROP")
    def atom(self, p) -> Expr:
        return Atom(Proposition(p.PROP))

    @_("LPAREN expr RPAREN")
    def atom(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    def parse(self, text: str) -> Expr:
        """Parse formula text into a NAND-normalized tree.

        Args:
            text: Formula string to parse

        Returns:
            Root node of the parsed formula

        Raises:
            ParseError: If the formula is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        if text.strip() == "":
            raise ParseError("Input formula is empty.")

        try:
            ast_result = super().parse(FormulaLexer().tokenize(text))

            if ast_result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(
                f"Successfully parsed formula into {type(ast_result).__name__}"
            )
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Called by SLY for any token no grammar rule accepts, including the
        ERROR tokens produced for unrecognized characters.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token is None:
            raise ParseError("Syntax error: Unexpected end of formula")

        if token.type == "ERROR":
            raise ParseError(
                f"Syntax error: unrecognized character '{token.value}' "
                f"at position {token.index}"
            )

        raise ParseError(
            f"Syntax error near '{token.value}' "
            f"(type: {token.type}) at position {token.index}"
        )
