# tests/formula_tests/test_lexer_tokens.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Test suite for formula lexer tokenization and error tokens

"""Test suite for formula lexer functionality.

Verifies tokenization of both operator spellings, single-letter
propositions, whitespace handling and the ERROR tokens emitted for
characters outside the alphabet.
"""

import pytest
from formula.lexer import FormulaLexer
from utils.logger import get_logger


class TestFormulaLexer:
    """Test cases for formula lexer tokenization."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = FormulaLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        """Extract token types from input text.

        Args:
            text: Input string to tokenize

        Returns:
            List of token type strings
        """
        self.logger.debug(f"Tokenizing: '{text}'")
        token_types = [token.type for token in self.lexer.tokenize(text)]
        self.logger.debug(f"Token types: {token_types}")
        return token_types

    VALID_TOKENIZATION_CASES = [
        ("a", ["PROP"]),
        ("Z", ["PROP"]),
        # Each letter is its own proposition
        ("ab", ["PROP", "PROP"]),
        # ASCII operator spellings
        ("! & | -> ( )", ["NOT", "AND", "OR", "IMPLY", "LPAREN", "RPAREN"]),
        ("a&b", ["PROP", "AND", "PROP"]),
        ("a|b", ["PROP", "OR", "PROP"]),
        ("a->b", ["PROP", "IMPLY", "PROP"]),
        ("!a", ["NOT", "PROP"]),
        # Logic-symbol spellings
        ("¬ ∧ ∨ →", ["NOT", "AND", "OR", "IMPLY"]),
        ("a∧b", ["PROP", "AND", "PROP"]),
        ("a∨b", ["PROP", "OR", "PROP"]),
        ("a→b", ["PROP", "IMPLY", "PROP"]),
        ("¬¬a", ["NOT", "NOT", "PROP"]),
        # Whitespace handling
        (" \t a \n & \r b ", ["PROP", "AND", "PROP"]),
        ("", []),
        ("   ", []),
        # Unicode whitespace: no-break space, em space, ideographic space
        ("a\u00a0& b", ["PROP", "AND", "PROP"]),
        ("\u2003a\u3000->\u00a0b", ["PROP", "IMPLY", "PROP"]),
        # Complex expressions
        (
            "(m ∧ ¬b) → j",
            ["LPAREN", "PROP", "AND", "NOT", "PROP", "RPAREN", "IMPLY", "PROP"],
        ),
        (
            "(a & (!b | c)) -> !d",
            [
                "LPAREN", "PROP", "AND", "LPAREN", "NOT", "PROP", "OR", "PROP",
                "RPAREN", "RPAREN", "IMPLY", "NOT", "PROP",
            ],
        ),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Test lexer correctly tokenizes valid formula syntax."""
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_proposition_values_are_single_letters(self):
        """Test PROP tokens carry their letter, case preserved."""
        values = [token.value for token in self.lexer.tokenize("aB c")]
        assert values == ["a", "B", "c"]

    def test_ascii_and_symbol_spellings_agree(self):
        """Test both spellings of every operator yield the same token type."""
        pairs = [("&", "∧"), ("|", "∨"), ("->", "→"), ("!", "¬")]

        for ascii_form, symbol_form in pairs:
            assert self._tokenize_to_types(ascii_form) == self._tokenize_to_types(
                symbol_form
            ), f"Spellings '{ascii_form}' and '{symbol_form}' differ"

    ERROR_TOKEN_CASES = [
        ("a @ b", ["PROP", "ERROR", "PROP"], "@"),
        ("1", ["ERROR"], "1"),
        ("a_b", ["PROP", "ERROR", "PROP"], "_"),
        # A lone dash is not the start of an implication
        ("a - b", ["PROP", "ERROR", "PROP"], "-"),
        ("a => b", ["PROP", "ERROR", "ERROR", "PROP"], "="),
        ("é", ["ERROR"], "é"),
    ]

    @pytest.mark.parametrize("input_text, expected_types, first_bad", ERROR_TOKEN_CASES)
    def test_unrecognized_characters_become_error_tokens(
        self, input_text, expected_types, first_bad
    ):
        """Test the lexer keeps going and emits one ERROR token per bad character."""
        tokens = list(self.lexer.tokenize(input_text))

        assert [token.type for token in tokens] == expected_types
        errors = [token for token in tokens if token.type == "ERROR"]
        assert errors[0].value == first_bad
        assert all(len(token.value) == 1 for token in errors)

    def test_error_token_position(self):
        """Test ERROR tokens report where the bad character sits."""
        tokens = list(self.lexer.tokenize("ab$c"))
        error = next(token for token in tokens if token.type == "ERROR")

        assert error.index == 2
