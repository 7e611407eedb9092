# tests/formula_tests/test_semantics.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Test suite for truth-value evaluation of normalized formula trees

"""Checks that NAND normalization keeps the meaning of every connective."""

import pytest
from formula import parse
from formula.ast_nodes import Atom, Connective, Nand, Proposition, atom, connect
from formula.semantics import assignments, equivalent, evaluate, propositions

A = Proposition("a")
B = Proposition("b")


class TestConnectiveSemantics:
    """Truth tables of the input connectives after normalization."""

    TRUTH_TABLES = [
        ("a & b", {(False, False): False, (False, True): False,
                   (True, False): False, (True, True): True}),
        ("a | b", {(False, False): False, (False, True): True,
                   (True, False): True, (True, True): True}),
        ("a -> b", {(False, False): True, (False, True): True,
                    (True, False): False, (True, True): True}),
        ("!(a & b)", {(False, False): True, (False, True): True,
                      (True, False): True, (True, True): False}),
    ]

    @pytest.mark.parametrize("formula, table", TRUTH_TABLES)
    def test_truth_table(self, formula, table):
        tree = parse(formula)

        for (a_value, b_value), expected in table.items():
            assert evaluate(tree, {A: a_value, B: b_value}) == expected, (
                f"{formula} with a={a_value}, b={b_value}"
            )

    def test_negated_atom(self):
        assert evaluate(parse("!a"), {A: True}) is False
        assert evaluate(parse("!!a"), {A: True}) is True

    @pytest.mark.parametrize("op", list(Connective))
    def test_connect_negation_composes(self, op):
        """Negating a connected node twice gives back the same node."""
        node = connect(op, atom("a"), atom("b"))

        assert isinstance(node, Nand)
        assert node.negate().negate() == node
        assert equivalent(node.negate(), parse(f"!({atom('a')} {op} {atom('b')})"))

    def test_missing_assignment_raises(self):
        with pytest.raises(KeyError, match="'b'"):
            evaluate(parse("a & b"), {A: True})


class TestFormulaQueries:
    """Proposition collection and equivalence checks."""

    def test_propositions(self):
        assert propositions(parse("(m ∧ ¬b) → j")) == frozenset(
            Proposition(name) for name in "mbj"
        )
        assert propositions(parse("!a")) == frozenset({A})

    def test_assignments_cover_every_combination(self):
        all_assignments = list(assignments({A, B}))

        assert len(all_assignments) == 4
        assert {tuple(sorted(a.items(), key=lambda kv: kv[0].name))
                for a in all_assignments} == {
            ((A, x), (B, y)) for x in (False, True) for y in (False, True)
        }

    EQUIVALENT_PAIRS = [
        ("a -> b", "!a | b"),
        ("a -> b", "!b -> !a"),
        ("!(a & b)", "!a | !b"),
        ("!(a | b)", "!a & !b"),
        ("a", "!!a"),
    ]

    @pytest.mark.parametrize("first, second", EQUIVALENT_PAIRS)
    def test_equivalent(self, first, second):
        assert equivalent(parse(first), parse(second))

    def test_not_equivalent(self):
        assert not equivalent(parse("a -> b"), parse("b -> a"))
        assert not equivalent(parse("a"), Atom(A, True))
