# formula/semantics.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Truth-value evaluation and proposition collection over formula trees

"""Visitors giving formula trees their boolean meaning.

These are reference semantics for the NAND-normalized representation. The
solver never enumerates assignments; evaluation here exists so callers and
tests can check that a rewritten or re-parsed tree still means the same
thing as the original.
"""

from __future__ import annotations
from itertools import product
from typing import Dict, FrozenSet, Iterator, Mapping

from . import ast_nodes as ast


class _Evaluator(ast.Visitor):
    """Evaluates a formula under a complete assignment."""

    def __init__(self, assignment: Mapping[ast.Proposition, bool]):
        self._assignment = assignment

    def visit_atom(self, n: ast.Atom) -> bool:
        try:
            value = self._assignment[n.proposition]
        except KeyError:
            raise KeyError(
                f"No truth value assigned to proposition '{n.proposition}'"
            ) from None
        return value != n.negated

    def visit_nand(self, n: ast.Nand) -> bool:
        value = not (n.left.accept(self) and n.right.accept(self))
        return value != n.negated


class _PropositionCollector(ast.Visitor):
    """Collects every proposition referenced in a formula."""

    def __init__(self):
        self.found: set = set()

    def visit_atom(self, n: ast.Atom) -> None:
        self.found.add(n.proposition)

    def visit_nand(self, n: ast.Nand) -> None:
        n.left.accept(self)
        n.right.accept(self)


def evaluate(formula: ast.Expr, assignment: Mapping[ast.Proposition, bool]) -> bool:
    """Compute the truth value of ``formula``.

    Args:
        formula: Tree to evaluate
        assignment: Truth value for every proposition in the tree

    Returns:
        The formula's truth value

    Raises:
        KeyError: A referenced proposition has no assigned value
    """
    return formula.accept(_Evaluator(assignment))


def propositions(formula: ast.Expr) -> FrozenSet[ast.Proposition]:
    """Return the set of propositions referenced by ``formula``."""
    collector = _PropositionCollector()
    formula.accept(collector)
    return frozenset(collector.found)


def assignments(props) -> Iterator[Dict[ast.Proposition, bool]]:
    """Yield every total assignment over ``props`` in a stable order."""
    ordered = sorted(props, key=lambda p: p.name)
    for values in product((False, True), repeat=len(ordered)):
        yield dict(zip(ordered, values))


def equivalent(first: ast.Expr, second: ast.Expr) -> bool:
    """Check that two formulas agree under every assignment of their variables."""
    props = propositions(first) | propositions(second)
    return all(
        evaluate(first, assignment) == evaluate(second, assignment)
        for assignment in assignments(props)
    )
