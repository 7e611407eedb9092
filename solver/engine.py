# solver/engine.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Forward-propagation solver over NAND-normalized premises

"""Iterative propagation solver for propositional deductions.

The solver works on a private copy of the premise list and repeats:

1. If a premise has been reduced to the deduction itself (possibly negated),
   its truth value decides the verdict.
2. Otherwise the first premise reduced to any single proposition is taken
   out of the list. If there is none, the deduction is indeterminate.
3. That proposition's truth value is substituted into every remaining
   premise, which is resimplified bottom-up in a single pass.

Every iteration either returns or removes one premise, so the loop runs at
most ``len(premises) + 1`` times. There is no search and no backtracking.

A premise that resolves to a constant keeps its rewritten tree and becomes
inert. Contradictory premises are not detected; the verdict then follows
from the order in which trivial premises are extracted.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple, Union

from formula import ast_nodes as ast
from utils.logger import get_logger
from .verdict import Verdict

# Outcome of substituting into a subtree: a constant when the subtree's value
# is now known, else None, paired with the rewritten subtree.
Outcome = Tuple[Optional[bool], ast.Expr]


@dataclass(frozen=True, slots=True)
class Trivial:
    """A proposition whose truth value is fully known.

    Attributes:
        proposition: The decided variable
        truth_value: Its value
    """

    proposition: ast.Proposition
    truth_value: bool

    def __str__(self) -> str:
        return f"{self.proposition}={self.truth_value}"


def as_trivial(premise: ast.Expr) -> Optional[Trivial]:
    """Return the known assignment if ``premise`` is a lone, possibly negated, atom."""
    if isinstance(premise, ast.Atom):
        return Trivial(premise.proposition, premise.truth_value)
    return None


class Substitution(ast.Visitor):
    """Substitutes one known truth value into a formula tree.

    Each visit returns an ``Outcome``. Nodes whose value becomes known report
    it as a constant; nodes reduced to one operand are replaced by that
    operand with the negation flags composed; everything else is rebuilt
    around its rewritten children.
    """

    def __init__(self, known: Trivial):
        self.known = known

    def apply(self, premise: ast.Expr) -> Outcome:
        return premise.accept(self)

    def visit_atom(self, n: ast.Atom) -> Outcome:
        if n.proposition == self.known.proposition:
            return self.known.truth_value != n.negated, n
        return None, n

    def visit_nand(self, n: ast.Nand) -> Outcome:
        left_value, left = n.left.accept(self)
        right_value, right = n.right.accept(self)

        # NAND is true as soon as one operand is false
        if left_value is False or right_value is False:
            return (not n.negated), _rebuild(n, left, right)

        if left_value and right_value:
            return n.negated, _rebuild(n, left, right)

        # NAND(true, x) is !x
        if left_value:
            return None, right.negate_if(not n.negated)
        if right_value:
            return None, left.negate_if(not n.negated)

        return None, _rebuild(n, left, right)


def _rebuild(n: ast.Nand, left: ast.Expr, right: ast.Expr) -> ast.Nand:
    if left is n.left and right is n.right:
        return n
    return ast.Nand(left, right, n.negated)


def simplify_with(premise: ast.Expr, known: Trivial) -> Outcome:
    """Substitute ``known`` into ``premise`` and resimplify it.

    Args:
        premise: Formula tree to rewrite
        known: Proposition with its now-known truth value

    Returns:
        The constant value of the premise if it became fully known (else
        None), and the rewritten tree
    """
    return Substitution(known).apply(premise)


class SolverState(Enum):
    """Phases of the propagation loop."""

    SCANNING = auto()
    SIMPLIFYING = auto()
    SOLVED = auto()
    STUCK = auto()


class DeductionSolver:
    """Propagation loop deciding one deduction against a premise set.

    The instance owns its premise list; the caller's sequence is copied and
    never mutated. Use ``run`` for the full loop or ``step`` to advance one
    iteration at a time.
    """

    def __init__(
        self,
        premises: Iterable[ast.Expr],
        deduction: Union[ast.Proposition, str],
    ):
        self.premises: List[ast.Expr] = list(premises)
        self.deduction = _as_proposition(deduction)
        self.state = SolverState.SCANNING
        self.verdict: Optional[Verdict] = None
        self.iterations = 0

    def is_finished(self) -> bool:
        return self.state in (SolverState.SOLVED, SolverState.STUCK)

    def find_solution(self) -> Optional[bool]:
        """Truth value of the deduction if a premise already states it."""
        for premise in self.premises:
            trivial = as_trivial(premise)
            if trivial is not None and trivial.proposition == self.deduction:
                return trivial.truth_value
        return None

    def find_trivial(self) -> Optional[Tuple[int, Trivial]]:
        """Index and assignment of the first trivial premise, if any."""
        for idx, premise in enumerate(self.premises):
            trivial = as_trivial(premise)
            if trivial is not None:
                return idx, trivial
        return None

    def step(self) -> Optional[Verdict]:
        """Run one iteration of the loop.

        Returns:
            The verdict once the loop has terminated, otherwise None
        """
        if self.is_finished():
            return self.verdict

        logger = get_logger()
        self.iterations += 1
        self.state = SolverState.SCANNING

        solution = self.find_solution()
        if solution is not None:
            logger.solution_found(str(self.deduction), solution, self.iterations)
            return self._finish(SolverState.SOLVED, Verdict.from_truth_value(solution))

        found = self.find_trivial()
        if found is None:
            logger.solver_stuck(str(self.deduction), len(self.premises))
            return self._finish(SolverState.STUCK, Verdict.INDETERMINATE)

        self.state = SolverState.SIMPLIFYING
        idx, known = found
        del self.premises[idx]
        logger.trivial_extracted(
            str(known.proposition), known.truth_value, len(self.premises)
        )

        rewritten = []
        for premise in self.premises:
            constant, simplified = simplify_with(premise, known)
            logger.premise_rewritten(str(premise), str(simplified), constant)
            rewritten.append(simplified)
        self.premises = rewritten

        return None

    def run(self) -> Verdict:
        """Iterate until the deduction is decided or propagation stalls."""
        logger = get_logger()
        logger.debug(
            f"Solving for {self.deduction} over {len(self.premises)} premise(s)"
        )

        verdict = self.step()
        while verdict is None:
            verdict = self.step()
        return verdict

    def _finish(self, state: SolverState, verdict: Verdict) -> Verdict:
        self.state = state
        self.verdict = verdict
        return verdict


def _as_proposition(deduction: Union[ast.Proposition, str]) -> ast.Proposition:
    if isinstance(deduction, ast.Proposition):
        return deduction
    is_letter = (
        isinstance(deduction, str)
        and len(deduction) == 1
        and deduction.isascii()
        and deduction.isalpha()
    )
    if is_letter:
        return ast.Proposition(deduction)
    raise ValueError(f"Deduction must be a single ASCII letter, got {deduction!r}")


def solve(
    premises: Iterable[ast.Expr], deduction: Union[ast.Proposition, str]
) -> Verdict:
    """Decide whether the premises force the deduction.

    Args:
        premises: Parsed premise trees; the sequence is not modified
        deduction: Target proposition, or its letter

    Returns:
        VALID, INVALID or INDETERMINATE

    Raises:
        ValueError: ``deduction`` is not a single ASCII letter

    Example:
        >>> from formula import parse_all
        >>> solve(parse_all(["a", "a -> b"]), "b")
        <Verdict.VALID: 1>
    """
    return DeductionSolver(premises, deduction).run()
