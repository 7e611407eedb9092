# solver/__init__.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Solver module exports

"""Forward-propagation solver deciding deductions from propositional premises.

Main Components:
    solve: Decides a deduction against parsed premises
    DeductionSolver: The propagation loop, steppable one iteration at a time
    Verdict: Three-valued result (VALID, INVALID, INDETERMINATE)
    simplify_with: Substitutes one known truth value into a premise
"""

from .verdict import Verdict
from .engine import (
    DeductionSolver,
    SolverState,
    Substitution,
    Trivial,
    as_trivial,
    simplify_with,
    solve,
)

__all__ = [
    "Verdict",
    "DeductionSolver",
    "SolverState",
    "Substitution",
    "Trivial",
    "as_trivial",
    "simplify_with",
    "solve",
]
