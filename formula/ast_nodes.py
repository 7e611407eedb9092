# formula/ast_nodes.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Formula tree classes in NAND-normalized form with negation flags

"""Formula tree classes for parsed propositional premises.

Every binary connective of the input language is normalized at construction
time into a single NAND node, and negation is carried as a boolean flag on
each node instead of a separate NOT node:

    A & B   ->  NAND(A, B), negated
    A | B   ->  NAND(!A, !B)
    A -> B  ->  NAND(A, !B)

Negating a node toggles its flag, so repeated negation never grows the tree.
All nodes are immutable and hashable; rewrites build new nodes.

Node Types:
    Atom: reference to a single Proposition
    Nand: the canonical binary connective

All nodes support the visitor design pattern for traversal and transformation.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Protocol


class Visitor(Protocol):
    """Interface for formula visitors implementing the visitor design pattern."""

    def visit_atom(self, n: Atom): ...

    def visit_nand(self, n: Nand): ...


@dataclass(frozen=True, slots=True)
class Proposition:
    """Atomic boolean variable named by a single character.

    Attributes:
        name: The variable letter (case-sensitive)
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all formula tree nodes.

    Subclasses declare a trailing ``negated`` field. The helpers below
    return copies with that flag toggled, so negation composes by XOR.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def negate(self) -> Expr:
        """Return this node with its negation flag toggled."""
        return replace(self, negated=not self.negated)

    def negate_if(self, condition: bool) -> Expr:
        """Return this node negated when ``condition`` holds, else itself."""
        return self.negate() if condition else self

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Atom(Expr):
    """Leaf node referencing a proposition, possibly negated.

    Attributes:
        proposition: The referenced variable
        negated: Whether the reference is negated
    """

    proposition: Proposition
    negated: bool = False

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    @property
    def truth_value(self) -> bool:
        """Value the proposition must take for this atom to hold."""
        return not self.negated

    def __str__(self) -> str:
        return f"!{self.proposition}" if self.negated else str(self.proposition)


@dataclass(frozen=True, slots=True)
class Nand(Expr):
    """Canonical binary connective: true unless both children are true.

    Rendering picks the most readable input-language form that re-parses to
    the same node: a negated NAND prints as a conjunction, a NAND of two
    negated children as a disjunction, a NAND with a negated right child as
    an implication, and anything else as a negated conjunction.

    Attributes:
        left: Left operand
        right: Right operand
        negated: Whether the whole node is negated
    """

    left: Expr
    right: Expr
    negated: bool = False

    def accept(self, v: Visitor):
        return v.visit_nand(self)

    def __str__(self) -> str:
        if self.negated:
            return f"({self.left} & {self.right})"
        if self.left.negated and self.right.negated:
            return f"({self.left.negate()} | {self.right.negate()})"
        if self.right.negated:
            return f"({self.left} -> {self.right.negate()})"
        return f"!({self.left} & {self.right})"


class Connective(Enum):
    """Binary operators accepted by the grammar."""

    AND = "&"
    OR = "|"
    IMPLY = "->"

    def __str__(self) -> str:
        return self.value


# (negate left, negate right, negate whole node)
_NAND_FLAGS = {
    Connective.AND: (False, False, True),
    Connective.OR: (True, True, False),
    Connective.IMPLY: (False, True, False),
}


def connect(op: Connective, left: Expr, right: Expr) -> Nand:
    """Build the NAND-normalized node for ``left op right``.

    Args:
        op: Connective joining the operands
        left: Left operand
        right: Right operand

    Returns:
        Equivalent Nand node with the negation flags absorbed
    """
    negate_left, negate_right, negate_node = _NAND_FLAGS[op]
    return Nand(
        left.negate_if(negate_left),
        right.negate_if(negate_right),
        negate_node,
    )


def atom(name: str, negated: bool = False) -> Atom:
    """Shorthand for an Atom over a freshly named proposition."""
    return Atom(Proposition(name), negated)
