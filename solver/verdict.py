# solver/verdict.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Verdict enumeration for deduction checking results

from enum import Enum, auto
from utils.logger import get_logger


class Verdict(Enum):
    """Three-valued result of checking a deduction against its premises.

    Values:
        VALID: The premises force the deduction to be true
        INVALID: The premises force the deduction to be false
        INDETERMINATE: Propagation stalled before the deduction was forced
    """

    VALID = auto()
    INVALID = auto()
    INDETERMINATE = auto()

    def __str__(self) -> str:
        """Generate string representation of the verdict.

        Returns:
            Verdict name (VALID, INVALID or INDETERMINATE)
        """
        return self.name

    @classmethod
    def from_truth_value(cls, truth_value: bool) -> "Verdict":
        """Map a forced truth value of the deduction to its verdict."""
        return cls.VALID if truth_value else cls.INVALID

    def render(self) -> str:
        """Lower-case wording used in the result line, e.g. ``"valid"``."""
        return self.name.lower()

    def is_conclusive(self) -> bool:
        """Determine if the premises decided the deduction either way.

        Returns:
            True for VALID or INVALID, False for INDETERMINATE
        """
        logger = get_logger()
        is_conclusive = self in (Verdict.VALID, Verdict.INVALID)

        logger.debug(
            f"Verdict {self.name} is {'conclusive' if is_conclusive else 'inconclusive'}"
        )

        return is_conclusive

