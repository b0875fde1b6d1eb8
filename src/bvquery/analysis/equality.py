"""
Equality questions between two bitvector expressions.
"""
from typing import Any
import logging

from ..errors import PreconditionError
from .scoped_checker import ScopedChecker, bv_width

logger = logging.getLogger(__name__)


class EqualityOracle:
    """Decides whether two expressions can, or must, be equal.

    Under an unsatisfiable constraint set nothing can be equal and
    everything must be equal: ``can_be_equal`` returns False and
    ``must_be_equal`` returns True. Callers that care should check
    ``ScopedChecker.sat()`` first.
    """

    def __init__(self, checker: ScopedChecker):
        self.checker = checker

    def can_be_equal(self, a: Any, b: Any) -> bool:
        """True if some assignment consistent with the constraints makes a == b."""
        _check_operands(a, b)
        result = self.checker.check([a == b])
        logger.debug("can_be_equal(%s, %s) -> %s", a, b, result)
        return result

    def must_be_equal(self, a: Any, b: Any) -> bool:
        """True if no assignment consistent with the constraints makes a != b."""
        _check_operands(a, b)
        result = not self.checker.check([a != b])
        logger.debug("must_be_equal(%s, %s) -> %s", a, b, result)
        return result


def _check_operands(a: Any, b: Any) -> None:
    width_a, width_b = bv_width(a), bv_width(b)
    if width_a != width_b:
        raise PreconditionError(
            f"cannot compare {width_a}-bit {a} with {width_b}-bit {b}"
        )
