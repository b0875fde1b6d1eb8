"""
Enumeration of the concrete values a bitvector expression can take.

Values are found one model at a time. After each model the value is excluded
with a blocking constraint ``expr != value``, and the loop stops when the
constraints become unsatisfiable (the set is complete) or when the caller's
cap is reached (the set is a sample). All blocking constraints live in a
single transient scope that is discarded when the call returns.
"""
from typing import Any, Set, Tuple
import logging

import z3

from ..errors import PreconditionError, SolverError, UnsatisfiableError
from ..solver.result import PossibleSolutions, SolutionCount
from .scoped_checker import ScopedChecker, bv_width

logger = logging.getLogger(__name__)


class SolutionEnumerator:
    """Characterizes the solution set of an expression up to a cap."""

    def __init__(self, checker: ScopedChecker):
        self.checker = checker

    def possible_solutions(self, expr: Any, cap: int) -> PossibleSolutions:
        """Enumerate the values of ``expr``, stopping after ``cap`` of them.

        Args:
            expr: Z3 bitvector expression
            cap: Maximum number of values to collect. Zero returns an empty
                AT_LEAST set without querying the solver.

        Returns:
            EXACTLY the full solution set if it has fewer than ``cap``
            values, otherwise AT_LEAST the ``cap`` values found. A set of
            exactly ``cap`` values is reported as AT_LEAST, so asking whether
            ``expr`` has a unique value takes ``cap=2``.

        Raises:
            PreconditionError: If cap is not a non-negative integer
            SolverError: If the solver could not decide, or repeated a
                blocked value
        """
        values, exhausted = self._collect(expr, cap)
        if exhausted:
            return PossibleSolutions.exactly(values)
        return PossibleSolutions.at_least(values)

    def solution_count(self, expr: Any, cap: int) -> SolutionCount:
        """Count the values of ``expr``, stopping after ``cap`` of them.

        Same search and cap rules as ``possible_solutions``.
        """
        values, exhausted = self._collect(expr, cap)
        if exhausted:
            return SolutionCount.exactly(len(values))
        return SolutionCount.at_least(len(values))

    def a_solution(self, expr: Any) -> int:
        """Return one value ``expr`` can take under the current constraints.

        Raises:
            UnsatisfiableError: If the constraints have no solution
        """
        bv_width(expr)
        if not self.checker.sat():
            raise UnsatisfiableError(
                f"no solution for {expr}: constraints are unsatisfiable"
            )
        return self.checker.solver.eval_bv(expr)

    def _collect(self, expr: Any, cap: int) -> Tuple[Set[int], bool]:
        """Run the blocking-constraint loop.

        Returns:
            Tuple of (values found, whether the enumeration is exhaustive)
        """
        width = bv_width(expr)
        _check_cap(cap)
        found: Set[int] = set()
        if cap == 0:
            return found, False

        with self.checker.scope() as solver:
            while self.checker.sat():
                value = solver.eval_bv(expr)
                if value in found:
                    raise SolverError(
                        f"solver produced blocked value {value} for {expr}"
                    )
                found.add(value)
                logger.debug("solution %d of %s: %d", len(found), expr, value)
                if len(found) >= cap:
                    logger.debug("cap %d reached for %s", cap, expr)
                    return found, False
                solver.add_constraint(expr != z3.BitVecVal(value, width, expr.ctx))

        logger.debug("enumerated all %d solutions of %s", len(found), expr)
        return found, True


def _check_cap(cap: Any) -> None:
    if isinstance(cap, bool) or not isinstance(cap, int):
        raise PreconditionError(f"cap must be an integer, got {cap!r}")
    if cap < 0:
        raise PreconditionError(f"cap must be non-negative, got {cap}")
