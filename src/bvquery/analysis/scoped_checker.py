"""
Transient satisfiability checks that leave the solver context unchanged.
"""
from contextlib import contextmanager
from typing import Any, Iterable, Iterator
import logging

import z3

from ..errors import PreconditionError, ScopeError, SolverError
from ..solver.base import SolverBackend
from ..solver.result import SolverResult

logger = logging.getLogger(__name__)


class ScopedChecker:
    """Answers "would these extra constraints be satisfiable?" questions.

    Every check runs inside its own solver scope which is popped on every
    exit path, so the persistent constraint set is the same before and
    after each call.
    """
    
    def __init__(self, solver: SolverBackend):
        """Initialize scoped checker.
        
        Args:
            solver: Solver context to query. The caller must not use it
                concurrently while a query is running.
        """
        self.solver = solver

    @contextmanager
    def scope(self) -> Iterator[SolverBackend]:
        """Open a transient solver scope.

        Constraints added to the yielded solver are discarded when the
        block exits, whether normally or by an exception.

        Raises:
            ScopeError: If the scope depth after popping does not match the
                depth at entry
        """
        depth = self.solver.num_scopes()
        self.solver.push()
        try:
            yield self.solver
        finally:
            self.solver.pop()
            if self.solver.num_scopes() != depth:
                raise ScopeError(
                    f"scope opened at depth {depth} closed at depth {self.solver.num_scopes()}"
                )

    def sat(self) -> bool:
        """Check the persistent constraint set with no additions.

        Returns:
            True if satisfiable, False if not

        Raises:
            SolverError: If the solver could not decide
        """
        result = self.solver.check()
        if result == SolverResult.SAT:
            return True
        if result == SolverResult.UNSAT:
            return False
        raise SolverError(f"solver returned unknown: {self.solver.reason_unknown()}")
    
    def check(self, extra_constraints: Iterable[Any] = ()) -> bool:
        """Check the persistent constraints together with extra ones.
        
        Args:
            extra_constraints: Constraints asserted only for this check
            
        Returns:
            True if the combined set is satisfiable, False if not
        """
        with self.scope() as solver:
            for constraint in extra_constraints:
                solver.add_constraint(constraint)
            result = self.sat()
        logger.debug("scoped check -> %s", "sat" if result else "unsat")
        return result


def bv_width(expr: Any) -> int:
    """Return the bit width of ``expr``.

    Raises:
        PreconditionError: If ``expr`` is not a Z3 bitvector expression
    """
    if not z3.is_bv(expr):
        raise PreconditionError(f"expected a bitvector expression, got {expr!r}")
    return expr.size()
