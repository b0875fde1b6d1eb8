"""
Main query API over a solver context.

Provides flat functions that answer questions about the solution space of
bitvector expressions under the constraints currently held by a solver
context. None of them leaves constraints behind in the context.
"""
from typing import Any, Iterable

from .analysis.enumerator import SolutionEnumerator
from .analysis.equality import EqualityOracle
from .analysis.extremum import ExtremumSearch
from .analysis.scoped_checker import ScopedChecker
from .solver.base import SolverBackend
from .solver.result import PossibleSolutions, SolutionCount


def sat(solver: SolverBackend) -> bool:
    """Check whether the current constraints are satisfiable.
    
    Args:
        solver: Solver context holding the constraints
        
    Returns:
        True if satisfiable, False if not
        
    Raises:
        SolverError: If the solver could not decide
    """
    return ScopedChecker(solver).sat()


def sat_with_extra_constraints(solver: SolverBackend,
                               constraints: Iterable[Any]) -> bool:
    """Check whether the current constraints plus ``constraints`` are satisfiable.

    The extra constraints are discarded afterwards.
    
    Example:
        >>> x = z3.BitVec('x', 8)
        >>> solver.add_constraint(z3.UGT(x, 5))
        >>> sat_with_extra_constraints(solver, [z3.ULT(x, 5)])
        False
        >>> sat(solver)
        True
    """
    return ScopedChecker(solver).check(constraints)


def bvs_can_be_equal(solver: SolverBackend, a: Any, b: Any) -> bool:
    """Check whether ``a`` and ``b`` can have the same value.

    Returns False if the current constraints are themselves unsatisfiable.
    """
    return EqualityOracle(ScopedChecker(solver)).can_be_equal(a, b)


def bvs_must_be_equal(solver: SolverBackend, a: Any, b: Any) -> bool:
    """Check whether ``a`` and ``b`` must have the same value.

    Returns True if the current constraints are themselves unsatisfiable.
    """
    return EqualityOracle(ScopedChecker(solver)).must_be_equal(a, b)


def get_possible_solutions_for_bv(solver: SolverBackend,
                                  expr: Any,
                                  cap: int) -> PossibleSolutions:
    """Describe the possible values of ``expr``, collecting at most ``cap``.
    
    Args:
        solver: Solver context holding the constraints
        expr: Z3 bitvector expression
        cap: Maximum number of values to collect
        
    Returns:
        PossibleSolutions.exactly(values) if fewer than ``cap`` values exist,
        otherwise PossibleSolutions.at_least(values) with ``cap`` values
        
    Example:
        >>> solver.add_constraint(z3.And(z3.UGE(x, 10), z3.ULE(x, 12)))
        >>> get_possible_solutions_for_bv(solver, x, 10)
        PossibleSolutions(bound=<SolutionBound.EXACTLY: 'exactly'>, values=frozenset({10, 11, 12}))
    """
    return SolutionEnumerator(ScopedChecker(solver)).possible_solutions(expr, cap)


def get_solution_count_for_bv(solver: SolverBackend,
                              expr: Any,
                              cap: int) -> SolutionCount:
    """Count the possible values of ``expr``, counting at most ``cap``."""
    return SolutionEnumerator(ScopedChecker(solver)).solution_count(expr, cap)


def get_a_solution_for_bv(solver: SolverBackend, expr: Any) -> int:
    """Get one possible (unsigned) value of ``expr``.

    Raises:
        UnsatisfiableError: If the current constraints are unsatisfiable
    """
    return SolutionEnumerator(ScopedChecker(solver)).a_solution(expr)


def min_possible_solution_for_bv(solver: SolverBackend, expr: Any) -> int:
    """Get the lowest value of ``expr`` for which the constraints stay satisfiable.

    "Lowest" is interpreted unsigned.

    Raises:
        UnsatisfiableError: If the current constraints are unsatisfiable
    """
    return ExtremumSearch(ScopedChecker(solver)).min_unsigned(expr)


def max_possible_solution_for_bv(solver: SolverBackend, expr: Any) -> int:
    """Get the highest value of ``expr`` for which the constraints stay satisfiable.

    "Highest" is interpreted unsigned.

    Raises:
        UnsatisfiableError: If the current constraints are unsatisfiable
    """
    return ExtremumSearch(ScopedChecker(solver)).max_unsigned(expr)


def min_possible_signed_solution_for_bv(solver: SolverBackend, expr: Any) -> int:
    """Like ``min_possible_solution_for_bv`` but reading ``expr`` as two's complement."""
    return ExtremumSearch(ScopedChecker(solver)).min_signed(expr)


def max_possible_signed_solution_for_bv(solver: SolverBackend, expr: Any) -> int:
    """Like ``max_possible_solution_for_bv`` but reading ``expr`` as two's complement."""
    return ExtremumSearch(ScopedChecker(solver)).max_signed(expr)
