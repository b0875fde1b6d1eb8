"""
Solution-space queries for bitvector expressions.

This package answers higher-level questions about the values a bitvector
expression can take under the constraints held by an SMT solver context:
satisfiability with transient constraints, equality possibility, bounded
enumeration of solutions, and minimum/maximum search.
"""

__version__ = "0.1.0"

from .errors import (
    QueryError,
    SolverError,
    PreconditionError,
    UnsatisfiableError,
    ScopeError,
)
from .solver import (
    SolverBackend,
    SolverConfig,
    SolverResult,
    SolutionBound,
    PossibleSolutions,
    SolutionCount,
    Z3Solver,
)
from .analysis import (
    ScopedChecker,
    EqualityOracle,
    ExtremumSearch,
    SolutionEnumerator,
)
from .checker import (
    sat,
    sat_with_extra_constraints,
    bvs_can_be_equal,
    bvs_must_be_equal,
    get_possible_solutions_for_bv,
    get_solution_count_for_bv,
    get_a_solution_for_bv,
    min_possible_solution_for_bv,
    max_possible_solution_for_bv,
    min_possible_signed_solution_for_bv,
    max_possible_signed_solution_for_bv,
)

__all__ = [
    "QueryError",
    "SolverError",
    "PreconditionError",
    "UnsatisfiableError",
    "ScopeError",
    "SolverBackend",
    "SolverConfig",
    "SolverResult",
    "SolutionBound",
    "PossibleSolutions",
    "SolutionCount",
    "Z3Solver",
    "ScopedChecker",
    "EqualityOracle",
    "ExtremumSearch",
    "SolutionEnumerator",
    "sat",
    "sat_with_extra_constraints",
    "bvs_can_be_equal",
    "bvs_must_be_equal",
    "get_possible_solutions_for_bv",
    "get_solution_count_for_bv",
    "get_a_solution_for_bv",
    "min_possible_solution_for_bv",
    "max_possible_solution_for_bv",
    "min_possible_signed_solution_for_bv",
    "max_possible_signed_solution_for_bv",
]
