"""Solver context layer: the SMT backend the queries run against."""

from .base import SolverBackend
from .config import SolverConfig
from .result import SolverResult, SolutionBound, PossibleSolutions, SolutionCount
from .z3_solver import Z3Solver

__all__ = [
    "SolverBackend",
    "SolverConfig",
    "SolverResult",
    "SolutionBound",
    "PossibleSolutions",
    "SolutionCount",
    "Z3Solver",
]
