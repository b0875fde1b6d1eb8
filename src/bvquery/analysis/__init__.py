"""Solution-space queries built on scoped satisfiability checks."""

from .scoped_checker import ScopedChecker
from .equality import EqualityOracle
from .extremum import ExtremumSearch
from .enumerator import SolutionEnumerator

__all__ = [
    "ScopedChecker",
    "EqualityOracle",
    "ExtremumSearch",
    "SolutionEnumerator",
]
