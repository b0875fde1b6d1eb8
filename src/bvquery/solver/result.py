"""
Solver and query result types.
"""
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Iterator


class SolverResult(Enum):
    """Result from SMT solver check."""
    SAT = "sat"
    UNSAT = "unsat"
    UNKNOWN = "unknown"


class SolutionBound(Enum):
    """Whether a reported solution set is complete or only a lower bound."""
    EXACTLY = "exactly"
    AT_LEAST = "at_least"


@dataclass(frozen=True)
class SolutionCount:
    """Number of solutions of an expression.

    Attributes:
        bound: EXACTLY if ``count`` is the true count, AT_LEAST if the
            enumeration cap was hit and more solutions may exist
        count: Number of distinct solutions found
    """
    bound: SolutionBound
    count: int

    @classmethod
    def exactly(cls, count: int) -> "SolutionCount":
        return cls(SolutionBound.EXACTLY, count)

    @classmethod
    def at_least(cls, count: int) -> "SolutionCount":
        return cls(SolutionBound.AT_LEAST, count)

    @property
    def is_exact(self) -> bool:
        return self.bound is SolutionBound.EXACTLY

    def __str__(self) -> str:
        if self.is_exact:
            return f"Exactly({self.count})"
        return f"AtLeast({self.count})"


@dataclass(frozen=True)
class PossibleSolutions:
    """Concrete values an expression can take.

    An EXACTLY set is closed: it holds every value the expression can take
    under the constraints in force when it was computed, and no others. An
    AT_LEAST set is a sample with no completeness guarantee.

    Values are unsigned integers unless converted with ``as_signed``.

    Attributes:
        bound: EXACTLY or AT_LEAST
        values: Distinct concrete values
    """
    bound: SolutionBound
    values: FrozenSet[int]

    @classmethod
    def exactly(cls, values: Iterable[int]) -> "PossibleSolutions":
        return cls(SolutionBound.EXACTLY, frozenset(values))

    @classmethod
    def at_least(cls, values: Iterable[int]) -> "PossibleSolutions":
        return cls(SolutionBound.AT_LEAST, frozenset(values))

    @property
    def is_exact(self) -> bool:
        return self.bound is SolutionBound.EXACTLY

    def count(self) -> SolutionCount:
        """Drop the values, keeping only their number and the bound."""
        return SolutionCount(self.bound, len(self.values))

    def as_signed(self, width: int) -> "PossibleSolutions":
        """Reinterpret every value as a ``width``-bit two's-complement integer.

        Args:
            width: Bit width of the expression the values came from

        Returns:
            PossibleSolutions with the same bound and signed values
        """
        sign_bit = 1 << (width - 1)
        return PossibleSolutions(
            self.bound,
            frozenset(v - (1 << width) if v & sign_bit else v for v in self.values)
        )

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def __str__(self) -> str:
        vals = ", ".join(str(v) for v in sorted(self.values))
        if self.is_exact:
            return f"Exactly({{{vals}}})"
        return f"AtLeast({{{vals}}})"
