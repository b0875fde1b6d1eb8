"""
Minimum and maximum values of a bitvector expression.

Both searches are binary searches over the numeric range of the expression's
bit width. Unsigned and signed interpretations are separate operations that
share one search skeleton, parameterized by an ``_Ordering``.
"""
from dataclasses import dataclass
from typing import Any, Callable
import logging

import z3

from ..errors import UnsatisfiableError
from .scoped_checker import ScopedChecker, bv_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Ordering:
    """Numeric range and comparison builders for one interpretation of a width."""
    name: str
    low: int
    high: int
    at_most: Callable[[Any, int], Any]
    at_least: Callable[[Any, int], Any]

    @classmethod
    def unsigned(cls, width: int) -> "_Ordering":
        return cls(
            name="unsigned",
            low=0,
            high=(1 << width) - 1,
            at_most=lambda e, v: z3.ULE(e, z3.BitVecVal(v, width, e.ctx)),
            at_least=lambda e, v: z3.UGE(e, z3.BitVecVal(v, width, e.ctx)),
        )

    @classmethod
    def signed(cls, width: int) -> "_Ordering":
        return cls(
            name="signed",
            low=-(1 << (width - 1)),
            high=(1 << (width - 1)) - 1,
            at_most=lambda e, v: e <= z3.BitVecVal(v, width, e.ctx),
            at_least=lambda e, v: e >= z3.BitVecVal(v, width, e.ctx),
        )


class ExtremumSearch:
    """Finds the smallest and largest values an expression can take.

    Each search costs about ``width + 2`` scoped checks in the worst case.
    """

    def __init__(self, checker: ScopedChecker):
        self.checker = checker

    def min_unsigned(self, expr: Any) -> int:
        """Lowest value of ``expr`` read as an unsigned integer."""
        return self._search(expr, _Ordering.unsigned(bv_width(expr)), find_min=True)

    def max_unsigned(self, expr: Any) -> int:
        """Highest value of ``expr`` read as an unsigned integer."""
        return self._search(expr, _Ordering.unsigned(bv_width(expr)), find_min=False)

    def min_signed(self, expr: Any) -> int:
        """Lowest value of ``expr`` read as a two's-complement integer."""
        return self._search(expr, _Ordering.signed(bv_width(expr)), find_min=True)

    def max_signed(self, expr: Any) -> int:
        """Highest value of ``expr`` read as a two's-complement integer."""
        return self._search(expr, _Ordering.signed(bv_width(expr)), find_min=False)

    def _search(self, expr: Any, order: _Ordering, find_min: bool) -> int:
        """Binary search for the extreme achievable value.

        Invariant: some solution lies in [low, high] and none lies outside
        it on the side being searched toward. When the interval collapses
        its single point is therefore a solution.

        Raises:
            UnsatisfiableError: If the constraints have no solution at all
        """
        kind = "min" if find_min else "max"
        if not self.checker.sat():
            raise UnsatisfiableError(
                f"{kind} {order.name} value of {expr} is undefined: constraints are unsatisfiable"
            )

        low, high = order.low, order.high

        # Unconstrained or loosely constrained values usually hit the endpoint.
        endpoint = low if find_min else high
        probe = order.at_most(expr, low) if find_min else order.at_least(expr, high)
        if self.checker.check([probe]):
            logger.debug("%s %s of %s is range endpoint %d", kind, order.name, expr, endpoint)
            return endpoint
        if find_min:
            low += 1
        else:
            high -= 1

        while low < high:
            if find_min:
                mid = (low + high) // 2
                if self.checker.check([order.at_most(expr, mid)]):
                    high = mid
                else:
                    low = mid + 1
            else:
                mid = (low + high + 1) // 2
                if self.checker.check([order.at_least(expr, mid)]):
                    low = mid
                else:
                    high = mid - 1
            logger.debug("%s %s search of %s narrowed to [%d, %d]", kind, order.name, expr, low, high)

        return low
