"""
Abstract base interface for the solver context consumed by the query layer.
"""
from typing import Protocol, Any
from .result import SolverResult


class SolverBackend(Protocol):
    """Protocol defining the solver context the query layer consumes.

    The query layer only ever uses scoped excursions (push, assert, check,
    read model, pop). Persistent constraints are added by the caller.
    """
    
    def add_constraint(self, constraint: Any) -> None:
        """Add a constraint to the current scope.
        
        Args:
            constraint: Solver-specific boolean constraint object

        Raises:
            PreconditionError: If the backend rejects the constraint
        """
        ...
    
    def check(self) -> SolverResult:
        """Check satisfiability of all asserted constraints.
        
        Returns:
            SAT, UNSAT or UNKNOWN

        Raises:
            SolverError: If the backend itself faulted
        """
        ...

    def reason_unknown(self) -> str:
        """Explain the most recent UNKNOWN answer."""
        ...
    
    def eval_bv(self, expr: Any) -> int:
        """Evaluate a bitvector expression in the model of the last SAT check.
        
        Returns:
            Unsigned value of the expression
        """
        ...
    
    def push(self) -> None:
        """Push a new assertion scope."""
        ...
    
    def pop(self) -> None:
        """Pop the most recent assertion scope.

        Raises:
            ScopeError: If no scope is open
        """
        ...

    def num_scopes(self) -> int:
        """Return the number of currently open scopes."""
        ...
    
    def reset(self) -> None:
        """Reset the solver state, clearing all constraints."""
        ...
