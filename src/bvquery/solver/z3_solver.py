"""
Z3 SMT solver backend implementation.
"""
import time
from typing import Any, Optional, Dict, Tuple
import z3

from ..errors import PreconditionError, ScopeError, SolverError
from .config import SolverConfig
from .result import SolverResult


class Z3Solver:
    """Z3 solver context.
    
    Holds the persistent constraint set of one symbolic-execution session
    and exposes the scoped primitives the query layer builds on. Not safe
    for concurrent use; give each parallel branch its own instance.
    """
    
    def __init__(self, config: Optional[SolverConfig] = None, ctx: Optional[z3.Context] = None):
        """Initialize Z3 solver instance.

        Args:
            config: Backend settings (defaults to SolverConfig.from_env())
            ctx: Z3 context the constraints live in (defaults to the global one)
        """
        self.config = config if config is not None else SolverConfig.from_env()
        self.solver = z3.Solver(ctx=ctx)
        self._apply_config()
        self._model: Optional[z3.ModelRef] = None
        self.num_checks = 0
        self.solver_time_ms = 0.0

    def _apply_config(self) -> None:
        if self.config.timeout_ms is not None:
            self.solver.set(timeout=self.config.timeout_ms)
        if self.config.random_seed is not None:
            self.solver.set(random_seed=self.config.random_seed)
    
    def add_constraint(self, constraint: Any) -> None:
        """Add a Z3 constraint to the current scope.
        
        Args:
            constraint: Z3 boolean expression

        Raises:
            PreconditionError: If Z3 rejects the constraint, e.g. because
                it is not boolean
        """
        try:
            self.solver.add(constraint)
        except z3.Z3Exception as e:
            raise PreconditionError(f"invalid constraint {constraint!r}: {e}") from e
    
    def check(self) -> SolverResult:
        """Check satisfiability of constraints.
        
        Returns:
            SAT, UNSAT or UNKNOWN

        Raises:
            SolverError: If Z3 raised while checking
        """
        self._model = None
        start_time = time.time()
        try:
            result = self.solver.check()
        except z3.Z3Exception as e:
            raise SolverError(f"z3 failed during check: {e}") from e
        finally:
            self.num_checks += 1
            self.solver_time_ms += (time.time() - start_time) * 1000
        
        if result == z3.sat:
            self._model = self.solver.model()
            return SolverResult.SAT
        if result == z3.unsat:
            return SolverResult.UNSAT
        return SolverResult.UNKNOWN

    def check_sat(self) -> SolverResult:
        """Check satisfiability of constraints (alias of ``check``)."""
        return self.check()

    def reason_unknown(self) -> str:
        """Explain the most recent UNKNOWN answer."""
        return self.solver.reason_unknown()

    def eval_bv(self, expr: Any) -> int:
        """Evaluate a bitvector expression in the model of the last SAT check.

        Symbols the model leaves unassigned are completed with arbitrary
        values, so the result is always a concrete number.

        Args:
            expr: Z3 bitvector expression

        Returns:
            Unsigned value of the expression
        """
        if self._model is None:
            raise SolverError("no model available: last check was not sat")
        value = self._model.eval(expr, model_completion=True)
        if not z3.is_bv_value(value):
            raise SolverError(f"model did not evaluate {expr} to a bitvector constant")
        return value.as_long()
    
    def get_model(self) -> Optional[Dict[str, Any]]:
        """Extract the model of the last SAT check.
        
        Returns:
            Dictionary mapping variable names to their values, or None if
            the last check was not sat
        """
        if self._model is None:
            return None
        
        model = self._model
        result = {}
        
        for decl in model:
            name = decl.name()
            value = model[decl]
            
            # Convert Z3 values to Python types
            if z3.is_int_value(value):
                result[name] = value.as_long()
            elif z3.is_bv_value(value):
                result[name] = value.as_long()
            elif z3.is_true(value):
                result[name] = True
            elif z3.is_false(value):
                result[name] = False
            else:
                result[name] = str(value)
        
        return result
    
    def push(self) -> None:
        """Push a new assertion scope."""
        self.solver.push()
    
    def pop(self) -> None:
        """Pop the most recent assertion scope."""
        if self.solver.num_scopes() == 0:
            raise ScopeError("pop without a matching push")
        self._model = None
        self.solver.pop()

    def num_scopes(self) -> int:
        """Return the number of currently open scopes."""
        return self.solver.num_scopes()
    
    def reset(self) -> None:
        """Reset solver state."""
        self.solver.reset()
        self._apply_config()
        self._model = None

    def snapshot(self) -> Tuple[Tuple[str, ...], int]:
        """Return an image of the persistent state for later comparison.

        Returns:
            Tuple of (assertion s-expressions, scope depth)
        """
        return tuple(a.sexpr() for a in self.solver.assertions()), self.solver.num_scopes()
