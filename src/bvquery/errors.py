"""
Exceptions raised by the solution-space query layer.
"""


class QueryError(Exception):
    """Base class for all errors raised by bvquery."""


class SolverError(QueryError):
    """The SMT backend failed to answer a query.

    Raised for ``unknown`` answers (timeouts, resource limits, interrupts),
    for faults inside the native solver library, and for models that
    contradict constraints the solver was given. Never a stand-in for
    "unsatisfiable".
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class PreconditionError(QueryError, ValueError):
    """A query was called with arguments it cannot accept."""


class UnsatisfiableError(PreconditionError):
    """A query needing at least one solution ran under unsatisfiable constraints."""


class ScopeError(QueryError, RuntimeError):
    """The push/pop discipline on a solver context was broken."""
