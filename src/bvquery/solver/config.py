"""Backend settings for the Z3 solver context.

Settings can be overridden from the environment:

- ``$BVQUERY_TIMEOUT_MS``: per-check timeout in milliseconds
- ``$BVQUERY_RANDOM_SEED``: seed for Z3's randomized heuristics
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional
import os


TIMEOUT_ENV = "BVQUERY_TIMEOUT_MS"
RANDOM_SEED_ENV = "BVQUERY_RANDOM_SEED"


@dataclass(frozen=True)
class SolverConfig:
    """Describes how to configure a solver context."""

    timeout_ms: Optional[int] = None
    random_seed: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SolverConfig":
        """Build a config from environment variables.

        Unset or empty variables keep the default.
        """
        env = os.environ if environ is None else environ
        return cls(
            timeout_ms=_int_setting(env, TIMEOUT_ENV),
            random_seed=_int_setting(env, RANDOM_SEED_ENV),
        )


def _int_setting(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"${name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"${name} must be non-negative, got {value}")
    return value
