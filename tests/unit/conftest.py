"""
Pytest configuration and fixtures for bvquery tests.
"""
import sys
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from bvquery.solver import SolverConfig, Z3Solver  # noqa: E402


@pytest.fixture
def solver():
    """A fresh Z3 solver context with default settings."""
    return Z3Solver(SolverConfig())
