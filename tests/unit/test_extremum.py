"""
Tests for ExtremumSearch.
"""
import pytest
import z3
from bvquery.analysis import ExtremumSearch, ScopedChecker
from bvquery.errors import PreconditionError, UnsatisfiableError


@pytest.fixture
def search(solver):
    return ExtremumSearch(ScopedChecker(solver))


def test_bounded_range(solver, search):
    """Test an 8-bit value constrained to [10, 12]."""
    x = z3.BitVec('x', 8)
    solver.add_constraint(z3.UGE(x, 10))
    solver.add_constraint(z3.ULE(x, 12))
    
    assert search.min_unsigned(x) == 10
    assert search.max_unsigned(x) == 12


def test_unconstrained_hits_endpoints(solver, search):
    """Test that unconstrained values return the range endpoints cheaply."""
    x = z3.BitVec('x', 32)
    
    assert search.min_unsigned(x) == 0
    assert search.max_unsigned(x) == 0xFFFFFFFF
    # one sat() plus one endpoint probe per search
    assert solver.num_checks == 4


def test_single_value(solver, search):
    """Test a value pinned to one constant."""
    x = z3.BitVec('x', 16)
    solver.add_constraint(x == 0x1234)
    
    assert search.min_unsigned(x) == 0x1234
    assert search.max_unsigned(x) == 0x1234


def test_search_cost_is_logarithmic(solver, search):
    """Test that a 32-bit search needs about width checks, not 2^width."""
    x = z3.BitVec('x', 32)
    solver.add_constraint(z3.UGE(x, 123456))
    solver.add_constraint(z3.ULE(x, 7654321))
    
    assert search.min_unsigned(x) == 123456
    assert solver.num_checks <= 32 + 2


def test_sparse_solutions(solver, search):
    """Test a solution set with gaps."""
    x = z3.BitVec('x', 8)
    solver.add_constraint(z3.Or(x == 3, x == 77, x == 200))
    
    assert search.min_unsigned(x) == 3
    assert search.max_unsigned(x) == 200


def test_derived_expression(solver, search):
    """Test searching over an expression rather than a symbol."""
    x = z3.BitVec('x', 8)
    solver.add_constraint(z3.ULE(x, 10))
    
    assert search.min_unsigned(x + 5) == 5
    assert search.max_unsigned(x + 5) == 15


def test_signed_and_unsigned_differ(solver, search):
    """Test that signed search reads the bit pattern as two's complement."""
    x = z3.BitVec('x', 8)
    solver.add_constraint(z3.Or(x == 0xFE, x == 0x03))
    
    assert search.min_unsigned(x) == 0x03
    assert search.max_unsigned(x) == 0xFE
    assert search.min_signed(x) == -2
    assert search.max_signed(x) == 3


def test_signed_unconstrained(search):
    """Test signed endpoints of an unconstrained value."""
    x = z3.BitVec('x', 8)
    
    assert search.min_signed(x) == -128
    assert search.max_signed(x) == 127


def test_signed_negative_range(solver, search):
    """Test a range lying entirely below zero."""
    x = z3.BitVec('x', 16)
    solver.add_constraint(x >= -300)
    solver.add_constraint(x <= -7)
    
    assert search.min_signed(x) == -300
    assert search.max_signed(x) == -7


def test_one_bit(solver, search):
    """Test the narrowest width."""
    b = z3.BitVec('b', 1)
    solver.add_constraint(b == 1)
    
    assert search.min_unsigned(b) == 1
    assert search.max_unsigned(b) == 1
    assert search.min_signed(b) == -1
    assert search.max_signed(b) == -1


def test_wide_bitvector(solver, search):
    """Test widths beyond a machine word."""
    x = z3.BitVec('x', 128)
    solver.add_constraint(z3.UGT(x, 1 << 100))
    
    assert search.min_unsigned(x) == (1 << 100) + 1
    assert search.max_unsigned(x) == (1 << 128) - 1


def test_unsatisfiable_is_an_error(solver, search):
    """Test that extrema of an empty solution set are reported as errors."""
    x = z3.BitVec('x', 8)
    solver.add_constraint(z3.UGT(x, 5))
    solver.add_constraint(z3.ULT(x, 5))
    
    with pytest.raises(UnsatisfiableError):
        search.min_unsigned(x)
    with pytest.raises(UnsatisfiableError):
        search.max_unsigned(x)
    with pytest.raises(UnsatisfiableError):
        search.min_signed(x)


def test_non_bitvector_rejected(search):
    """Test that non-bitvector expressions are rejected."""
    with pytest.raises(PreconditionError):
        search.min_unsigned(z3.Int('i'))
    with pytest.raises(PreconditionError):
        search.max_unsigned(5)


def test_search_leaves_no_constraints(solver, search):
    """Test that extremum searches do not modify the solver context."""
    x = z3.BitVec('x', 8)
    solver.add_constraint(z3.UGE(x, 40))
    before = solver.snapshot()
    
    search.min_unsigned(x)
    search.max_signed(x)
    
    assert solver.snapshot() == before
