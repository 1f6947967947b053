"""
Utility functions.
"""

import numbers
from fractions import Fraction

import numpy as np


def check_matrix(A, name='A'):
    """Validate matrix input (any numeric dtype, including object)."""
    if isinstance(A, np.ndarray):
        A = A.copy()
    else:
        A = np.array(A, dtype=object if _holds_fractions(A) else None)
        if A.size == 0 and A.ndim < 2:
            A = A.reshape(0, 0)
    if A.ndim != 2:
        raise ValueError(f"{name} must be 2-dimensional")
    if A.dtype.kind in 'fc' and not np.all(np.isfinite(A)):
        raise ValueError(f"{name} contains NaN or Inf")
    if A.dtype.kind == 'O' and not all(_is_finite(x) for x in A.flat):
        raise ValueError(f"{name} contains NaN or Inf")
    if A.dtype.kind not in 'biufcO':
        raise TypeError(f"{name} has non-numeric dtype {A.dtype}")
    return A


def _is_finite(x):
    # Exact rationals are always finite; only inexact entries need checking
    if isinstance(x, numbers.Rational) or getattr(x, "is_Rational", False):
        return True
    if isinstance(x, numbers.Complex):
        return bool(np.isfinite(complex(x)))
    return True


def _holds_fractions(rows):
    """True if a nested sequence contains any exact non-machine number."""
    for row in rows:
        items = row if isinstance(row, (list, tuple)) else [row]
        for x in items:
            if isinstance(x, Fraction) or (
                isinstance(x, numbers.Rational) and not isinstance(x, (int, np.integer))
            ):
                return True
    return False


def to_fraction(value):
    """Convert an exact rational scalar to Fraction."""
    if isinstance(value, Fraction):
        return value
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Cannot convert {type(value).__name__} to Fraction")
    if isinstance(value, (int, np.integer)):
        return Fraction(int(value))
    # sympy.Rational keeps numerator and denominator in p and q
    if getattr(value, "is_Rational", False):
        return Fraction(int(value.p), int(value.q))
    if isinstance(value, numbers.Rational):
        return Fraction(int(value.numerator), int(value.denominator))
    raise TypeError(f"Cannot convert {type(value).__name__} to an exact rational")
