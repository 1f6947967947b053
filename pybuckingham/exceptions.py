"""
Exception types raised by pybuckingham.

Each error also derives from the builtin it specializes, so callers can
catch either the package error or the usual ``TypeError``/``ValueError``.
"""


class PyBuckinghamError(Exception):
    """Base class for all pybuckingham errors."""
    pass


class UnsupportedParameterError(PyBuckinghamError, TypeError):
    """
    Value offered as a parameter is not a Quantity, Unit, Dimension or Number.

    Raised at registration time; the registry is left unchanged.
    """
    pass


class UnknownOutputFormError(PyBuckinghamError, ValueError):
    """Requested rendering form is not 'expr' or 'string'."""
    pass


class RationalOverflowError(PyBuckinghamError, OverflowError):
    """
    Fixed-width rational arithmetic left the signed 64-bit range.

    Fatal for the factorization in progress. Use the arbitrary-precision
    'fraction' domain for inputs whose numerators/denominators grow large.
    """
    pass


class ExpressionError(PyBuckinghamError, RuntimeError):
    """Internal inconsistency while rendering a Pi group."""
    pass


__all__ = [
    "PyBuckinghamError",
    "UnsupportedParameterError",
    "UnknownOutputFormError",
    "RationalOverflowError",
    "ExpressionError",
]
