"""
pybuckingham: Buckingham-Pi dimensionless groups with exact linear algebra.

Full-pivoting LU factorization over float, complex and exact rational
domains, and the null space computation built on it.

Copyright (C) 2024 SGCX
Licensed under GPL-3.0
"""

__version__ = "1.0.0"

# Import main user-facing API
from .pi import pi_groups, buckingham_pi, BuckinghamPi
from .registry import ParameterRegistry
from . import units

# Import linear algebra and domain utilities (for advanced users)
from ._core import lu_decomposition_with_full_pivoting, lu_nullspace
from ._domains import get_domain, list_available_domains
from .exceptions import (
    PyBuckinghamError,
    UnsupportedParameterError,
    UnknownOutputFormError,
    RationalOverflowError,
    ExpressionError,
)

__all__ = [
    'pi_groups',
    'buckingham_pi',
    'BuckinghamPi',
    'ParameterRegistry',
    'units',
    'lu_decomposition_with_full_pivoting',
    'lu_nullspace',
    'get_domain',
    'list_available_domains',
    'PyBuckinghamError',
    'UnsupportedParameterError',
    'UnknownOutputFormError',
    'RationalOverflowError',
    'ExpressionError',
]
