"""
Core algorithms (domain-agnostic).
"""

from .lu import lu_decomposition_with_full_pivoting, LUDecomposition
from .nullspace import lu_nullspace, NullSpaceBasis
from .matrix import build_exponent_matrix, ExponentMatrix
from .groups import assemble_groups, PiGroup

__all__ = [
    "lu_decomposition_with_full_pivoting",
    "LUDecomposition",
    "lu_nullspace",
    "NullSpaceBasis",
    "build_exponent_matrix",
    "ExponentMatrix",
    "assemble_groups",
    "PiGroup",
]
