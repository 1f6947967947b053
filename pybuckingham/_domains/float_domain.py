"""
Floating point domains using NumPy + SciPy.

Integer matrices are promoted here: division is not closed over integers.
"""

import numpy as np
from scipy.linalg import solve_triangular

from .base import InexactDomain


class FloatDomain(InexactDomain):
    """
    Real floating point domain (FP64).

    Pivots below ``min(n, m) * eps`` are treated as zero.
    """

    name = "float64"
    dtype = np.float64

    def asarray(self, A):
        A = np.array(A, copy=True)
        if A.dtype.kind == 'c':
            raise TypeError(
                "Complex entries cannot be represented in the float64 domain. "
                "Use domain='complex128'."
            )
        return A.astype(self.dtype)

    def solve_upper_triangular(self, U, b):
        if U.shape[0] == 0:
            return np.zeros(0, dtype=self.dtype)
        return solve_triangular(U, b, lower=False)


class ComplexDomain(FloatDomain):
    """
    Complex floating point domain (complex128).

    Magnitude is the modulus; tolerance uses the eps of the real part.
    """

    name = "complex128"
    dtype = np.complex128

    def asarray(self, A):
        return np.array(A, copy=True).astype(self.dtype)

    def tolerance(self, shape):
        eps = np.finfo(np.float64).eps
        return min(shape) * eps

    def get_domain_info(self) -> dict:
        info = super().get_domain_info()
        info['eps'] = float(np.finfo(np.float64).eps)
        return info
