"""
Abstract base classes for numeric domains.

Defines the interface the full-pivot factorizer is written against.
"""

from abc import ABC, abstractmethod
import numpy as np
from typing import Tuple


class DomainBase(ABC):
    """
    Minimal numeric-domain interface.

    A domain owns the element type of a matrix: how entries are converted,
    how magnitudes compare, which tolerance separates a usable pivot from
    rounding noise, and the arithmetic used during elimination. Arithmetic
    methods work elementwise on scalars and numpy arrays alike.
    """

    name: str = "base"
    exact: bool = False

    @property
    @abstractmethod
    def zero(self):
        """Additive identity."""
        pass

    @property
    @abstractmethod
    def one(self):
        """Multiplicative identity."""
        pass

    @abstractmethod
    def asarray(self, A) -> np.ndarray:
        """Private copy of ``A`` with entries converted to this domain."""
        pass

    @abstractmethod
    def magnitude(self, A):
        """Elementwise absolute value, comparable with ``tolerance``."""
        pass

    @abstractmethod
    def tolerance(self, shape: Tuple[int, int]):
        """Largest magnitude still treated as zero for a matrix of ``shape``."""
        pass

    @abstractmethod
    def solve_upper_triangular(self, U: np.ndarray, b: np.ndarray) -> np.ndarray:
        """Solve ``U x = b`` for nonsingular upper-triangular ``U``."""
        pass

    def zeros(self, shape) -> np.ndarray:
        return self.asarray(np.zeros(shape, dtype=int))

    def identity(self, n: int) -> np.ndarray:
        return self.asarray(np.eye(n, dtype=int))

    def multiply(self, a, b):
        return a * b

    def divide(self, a, b):
        return a / b

    def subtract(self, a, b):
        return a - b

    def is_negligible(self, x, tol) -> bool:
        """True if ``|x|`` is not strictly greater than ``tol``."""
        return not self.magnitude(x) > tol

    def get_domain_info(self) -> dict:
        """Get domain information."""
        return {
            'domain': self.name,
            'exact': self.exact,
        }

    def __repr__(self):
        return f"{type(self).__name__}()"


class ExactDomain(DomainBase):
    """Domain base class for exact arithmetic (tolerance is always zero)."""

    exact = True

    def tolerance(self, shape):
        return self.zero

    def magnitude(self, A):
        if isinstance(A, np.ndarray):
            return np.array([abs(x) for x in A.ravel()], dtype=object).reshape(A.shape)
        return abs(A)

    def solve_upper_triangular(self, U, b):
        """Exact back-substitution."""
        r = U.shape[0]
        x = self.zeros(r)
        for i in range(r - 1, -1, -1):
            s = b[i]
            for j in range(i + 1, r):
                s = self.subtract(s, self.multiply(U[i, j], x[j]))
            x[i] = self.divide(s, U[i, i])
        return x


class InexactDomain(DomainBase):
    """Domain base class for floating point arithmetic."""

    exact = False
    dtype = np.float64

    @property
    def zero(self):
        return self.dtype(0)

    @property
    def one(self):
        return self.dtype(1)

    def magnitude(self, A):
        return np.abs(A)

    def tolerance(self, shape):
        # eps of the real type, scaled by the number of elimination steps
        eps = np.finfo(self.dtype).eps
        return min(shape) * eps

    def get_domain_info(self) -> dict:
        info = super().get_domain_info()
        info['dtype'] = np.dtype(self.dtype).name
        info['eps'] = float(np.finfo(self.dtype).eps)
        return info
