"""
LU decomposition with full pivoting.

Domain-generic: the same elimination runs over float64, complex128 and
exact rationals. Exactness is preserved for rational input.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .._domains import get_domain, DomainBase
from .._utils import check_matrix

LOG = logging.getLogger(__name__)


@dataclass
class LUDecomposition:
    """Result of LU decomposition with full pivoting."""
    L: np.ndarray        # Unit lower triangular, shape (n, n)
    U: np.ndarray        # Upper triangular, shape (n, m)
    p: np.ndarray        # Row permutation (0-indexed)
    q: np.ndarray        # Column permutation (0-indexed)
    rank: int            # Number of elimination steps completed
    tol: object          # Tolerance used
    domain: DomainBase   # Domain the factors live in

    def __iter__(self):
        # L, U, p, q = lu_decomposition_with_full_pivoting(A)
        return iter((self.L, self.U, self.p, self.q))

    def reconstruct(self) -> np.ndarray:
        """``L @ U``, equal to ``A[p][:, q]``."""
        return self.L @ self.U

    def permute(self, A) -> np.ndarray:
        """Rows and columns of ``A`` in pivot order."""
        return np.asarray(A)[self.p][:, self.q]


def _find_pivot(magnitude: np.ndarray):
    """
    Position of the largest entry.

    Ties go to the first maximum in column-major order (columns outer,
    rows inner), which fixes the basis returned by the null-space solver.
    """
    nrows, ncols = magnitude.shape
    if magnitude.dtype != object:
        idx = int(np.argmax(magnitude.ravel(order='F')))
        j, i = divmod(idx, nrows)
        return i, j

    best, pos = None, (0, 0)
    for j in range(ncols):
        for i in range(nrows):
            if best is None or magnitude[i, j] > best:
                best, pos = magnitude[i, j], (i, j)
    return pos


def lu_decomposition_with_full_pivoting(
    A,
    tol=None,
    domain=None,
) -> LUDecomposition:
    """
    LU decomposition with full (row and column) pivoting.
    
    Parameters
    ----------
    A : array_like, shape (n, m)
        Matrix to decompose (not modified). May be rectangular or singular.
    tol : optional
        Pivots whose magnitude is not strictly greater than ``tol`` end the
        elimination. Defaults to zero for exact domains and
        ``min(n, m) * eps`` for floating point domains.
    domain : str or DomainBase, optional
        Numeric domain, see ``get_domain``. Defaults to 'auto'.
        
    Returns
    -------
    result : LUDecomposition
        Factors with ``L @ U == A[p][:, q]``
        
    Raises
    ------
    RationalOverflowError
        If the 'rational64' domain overflows during elimination
        
    Notes
    -----
    Algorithm, for step k:
    1. Find the largest-magnitude entry of the trailing block U[k:, k:]
    2. Stop if it is not above tolerance; the rank is k
    3. Swap it into position (k, k), recording the swaps in p and q
    4. Store the multipliers in L[k+1:, k] and eliminate below the pivot
    
    Examples
    --------
    >>> A = np.array([[4, 3], [6, 3]])
    >>> L, U, p, q = lu_decomposition_with_full_pivoting(A)
    >>> U
    array([[6., 3.],
           [0., 1.]])
    >>> p, q
    (array([1, 0]), array([0, 1]))
    """
    A = check_matrix(A)
    if domain is None:
        domain = 'auto'
    domain = get_domain(domain, A)

    U = domain.asarray(A)
    n, m = U.shape
    if tol is None:
        tol = domain.tolerance((n, m))

    L = domain.identity(n)
    p = np.arange(n)
    q = np.arange(m)
    rank = 0

    for k in range(min(n, m)):
        i, j = _find_pivot(domain.magnitude(U[k:, k:]))
        i, j = i + k, j + k
        if domain.is_negligible(U[i, j], tol):
            break

        if i > k:
            p[[k, i]] = p[[i, k]]
            U[[k, i], :] = U[[i, k], :]
            L[[k, i], :k] = L[[i, k], :k]
        if j > k:
            q[[k, j]] = q[[j, k]]
            U[:, [k, j]] = U[:, [j, k]]

        tau = domain.divide(U[k + 1:, k], U[k, k])
        L[k + 1:, k] = tau
        U[k + 1:, k:] = domain.subtract(
            U[k + 1:, k:],
            domain.multiply(tau[:, np.newaxis], U[k, k:][np.newaxis, :]),
        )
        U[k + 1:, k] = domain.zero
        rank += 1

    LOG.debug("Full-pivot LU of %dx%d matrix in %s domain: rank %d",
              n, m, domain.name, rank)

    return LUDecomposition(L=L, U=U, p=p, q=q, rank=rank, tol=tol, domain=domain)
