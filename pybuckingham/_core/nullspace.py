"""
Null space from the full-pivot LU factorization.

The rank used here is the factorization's own rank (completed elimination
steps); it is never recomputed by an independent method.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .lu import LUDecomposition, lu_decomposition_with_full_pivoting


@dataclass
class NullSpaceBasis:
    """Null space basis in permuted column order."""
    basis: np.ndarray    # Shape (m, m - rank); column c is a kernel vector
    q: np.ndarray        # Column permutation the rows of `basis` follow
    rank: int            # Rank of the factorized matrix

    @property
    def dim(self) -> int:
        """Number of basis vectors."""
        return self.basis.shape[1]

    def unpermuted(self) -> np.ndarray:
        """Basis with rows in the original column order of the matrix."""
        out = np.empty_like(self.basis)
        out[self.q, :] = self.basis
        return out


def lu_nullspace(
    A=None,
    lu: Optional[LUDecomposition] = None,
    tol=None,
    domain=None,
) -> NullSpaceBasis:
    """
    Basis of the null space of ``A``.
    
    Parameters
    ----------
    A : array_like, shape (n, m), optional
        Matrix whose kernel is wanted. Ignored if ``lu`` is given.
    lu : LUDecomposition, optional
        Precomputed factorization of the matrix
    tol, domain
        Passed to ``lu_decomposition_with_full_pivoting``
        
    Returns
    -------
    result : NullSpaceBasis
        ``m - rank`` basis vectors expressed in the permuted column order;
        ``A @ result.unpermuted()`` is zero
        
    Notes
    -----
    With r = rank and U1 = U[:r, :r], free column f (r <= f < m) gives the
    vector with x in its first r coordinates, where U1 x = -U[:r, f], a one
    at position f and zeros at the other free positions. Full column rank
    gives zero columns.
    """
    if lu is None:
        if A is None:
            raise ValueError("Must provide either A or lu")
        lu = lu_decomposition_with_full_pivoting(A, tol=tol, domain=domain)

    domain = lu.domain
    U = lu.U
    m = U.shape[1]
    r = lu.rank

    basis = domain.zeros((m, m - r))
    U1 = U[:r, :r]
    for c, f in enumerate(range(r, m)):
        rhs = domain.zeros(r)
        for i in range(r):
            rhs[i] = domain.subtract(domain.zero, U[i, f])
        basis[:r, c] = domain.solve_upper_triangular(U1, rhs)
        basis[f, c] = domain.one

    return NullSpaceBasis(basis=basis, q=lu.q.copy(), rank=r)
