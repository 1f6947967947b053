"""
Map null space vectors back to (parameter, exponent) terms.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import List, Sequence, Tuple

from .nullspace import NullSpaceBasis


@dataclass(frozen=True)
class PiGroup:
    """
    One dimensionless monomial.

    Terms follow the pivoted parameter order, not registration order, and
    omit zero exponents.
    """
    terms: Tuple[Tuple[str, object], ...]

    @property
    def symbols(self) -> List[str]:
        return [s for s, _ in self.terms]

    @property
    def exponents(self) -> List[object]:
        return [a for _, a in self.terms]

    def as_dict(self) -> dict:
        return dict(self.terms)

    def __len__(self):
        return len(self.terms)

    def __iter__(self):
        return iter(self.terms)


def assemble_groups(nullspace: NullSpaceBasis, symbols: Sequence[str]) -> List[PiGroup]:
    """
    Translate each basis vector into a PiGroup.
    
    Parameters
    ----------
    nullspace : NullSpaceBasis
        Basis in permuted column order
    symbols : sequence of str
        Parameter symbols in original (registration) order
        
    Returns
    -------
    list of PiGroup
        Row i of the basis belongs to ``symbols[q[i]]``.
    """
    if len(symbols) != len(nullspace.q):
        raise ValueError(
            f"Got {len(symbols)} symbols for a basis over {len(nullspace.q)} parameters"
        )
    permuted = [symbols[i] for i in nullspace.q]

    groups = []
    for c in range(nullspace.dim):
        terms = tuple(
            (symbol, _exact(a))
            for symbol, a in zip(permuted, nullspace.basis[:, c])
            if a != 0
        )
        groups.append(PiGroup(terms=terms))
    return groups


def _exact(a):
    # Keep Fractions exact; floats stay approximate
    if isinstance(a, Fraction):
        return a
    return a.item() if hasattr(a, 'item') else a
