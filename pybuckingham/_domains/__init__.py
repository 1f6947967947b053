"""
Numeric domain selection and management.

Provides a unified interface for float64, complex128 and exact rational
(arbitrary precision and fixed 64-bit) arithmetic.
"""

from typing import Optional

import numpy as np

from .base import DomainBase, ExactDomain, InexactDomain
from .domain_detector import (
    detect_domain,
    detect_element_kind,
    DomainDetection,
    ElementKind,
)
from .float_domain import FloatDomain, ComplexDomain
from .rational_domain import FractionDomain, Rational64Domain


_DOMAINS = {
    'float64': FloatDomain,
    'complex128': ComplexDomain,
    'fraction': FractionDomain,
    'rational64': Rational64Domain,
}


def get_domain(domain='auto', A: Optional[np.ndarray] = None) -> DomainBase:
    """
    Get numeric domain.
    
    Parameters
    ----------
    domain : str or DomainBase
        Domain selection:
        - 'auto': Detect from the entries of ``A``
        - 'float64': Real floating point (integers are promoted)
        - 'complex128': Complex floating point
        - 'fraction': Exact rationals, arbitrary precision
        - 'rational64': Exact rationals, 64-bit checked
        A ``DomainBase`` instance is returned unchanged.
    
    A : ndarray, optional
        Matrix to inspect when ``domain='auto'``
    
    Returns
    -------
    DomainBase
        Domain instance
    
    Examples
    --------
    >>> # Auto-select from the matrix entries
    >>> domain = get_domain('auto', np.array([[1, 2], [3, 4]]))
    >>> domain.name
    'float64'
    
    >>> # Opt into fixed-width rationals
    >>> domain = get_domain('rational64')
    """
    if isinstance(domain, DomainBase):
        return domain

    if domain == 'auto':
        if A is None:
            return FractionDomain()
        detection = detect_domain(np.asarray(A))
        return _DOMAINS[detection.recommended]()

    if domain in _DOMAINS:
        return _DOMAINS[domain]()

    raise ValueError(
        f"Unknown domain: '{domain}'\n"
        f"Valid options: 'auto', " + ", ".join(f"'{d}'" for d in _DOMAINS)
    )


def list_available_domains() -> list:
    """List names of available domains."""
    return list(_DOMAINS)


def print_domain_info():
    """Print detailed domain information (diagnostic)."""
    print("pybuckingham Domain Status")
    print("=" * 50)
    print(f"\nAvailable Domains:")
    for name, cls in _DOMAINS.items():
        info = cls().get_domain_info()
        kind = 'exact' if info['exact'] else f"inexact, eps={info['eps']:.3g}"
        print(f"  {name:<12} - {kind}")

    print(f"\nAuto-selection:")
    print(f"  integer          -> float64 (promoted)")
    print(f"  complex integer  -> complex128 (promoted)")
    print(f"  Fraction         -> fraction")
    print(f"  float            -> float64")
    print(f"  complex          -> complex128")


# Export main interface
__all__ = [
    'get_domain',
    'list_available_domains',
    'print_domain_info',
    'DomainBase',
    'ExactDomain',
    'InexactDomain',
    'FloatDomain',
    'ComplexDomain',
    'FractionDomain',
    'Rational64Domain',
    'detect_domain',
    'detect_element_kind',
    'DomainDetection',
    'ElementKind',
]


if __name__ == "__main__":
    print_domain_info()
