"""
Element type detection for pybuckingham.

Inspects a matrix and determines which numeric domain should factorize it.
"""

import numbers
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

import numpy as np


class ElementKind(Enum):
    """Kind of entries found in a matrix."""
    EMPTY = "empty"                      # No entries at all
    INTEGER = "integer"                  # Machine or Python integers
    COMPLEX_INTEGER = "complex_integer"  # Complex values with integer parts
    RATIONAL = "rational"                # Fraction / sympy.Rational
    FLOAT = "float"                      # Real floating point
    COMPLEX = "complex"                  # Complex floating point


@dataclass
class DomainDetection:
    """
    Result of inspecting a matrix.

    Attributes
    ----------
    kind : ElementKind
        Widest entry kind present
    recommended : str
        Name of the domain to factorize in
    promoted : bool
        Whether entries change type on the way (integer -> float)
    """
    kind: ElementKind
    recommended: str
    promoted: bool


_RECOMMENDED = {
    ElementKind.EMPTY: ("fraction", False),
    ElementKind.INTEGER: ("float64", True),
    ElementKind.COMPLEX_INTEGER: ("complex128", True),
    ElementKind.RATIONAL: ("fraction", False),
    ElementKind.FLOAT: ("float64", False),
    ElementKind.COMPLEX: ("complex128", False),
}


def _classify_scalar(x) -> ElementKind:
    if isinstance(x, (bool, np.bool_, int, np.integer)):
        return ElementKind.INTEGER
    if isinstance(x, Fraction):
        return ElementKind.RATIONAL
    if isinstance(x, (float, np.floating)):
        return ElementKind.FLOAT
    if isinstance(x, (complex, np.complexfloating)):
        if x.real == int(x.real) and x.imag == int(x.imag):
            return ElementKind.COMPLEX_INTEGER
        return ElementKind.COMPLEX
    if isinstance(x, numbers.Rational) or getattr(x, 'is_Rational', False):
        return ElementKind.RATIONAL
    raise TypeError(f"Unsupported matrix entry of type {type(x).__name__}")


def _combine(a: ElementKind, b: ElementKind) -> ElementKind:
    """Widest of two kinds; mixing exact and inexact entries goes inexact."""
    kinds = {a, b}
    if ElementKind.COMPLEX in kinds:
        return ElementKind.COMPLEX
    if ElementKind.COMPLEX_INTEGER in kinds:
        if kinds & {ElementKind.FLOAT, ElementKind.RATIONAL}:
            return ElementKind.COMPLEX
        return ElementKind.COMPLEX_INTEGER
    if ElementKind.FLOAT in kinds:
        return ElementKind.FLOAT
    if ElementKind.RATIONAL in kinds:
        return ElementKind.RATIONAL
    if ElementKind.INTEGER in kinds:
        return ElementKind.INTEGER
    return ElementKind.EMPTY


def detect_element_kind(A: np.ndarray) -> ElementKind:
    """Classify the entries of ``A``."""
    if A.size == 0:
        return ElementKind.EMPTY
    if A.dtype.kind in 'biu':
        return ElementKind.INTEGER
    if A.dtype.kind == 'f':
        return ElementKind.FLOAT
    if A.dtype.kind == 'c':
        return ElementKind.COMPLEX

    kind = ElementKind.EMPTY
    for x in A.ravel():
        kind = _combine(kind, _classify_scalar(x))
    return kind


def detect_domain(A: np.ndarray) -> DomainDetection:
    """
    Determine the domain a matrix should be factorized in.

    Integers are promoted to float64 since division is not closed over
    them; exact rationals stay exact.
    """
    kind = detect_element_kind(A)
    recommended, promoted = _RECOMMENDED[kind]
    return DomainDetection(kind=kind, recommended=recommended, promoted=promoted)


def print_detection(A) -> None:
    """Print detected element kind of ``A`` (for debugging)."""
    detection = detect_domain(np.asarray(A))

    print("Domain Detection")
    print("=" * 50)
    print(f"Shape: {np.shape(A)}")
    print(f"Element kind: {detection.kind.value}")
    print(f"Recommended domain: {detection.recommended}")
    print(f"Promoted: {detection.promoted}")
