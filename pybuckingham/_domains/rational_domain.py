"""
Exact rational domains.

``fraction`` uses Python's arbitrary-precision ``Fraction``; ``rational64``
uses the same representation but rejects any result whose numerator or
denominator leaves the signed 64-bit range.
"""

from fractions import Fraction
import numpy as np

from .base import ExactDomain
from .._utils import to_fraction
from ..exceptions import RationalOverflowError


INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


class FractionDomain(ExactDomain):
    """
    Arbitrary-precision exact rationals.

    Numerators and denominators grow without bound, so elimination never
    overflows. Floats are rejected instead of being approximated.
    """

    name = "fraction"

    @property
    def zero(self):
        return Fraction(0)

    @property
    def one(self):
        return Fraction(1)

    def asarray(self, A):
        A = np.asarray(A)
        if A.dtype.kind in 'fc':
            raise TypeError(
                f"Floating point entries cannot be used in the exact "
                f"'{self.name}' domain. Use domain='float64' or convert "
                f"the entries to Fraction first."
            )
        out = np.empty(A.shape, dtype=object)
        for idx, x in np.ndenumerate(A):
            out[idx] = self.convert(x)
        return out

    def convert(self, x):
        if isinstance(x, (float, complex, np.floating, np.complexfloating)):
            raise TypeError(
                f"Entry {x!r} is not exact; '{self.name}' domain requires "
                f"integers or rationals"
            )
        return to_fraction(x)


class Rational64Domain(FractionDomain):
    """
    Fixed-width exact rationals (64-bit numerator and denominator).

    Every primitive operation is checked; leaving the representable range
    raises ``RationalOverflowError`` instead of wrapping around.
    """

    name = "rational64"

    def convert(self, x):
        return self._check(super().convert(x))

    def multiply(self, a, b):
        return self._check(a * b)

    def divide(self, a, b):
        return self._check(a / b)

    def subtract(self, a, b):
        return self._check(a - b)

    def _check(self, value):
        if isinstance(value, np.ndarray):
            for x in value.ravel():
                self._check_scalar(x)
        else:
            self._check_scalar(value)
        return value

    @staticmethod
    def _check_scalar(x):
        num, den = x.numerator, x.denominator
        if not (INT64_MIN <= num <= INT64_MAX and den <= INT64_MAX):
            raise RationalOverflowError(
                f"Rational {num}/{den} exceeds 64-bit range. "
                f"Use domain='fraction' for arbitrary precision."
            )

    def get_domain_info(self) -> dict:
        info = super().get_domain_info()
        info['bits'] = 64
        return info
