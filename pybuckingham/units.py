"""
Dimensions, units and quantities.

A small dimension oracle: every accepted parameter kind (quantity, unit,
bare dimension, plain number) decomposes into exact exponents of named
base dimensions. Unit conversion is out of scope; each unit only carries
its scale to SI so that Pi groups can be evaluated numerically.
"""

import numbers
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Tuple

from ._utils import to_fraction
from .exceptions import UnsupportedParameterError


# Canonical order of the SI base dimensions; other names sort after these
BASE_DIMENSIONS = (
    "Length",
    "Mass",
    "Time",
    "Current",
    "Temperature",
    "Amount",
    "Luminosity",
)


def _dimension_sort_key(name):
    if name in BASE_DIMENSIONS:
        return (0, BASE_DIMENSIONS.index(name), name)
    return (1, 0, name)


class Dimension:
    """
    Immutable product of base dimensions raised to rational powers.

    >>> Dimension(Length=1, Time=-2)
    Dimension(Length^1 Time^-2)
    """

    __slots__ = ("_exponents",)

    def __init__(self, exponents=None, **kwargs):
        merged = {}
        items = list(dict(exponents or {}).items()) + list(kwargs.items())
        for name, power in items:
            merged[name] = merged.get(name, Fraction(0)) + to_fraction(power)
        self._exponents = tuple(
            (name, merged[name])
            for name in sorted(merged, key=_dimension_sort_key)
            if merged[name] != 0
        )

    @property
    def exponents(self) -> Tuple[Tuple[str, Fraction], ...]:
        """(name, exponent) pairs, zero exponents dropped."""
        return self._exponents

    def items(self):
        return iter(self._exponents)

    def is_dimensionless(self) -> bool:
        return not self._exponents

    def __mul__(self, other):
        if not isinstance(other, Dimension):
            return NotImplemented
        merged = dict(self._exponents)
        for name, power in other._exponents:
            merged[name] = merged.get(name, Fraction(0)) + power
        return Dimension(merged)

    def __truediv__(self, other):
        if not isinstance(other, Dimension):
            return NotImplemented
        return self * other ** -1

    def __pow__(self, power):
        power = to_fraction(power)
        return Dimension({name: p * power for name, p in self._exponents})

    def __eq__(self, other):
        return isinstance(other, Dimension) and self._exponents == other._exponents

    def __hash__(self):
        return hash(self._exponents)

    def pretty(self) -> str:
        if not self._exponents:
            return "NoDims"
        return " ".join(f"{name}^{power}" for name, power in self._exponents)

    def __repr__(self):
        return f"Dimension({self.pretty()})"

    __str__ = pretty


DIMENSIONLESS = Dimension()
LENGTH = Dimension(Length=1)
MASS = Dimension(Mass=1)
TIME = Dimension(Time=1)
CURRENT = Dimension(Current=1)
TEMPERATURE = Dimension(Temperature=1)
AMOUNT = Dimension(Amount=1)
LUMINOSITY = Dimension(Luminosity=1)

VELOCITY = LENGTH / TIME
ACCELERATION = LENGTH / TIME ** 2
FORCE = MASS * ACCELERATION
PRESSURE = FORCE / LENGTH ** 2
ENERGY = FORCE * LENGTH
DENSITY = MASS / LENGTH ** 3
DYNAMIC_VISCOSITY = MASS / (LENGTH * TIME)


@dataclass(frozen=True)
class Unit:
    """Named unit: a dimension plus its scale to the SI base units."""
    symbol: str
    dimension: Dimension
    scale: float = 1.0

    def __mul__(self, other):
        if isinstance(other, Unit):
            return Unit(f"{self.symbol}*{other.symbol}",
                        self.dimension * other.dimension,
                        self.scale * other.scale)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Unit):
            return Unit(f"{self.symbol}/{other.symbol}",
                        self.dimension / other.dimension,
                        self.scale / other.scale)
        return NotImplemented

    def __pow__(self, power):
        power = to_fraction(power)
        symbol = self.symbol if "*" not in self.symbol and "/" not in self.symbol \
            else f"({self.symbol})"
        return Unit(f"{symbol}^{power}", self.dimension ** power,
                    self.scale ** float(power))

    def __rmul__(self, magnitude):
        # 9.8 * m / s**2
        if isinstance(magnitude, numbers.Number) and not isinstance(magnitude, bool):
            return Quantity(magnitude, self)
        return NotImplemented

    def __str__(self):
        return self.symbol


@dataclass(frozen=True)
class Quantity:
    """A magnitude in some unit."""
    magnitude: object
    unit: Unit

    @property
    def dimension(self) -> Dimension:
        return self.unit.dimension

    def to_si(self):
        """Magnitude expressed in SI base units."""
        return self.magnitude * self.unit.scale

    def __truediv__(self, other):
        if isinstance(other, Unit):
            return Quantity(self.magnitude, self.unit / other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Unit):
            return Quantity(self.magnitude, self.unit * other)
        return NotImplemented

    def __str__(self):
        return f"{self.magnitude} {self.unit}"


m = Unit("m", LENGTH)
s = Unit("s", TIME)
kg = Unit("kg", MASS)
g = Unit("g", MASS, 1e-3)
K = Unit("K", TEMPERATURE)
A = Unit("A", CURRENT)
mol = Unit("mol", AMOUNT)
cd = Unit("cd", LUMINOSITY)
N = Unit("N", FORCE)
Pa = Unit("Pa", PRESSURE)
J = Unit("J", ENERGY)


class ParameterKind(Enum):
    """Accepted kinds of parameter values."""
    QUANTITY = "quantity"     # Magnitude with a unit, e.g. 9.8 m/s^2
    UNIT = "unit"             # A unit, e.g. m
    DIMENSION = "dimension"   # A bare dimension, e.g. Length
    NUMBER = "number"         # A plain (dimensionless) number


def parameter_kind(value) -> ParameterKind:
    """
    Classify ``value``.

    Raises
    ------
    UnsupportedParameterError
        If ``value`` is not one of the accepted kinds
    """
    if isinstance(value, Quantity):
        return ParameterKind.QUANTITY
    if isinstance(value, Unit):
        return ParameterKind.UNIT
    if isinstance(value, Dimension):
        return ParameterKind.DIMENSION
    if isinstance(value, numbers.Number) and not isinstance(value, bool):
        return ParameterKind.NUMBER
    raise UnsupportedParameterError(
        f"Parameter should be either a Quantity, Unit, Dimension or Number, "
        f"got {type(value).__name__}"
    )


def dimensions_of(value) -> Tuple[Tuple[str, Fraction], ...]:
    """(dimension name, exact exponent) pairs of any accepted parameter value."""
    kind = parameter_kind(value)
    if kind is ParameterKind.QUANTITY:
        return value.dimension.exponents
    if kind is ParameterKind.UNIT:
        return value.dimension.exponents
    if kind is ParameterKind.DIMENSION:
        return value.exponents
    return DIMENSIONLESS.exponents


@dataclass(frozen=True)
class Parameter:
    """
    A registered parameter.

    Only built through ``Parameter.from_value``, which rejects values that
    are not a Quantity, Unit, Dimension or Number.
    """
    symbol: str
    value: object
    kind: ParameterKind

    @classmethod
    def from_value(cls, symbol, value) -> "Parameter":
        if not isinstance(symbol, str) or not symbol:
            raise TypeError(f"Parameter symbol must be a non-empty string, got {symbol!r}")
        return cls(symbol=symbol, value=value, kind=parameter_kind(value))

    def dimensions(self) -> Tuple[Tuple[str, Fraction], ...]:
        return dimensions_of(self.value)

    @property
    def dimension(self) -> Dimension:
        return Dimension(dict(self.dimensions()))

    def magnitude(self):
        """Numeric value in SI base units (1 for a bare dimension)."""
        if self.kind is ParameterKind.QUANTITY:
            return self.value.to_si()
        if self.kind is ParameterKind.UNIT:
            return self.value.scale
        if self.kind is ParameterKind.DIMENSION:
            return 1.0
        return self.value

    def __str__(self):
        return f"{self.symbol} = {self.value}"
