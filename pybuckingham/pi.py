"""
Buckingham-Pi groups of a parameter registry.

This is the user-facing API: build the exponent matrix, factorize it with
full pivoting, take its null space and render the dimensionless groups.
"""

import numbers
import warnings
from fractions import Fraction
from typing import List

import numpy as np
import pandas as pd

from ._core.groups import PiGroup, assemble_groups
from ._core.lu import lu_decomposition_with_full_pivoting
from ._core.matrix import build_exponent_matrix
from ._core.nullspace import lu_nullspace
from ._domains import get_domain
from .registry import ParameterRegistry
from .render import check_form, render, render_expr, render_string


class BuckinghamPi:
    """
    Dimensionless groups of the registered parameters.
    
    Everything is computed on construction from a snapshot of the registry;
    later changes to the registry do not affect this object.
    
    Examples
    --------
    >>> from pybuckingham import ParameterRegistry, BuckinghamPi, units as u
    >>> registry = ParameterRegistry(("ρ", u.DENSITY), ("μ", u.DYNAMIC_VISCOSITY),
    ...                              ("u", u.VELOCITY), ("ℓ", u.LENGTH))
    >>> analysis = BuckinghamPi(registry)
    >>> analysis.strings()
    ['ρ^(1//1)*μ^(-1//1)*u^(1//1)*ℓ^(1//1)']
    >>> analysis.summary()  # Prints a report
    """

    def __init__(self, registry: ParameterRegistry, domain='fraction'):
        """
        Compute the Pi groups.
        
        Parameters
        ----------
        registry : ParameterRegistry
            Parameters to analyse
        domain : str
            Numeric domain of the factorization:
            - 'fraction': exact, arbitrary precision (default)
            - 'rational64': exact, raises RationalOverflowError on overflow
            - 'float64': approximate; exponents are rationalized afterwards
        """
        self.parameters = registry.parameters
        self.symbols = [p.symbol for p in self.parameters]
        self.domain = get_domain(domain)

        if self.domain.name == 'complex128':
            raise ValueError("Pi groups need a real domain, not 'complex128'")
        if not self.domain.exact:
            warnings.warn(
                f"Computing Pi groups in the inexact '{self.domain.name}' domain. "
                f"Exponents are rounded to nearby rationals.",
                UserWarning
            )

        self.exponent_matrix = build_exponent_matrix(
            [(p.symbol, p.dimensions()) for p in self.parameters]
        )
        matrix = self.exponent_matrix.matrix
        if not self.domain.exact:
            matrix = matrix.astype(np.float64)

        self.factorization = lu_decomposition_with_full_pivoting(matrix, domain=self.domain)
        self.nullspace = lu_nullspace(lu=self.factorization)
        self.rank = self.nullspace.rank

        groups = assemble_groups(self.nullspace, self.symbols)
        if not self.domain.exact:
            groups = [_rationalize(group) for group in groups]
        self.groups: List[PiGroup] = groups

    @property
    def n_groups(self) -> int:
        return len(self.groups)

    def strings(self) -> List[str]:
        """Groups as ``"sym^(num//den)*..."`` strings."""
        return [render_string(group) for group in self.groups]

    def exprs(self) -> list:
        """Groups as sympy expressions."""
        return [render_expr(group) for group in self.groups]

    def exponent_frame(self) -> pd.DataFrame:
        """Exponent matrix (dimensions x parameters) as a DataFrame."""
        return self.exponent_matrix.to_frame()

    def group_frame(self) -> pd.DataFrame:
        """
        Group exponents (groups x parameters), parameters in registration
        order, zeros where a parameter does not appear.
        """
        rows = [[group.as_dict().get(s, Fraction(0)) for s in self.symbols]
                for group in self.groups]
        index = pd.Index([f"Π{i + 1}" for i in range(self.n_groups)], name='group')
        return pd.DataFrame(rows, index=index,
                            columns=pd.Index(self.symbols, name='parameter'),
                            dtype=object)

    def evaluate(self) -> pd.Series:
        """
        Numeric value of each group.

        Uses each parameter's SI magnitude: a quantity's value, a unit's
        scale, 1 for a bare dimension, the number itself for a number.
        The Series is complex128 if any magnitude is complex, float64
        otherwise.
        """
        magnitudes = {p.symbol: p.magnitude() for p in self.parameters}
        if any(isinstance(v, numbers.Complex) and not isinstance(v, numbers.Real)
               for v in magnitudes.values()):
            dtype, cast = np.complex128, complex
        else:
            dtype, cast = np.float64, float
        values = []
        for group in self.groups:
            value = cast(1)
            for symbol, exponent in group:
                value *= np.power(cast(magnitudes[symbol]), float(exponent))
            values.append(value)
        return pd.Series(values, index=self.strings(), name='value', dtype=dtype)

    def summary(self):
        """
        Print a summary of the dimensional analysis.
        """
        print()
        print("=" * 80)
        print("BUCKINGHAM PI ANALYSIS")
        print("=" * 80)
        print()

        print(f"Number of parameters: {len(self.symbols)}")
        print(f"Number of dimensions: {len(self.exponent_matrix.dimensions)}")
        print(f"Rank of exponent matrix: {self.rank}")
        print(f"Dimensionless groups: {self.n_groups}")
        print()

        print("Parameters:")
        print("-" * 80)
        print(f"{'Symbol':<12} {'Kind':<12} {'Value':<24} {'Dimension':<30}")
        print("-" * 80)
        for p in self.parameters:
            print(f"{p.symbol:<12} {p.kind.value:<12} {str(p.value):<24} "
                  f"{p.dimension.pretty():<30}")
        print("-" * 80)
        print()

        if len(self.symbols) and len(self.exponent_matrix.dimensions):
            print("Exponent matrix:")
            print(self.exponent_frame().to_string())
            print()

        print("Pi groups:")
        if not self.groups:
            print("  (none)")
        for i, text in enumerate(self.strings()):
            print(f"  Π{i + 1} = {text}")

        print()
        print(f"Domain: {self.domain.name}")
        print("=" * 80)
        print()

    def __repr__(self):
        return (f"BuckinghamPi(n_params={len(self.symbols)}, rank={self.rank}, "
                f"n_groups={self.n_groups})")


def _rationalize(group: PiGroup) -> PiGroup:
    terms = []
    for symbol, exponent in group:
        a = Fraction(float(exponent)).limit_denominator()
        if a != 0:
            terms.append((symbol, a))
    return PiGroup(terms=tuple(terms))


def pi_groups(registry: ParameterRegistry, form: str = 'expr', domain='fraction') -> list:
    """
    Pi groups associated with the registered parameters.
    
    Parameters
    ----------
    registry : ParameterRegistry
        Parameters to analyse
    form : str
        - 'expr': sympy expressions (default)
        - 'string': ``"sym^(num//den)*..."`` strings
    domain : str
        Numeric domain, see ``BuckinghamPi``
    
    Returns
    -------
    list
        One entry per dimensionless group; empty if there are no parameters
    
    Raises
    ------
    UnknownOutputFormError
        If ``form`` is not recognized (nothing is computed)
    
    Examples
    --------
    >>> registry = ParameterRegistry(("ℓ", u.m), ("g", 9.8 * u.m / u.s**2), ("m", u.g),
    ...                              ("τ", u.s), ("θ", u.DIMENSIONLESS))
    >>> pi_groups(registry, 'string')
    ['g^(1//2)*ℓ^(-1//2)*τ^(1//1)', 'θ^(1//1)']
    """
    check_form(form)
    return render(BuckinghamPi(registry, domain=domain).groups, form)


def buckingham_pi(registry: ParameterRegistry, **kwargs) -> BuckinghamPi:
    """
    Dimensional analysis of a registry (convenience function).
    
    Parameters
    ----------
    registry : ParameterRegistry
        Parameters to analyse
    **kwargs
        Additional arguments passed to BuckinghamPi
    
    Returns
    -------
    BuckinghamPi
        Analysis object
    
    Examples
    --------
    >>> analysis = buckingham_pi(registry)
    >>> analysis.summary()
    >>> analysis.exprs()
    >>> analysis.evaluate()
    """
    return BuckinghamPi(registry, **kwargs)
