"""
Dimension exponent matrix.

Rows are base dimensions, columns are parameters in registration order.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd

from .._utils import to_fraction


@dataclass
class ExponentMatrix:
    """Exact exponents of each dimension (row) in each parameter (column)."""
    matrix: np.ndarray       # Object array of Fraction, (n_dims, n_params)
    dimensions: List[str]    # Row labels
    symbols: List[str]       # Column labels

    @property
    def shape(self):
        return self.matrix.shape

    def to_frame(self) -> pd.DataFrame:
        """Exponent matrix as a DataFrame (dimensions x symbols)."""
        return pd.DataFrame(self.matrix, index=pd.Index(self.dimensions, name='dimension'),
                            columns=pd.Index(self.symbols, name='parameter'))


def build_exponent_matrix(
    parameters: Sequence[Tuple[str, Iterable[Tuple[str, object]]]],
) -> ExponentMatrix:
    """
    Build the exponent matrix of a parameter list.
    
    Parameters
    ----------
    parameters : sequence of (symbol, decomposition)
        ``decomposition`` yields ``(dimension_name, exponent)`` pairs with
        exact exponents. An empty decomposition is a dimensionless
        parameter and gives an all-zero column.
        
    Returns
    -------
    ExponentMatrix
        Rows are ordered by first appearance of each dimension name.
    """
    symbols = []
    columns = []
    rows = {}
    for symbol, decomposition in parameters:
        column = {}
        for name, exponent in decomposition:
            rows.setdefault(name, len(rows))
            column[name] = column.get(name, Fraction(0)) + to_fraction(exponent)
        symbols.append(symbol)
        columns.append(column)

    matrix = np.empty((len(rows), len(symbols)), dtype=object)
    matrix.fill(Fraction(0))
    for j, column in enumerate(columns):
        for name, exponent in column.items():
            matrix[rows[name], j] = exponent

    return ExponentMatrix(matrix=matrix, dimensions=list(rows), symbols=symbols)
