"""
Parameter registry.

An ordered, duplicate-free collection of named parameters owned by the
caller and passed to ``pi_groups``.
"""

import logging
from typing import Dict, Iterator, List

from .units import Parameter

LOG = logging.getLogger(__name__)


class ParameterRegistry:
    """
    Ordered symbol -> Parameter mapping.
    
    Examples
    --------
    >>> from pybuckingham import units as u
    >>> registry = ParameterRegistry()
    >>> registry.set_parameters(("ℓ", u.m), ("g", 9.8 * u.m / u.s**2), ("m", u.g),
    ...                         ("T", u.TIME), ("θ", u.DIMENSIONLESS))
    >>> registry.symbols
    ['ℓ', 'g', 'm', 'T', 'θ']
    >>> registry.add_parameters(v=u.m / u.s)
    >>> len(registry)
    6
    """

    def __init__(self, *pairs, **params):
        self._params: Dict[str, Parameter] = {}
        if pairs or params:
            self.set_parameters(*pairs, **params)

    @staticmethod
    def _validate(pairs, params) -> List[Parameter]:
        """Build Parameters for every entry before anything is mutated."""
        items = list(pairs) + list(params.items())
        validated = []
        for item in items:
            try:
                symbol, value = item
            except (TypeError, ValueError):
                raise TypeError(
                    f"Positional parameters must be (symbol, value) pairs, got {item!r}"
                ) from None
            validated.append(Parameter.from_value(symbol, value))
        return validated

    def set_parameters(self, *pairs, **params) -> None:
        """
        Replace the registered parameters.

        Accepts ``(symbol, value)`` pairs and/or keyword arguments, in that
        order. Called with no arguments, empties the registry.
        Python normalizes keyword names (NFKC), so symbols such as ``ℓ``
        must be passed as pairs to be kept verbatim.
        """
        validated = self._validate(pairs, params)
        self._params = {}
        self._append(validated)
        self.display()

    def add_parameters(self, *pairs, **params) -> None:
        """Append parameters whose symbol is not registered yet."""
        validated = self._validate(pairs, params)
        self._append(validated)
        self.display()

    def _append(self, parameters) -> None:
        for param in parameters:
            if param.symbol not in self._params:
                self._params[param.symbol] = param

    def clear(self) -> None:
        """Clear the parameter registry."""
        self._params = {}

    @property
    def symbols(self) -> List[str]:
        return list(self._params)

    @property
    def values(self) -> List[object]:
        return [p.value for p in self._params.values()]

    @property
    def parameters(self) -> List[Parameter]:
        return list(self._params.values())

    def display(self) -> None:
        """Log the registered parameters."""
        LOG.info("Parameter(s) registered:")
        for param in self._params.values():
            LOG.info(" %s", param)

    def __len__(self):
        return len(self._params)

    def __contains__(self, symbol):
        return symbol in self._params

    def __iter__(self) -> Iterator[Parameter]:
        return iter(list(self._params.values()))

    def __getitem__(self, symbol) -> Parameter:
        return self._params[symbol]

    def __repr__(self):
        return f"ParameterRegistry({', '.join(self.symbols)})"
