"""
Random perturbation sources for price and dividend variance.

Each simulated month the engine asks its source for two draws in [-1, 1):
the first scales the price perturbation, the second the dividend
perturbation. A draw of u with a variance of v percent moves the base value
by u * v percent:

    price    = stock_price         * (1 + u_price    * price_variance    / 100)
    dividend = dividend_per_period * (1 + u_dividend * dividend_variance / 100)

UniformPerturbation is the production source (fresh, independent draws).
Passing a seed makes a variance-enabled projection reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np


class PerturbationSource:
    """Interface for anything that can feed the engine its [-1, 1) draws."""

    def draw(self) -> float:
        raise NotImplementedError


@dataclass
class UniformPerturbation(PerturbationSource):
    """Independent U(-1, 1) draws from numpy's default generator."""

    seed: Optional[int] = None
    _rng: np.random.Generator = field(init=False, repr=False)

    def __post_init__(self):
        self._rng = np.random.default_rng(self.seed)

    def draw(self) -> float:
        return float(self._rng.uniform(-1.0, 1.0))


@dataclass(frozen=True)
class ConstantPerturbation(PerturbationSource):
    """
    Returns the same value on every draw.

    0.0 pins prices and dividends at their base values; -1.0 / 1.0 push every
    month to the low / high edge of the variance band.
    """

    value: float = 0.0

    def draw(self) -> float:
        return float(self.value)
