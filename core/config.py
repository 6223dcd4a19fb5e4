"""
Projection inputs and engine settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from datetime import date
from typing import Literal, Optional

from .utils import to_date

DividendFrequency = Literal["weekly", "monthly", "quarterly"]


@dataclass(frozen=True)
class CalculatorInputs:
    """
    Parameters of one reinvest-then-withdraw projection.

    Percentages (variances, expense ratio) are in percent, e.g. 0.65 for 0.65%.
    Date fields accept ISO 8601 strings and are stored as datetime.date.
    withdrawal_frequency is accepted for symmetry with dividend_frequency;
    withdrawals always happen monthly.
    """

    initial_amount: float
    stock_price: float
    annual_dividend_per_share: float
    dividend_frequency: DividendFrequency
    withdrawal_amount: float
    number_of_withdrawals: int
    reinvest_dividends: bool
    initial_investment_date: date
    first_withdrawal_date: date
    withdrawal_frequency: DividendFrequency = "monthly"
    price_variance: float = 0.0
    dividend_variance: float = 0.0
    expense_ratio: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "initial_investment_date", to_date(self.initial_investment_date))
        object.__setattr__(self, "first_withdrawal_date", to_date(self.first_withdrawal_date))

    def with_changes(self, **changes) -> "CalculatorInputs":
        return replace(self, **changes)


@dataclass(frozen=True)
class ProjectionSettings:
    seed: Optional[int] = None   # None draws from system entropy
    validate: bool = False       # raise InvalidInput before simulating


def get_settings() -> ProjectionSettings:
    seed = os.getenv("DIVIDEND_RUNWAY_SEED", "").strip()
    validate = os.getenv("DIVIDEND_RUNWAY_VALIDATE", "").strip().lower()
    return ProjectionSettings(
        seed=int(seed) if seed else None,
        validate=validate in ("1", "true", "yes", "on"),
    )
