"""
Summary metrics derived from a projection.

The engine derives its three headline numbers (goal achievable, max monthly
withdrawal, required dividend yield) with the helpers below.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import numpy as np
import pandas as pd

from core.schema import CalculationResult

FALLBACK_WITHDRAWAL_FACTOR = 0.95


def is_goal_achievable(final_balance: float) -> bool:
    """Strictly positive ending balance; NaN counts as not achievable."""
    return bool(final_balance > 0)


def max_monthly_withdrawal(
    achievable: bool,
    withdrawal_amount: float,
    initial_amount: float,
    number_of_withdrawals: int,
) -> float:
    """
    The requested withdrawal when achievable, else 95% of an even split of
    the initial amount over the withdrawal count.
    """
    if achievable:
        return float(withdrawal_amount)
    with np.errstate(divide="ignore", invalid="ignore"):
        even = np.float64(initial_amount) / np.float64(number_of_withdrawals)
    return float(even * FALLBACK_WITHDRAWAL_FACTOR)


def required_dividend_yield(withdrawal_amount: float, initial_amount: float) -> float:
    """Annualized withdrawal as a percent of initial capital."""
    with np.errstate(divide="ignore", invalid="ignore"):
        y = np.float64(withdrawal_amount) * 12 / np.float64(initial_amount) * 100
    return float(y)


def breakdown_to_frame(result: CalculationResult) -> pd.DataFrame:
    """
    Monthly breakdown with running totals.

    Adds cum_dividends, cum_expenses and cum_withdrawals to the base columns.
    """
    df = result.breakdown_frame()
    df["cum_dividends"] = df["dividend_amount"].cumsum()
    df["cum_expenses"] = df["expense_amount"].cumsum()
    df["cum_withdrawals"] = df["withdrawal_amount"].cumsum()
    return df


def first_negative_month(result: CalculationResult) -> Optional[date]:
    """Date of the first month whose balance is zero or below, if any."""
    for month in result.monthly_breakdown:
        if month.balance <= 0:
            return month.date
    return None
