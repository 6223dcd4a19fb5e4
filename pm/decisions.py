"""
Sustainability report — turns one projection into the answers the results
view shows:
  Q1: "Does the money last?"          → goal achievable, final balance
  Q2: "When does it run out?"         → first month at or below zero
  Q3: "Am I drawing more than it pays?" → required yield vs dividend yield
  Q4: "What did it cost?"             → total expenses vs dividends earned
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

import numpy as np
import pandas as pd

from core.config import CalculatorInputs
from core.schema import CalculationResult
from pm.metrics import first_negative_month


@dataclass
class SustainabilityReport:
    """Structured summary of one projection."""
    scenario_name: str

    is_goal_achievable: bool
    final_balance: float
    max_monthly_withdrawal: float

    required_dividend_yield: float   # percent
    dividend_yield: float            # percent, annual dividend / price at start

    total_dividends_earned: float
    total_expenses: float
    total_withdrawals: float

    months: int
    depletion_date: Optional[date]

    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Scenario", "Value": self.scenario_name},
            {"Metric": "Goal", "Value": "Achievable" if self.is_goal_achievable else "Not Achievable"},
            {"Metric": "Final Balance", "Value": f"${self.final_balance:,.2f}"},
            {"Metric": "Max Monthly Withdrawal", "Value": f"${self.max_monthly_withdrawal:,.2f}"},
            {"Metric": "Required Dividend Yield", "Value": f"{self.required_dividend_yield:.2f}%"},
            {"Metric": "Dividend Yield at Start", "Value": f"{self.dividend_yield:.2f}%"},
            {"Metric": "Total Dividends Earned", "Value": f"${self.total_dividends_earned:,.2f}"},
            {"Metric": "Total Expenses", "Value": f"${self.total_expenses:,.2f}"},
            {"Metric": "Total Withdrawals", "Value": f"${self.total_withdrawals:,.2f}"},
            {"Metric": "Months Simulated", "Value": str(self.months)},
        ]
        if self.depletion_date is not None:
            rows.append({"Metric": "Depleted On", "Value": self.depletion_date.isoformat()})
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags)})
        return pd.DataFrame(rows)


def generate_sustainability_report(
    inputs: CalculatorInputs,
    result: CalculationResult,
    *,
    scenario_name: str = "Custom",
) -> SustainabilityReport:
    """
    Build a SustainabilityReport for one projection.

    Flags
    -----
    DEPLETED              balance reached zero or below at some month
    HIGH_WITHDRAWAL_RATE  required yield exceeds the starting dividend yield
    NON_FINITE            a headline number is inf/nan (degenerate inputs)
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        dividend_yield = float(
            np.float64(inputs.annual_dividend_per_share) / np.float64(inputs.stock_price) * 100
        )

    depletion = first_negative_month(result)
    total_withdrawals = float(sum(m.withdrawal_amount for m in result.monthly_breakdown))

    flags = []
    if depletion is not None:
        flags.append(f"DEPLETED: balance at or below zero from {depletion.isoformat()}")
    if result.required_dividend_yield > dividend_yield:
        flags.append(
            f"HIGH_WITHDRAWAL_RATE: withdrawals need {result.required_dividend_yield:.2f}% "
            f"vs {dividend_yield:.2f}% dividend yield"
        )
    headline = (
        result.final_balance,
        result.max_monthly_withdrawal,
        result.required_dividend_yield,
    )
    if not all(math.isfinite(v) for v in headline):
        flags.append("NON_FINITE: check stock price, initial amount and withdrawal count")

    return SustainabilityReport(
        scenario_name=scenario_name,
        is_goal_achievable=result.is_goal_achievable,
        final_balance=result.final_balance,
        max_monthly_withdrawal=result.max_monthly_withdrawal,
        required_dividend_yield=result.required_dividend_yield,
        dividend_yield=dividend_yield,
        total_dividends_earned=result.total_dividends_earned,
        total_expenses=result.total_expenses,
        total_withdrawals=total_withdrawals,
        months=result.n_months,
        depletion_date=depletion,
        flags=flags,
    )
