from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, List, Tuple

import pandas as pd

# Column order of the monthly breakdown table (one row per simulated month).
BREAKDOWN_COLUMNS: Tuple[str, ...] = (
    "date",
    "shares",
    "share_price",
    "dividend_amount",
    "withdrawal_amount",
    "expense_amount",
    "balance",
)


@dataclass(frozen=True)
class MonthlyData:
    """State of the holding after one simulated month."""

    date: date
    shares: float            # post-step share count, may be negative
    share_price: float       # this month's perturbed price
    dividend_amount: float   # earned this month, before reinvestment
    withdrawal_amount: float
    expense_amount: float
    balance: float           # shares * share_price after all adjustments

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["date"] = self.date.isoformat()
        return out


@dataclass
class CalculationResult:
    """Outcome of one projection."""

    is_goal_achievable: bool
    max_monthly_withdrawal: float
    required_dividend_yield: float
    monthly_breakdown: List[MonthlyData] = field(default_factory=list)
    total_dividends_earned: float = 0.0
    total_expenses: float = 0.0
    final_balance: float = 0.0

    @property
    def n_months(self) -> int:
        return len(self.monthly_breakdown)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_goal_achievable": self.is_goal_achievable,
            "max_monthly_withdrawal": self.max_monthly_withdrawal,
            "required_dividend_yield": self.required_dividend_yield,
            "monthly_breakdown": [m.to_dict() for m in self.monthly_breakdown],
            "total_dividends_earned": self.total_dividends_earned,
            "total_expenses": self.total_expenses,
            "final_balance": self.final_balance,
        }

    def breakdown_frame(self) -> pd.DataFrame:
        """Monthly breakdown as a DataFrame with BREAKDOWN_COLUMNS."""
        rows = [
            {c: getattr(m, c) for c in BREAKDOWN_COLUMNS}
            for m in self.monthly_breakdown
        ]
        df = pd.DataFrame(rows, columns=list(BREAKDOWN_COLUMNS))
        df["date"] = pd.to_datetime(df["date"])
        return df
