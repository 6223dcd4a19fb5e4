"""
Preset calculator inputs for the scenario picker.

Every preset starts today and takes its first withdrawal one month later,
so presets are rebuilt on each call rather than stored as constants.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

from core.config import CalculatorInputs
from core.utils import add_months


@dataclass(frozen=True)
class Scenario:
    name: str
    description: str
    inputs: CalculatorInputs


# name -> (description, parameters other than dates)
_PRESETS: Dict[str, tuple] = {
    "Conservative Income": (
        "Low-risk ETF with stable dividends, minimal variance",
        dict(initial_amount=50000, stock_price=25, annual_dividend_per_share=1.25,
             dividend_frequency="monthly", withdrawal_amount=200, number_of_withdrawals=60,
             price_variance=2, dividend_variance=1, expense_ratio=0.25),
    ),
    "High Yield Risk": (
        "High-yield ETF with significant price and dividend variance",
        dict(initial_amount=25000, stock_price=15, annual_dividend_per_share=2.4,
             dividend_frequency="monthly", withdrawal_amount=300, number_of_withdrawals=48,
             price_variance=15, dividend_variance=10, expense_ratio=0.85),
    ),
    "Quarterly Dividend Growth": (
        "Growth-focused ETF with quarterly distributions",
        dict(initial_amount=75000, stock_price=50, annual_dividend_per_share=1.8,
             dividend_frequency="quarterly", withdrawal_amount=750, number_of_withdrawals=24,
             price_variance=8, dividend_variance=3, expense_ratio=0.45),
    ),
    "BKLN Simulation": (
        "Based on Invesco Senior Loan ETF characteristics",
        dict(initial_amount=15000, stock_price=14.5, annual_dividend_per_share=1.15,
             dividend_frequency="monthly", withdrawal_amount=471, number_of_withdrawals=36,
             price_variance=5, dividend_variance=3, expense_ratio=0.65),
    ),
    "Aggressive Withdrawal": (
        "Testing sustainability of higher withdrawal rates",
        dict(initial_amount=100000, stock_price=30, annual_dividend_per_share=2.4,
             dividend_frequency="monthly", withdrawal_amount=1500, number_of_withdrawals=48,
             price_variance=10, dividend_variance=5, expense_ratio=0.55),
    ),
}


def default_inputs(today: Optional[date] = None) -> CalculatorInputs:
    """Initial values of the calculator form."""
    today = today or date.today()
    return CalculatorInputs(
        initial_amount=15000,
        stock_price=100,
        annual_dividend_per_share=8,
        dividend_frequency="monthly",
        withdrawal_amount=471,
        number_of_withdrawals=36,
        reinvest_dividends=True,
        initial_investment_date=today,
        first_withdrawal_date=add_months(today, 1),
        withdrawal_frequency="monthly",
        price_variance=0,
        dividend_variance=0,
        expense_ratio=0.65,
    )


def build_test_scenarios(today: Optional[date] = None) -> List[Scenario]:
    today = today or date.today()
    first = add_months(today, 1)
    return [
        Scenario(
            name=name,
            description=description,
            inputs=CalculatorInputs(
                reinvest_dividends=True,
                initial_investment_date=today,
                first_withdrawal_date=first,
                withdrawal_frequency="monthly",
                **params,
            ),
        )
        for name, (description, params) in _PRESETS.items()
    ]


def get_scenario(name: str, today: Optional[date] = None) -> Scenario:
    for scenario in build_test_scenarios(today):
        if scenario.name == name:
            return scenario
    raise KeyError(f"Unknown scenario: {name!r}. Available: {list(_PRESETS)}")
