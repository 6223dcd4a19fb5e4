from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

# Make project root importable
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import CalculatorInputs  # noqa: E402

BASE_INPUTS = dict(
    initial_amount=10000.0,
    stock_price=100.0,
    annual_dividend_per_share=4.0,
    dividend_frequency="monthly",
    withdrawal_amount=0.0,
    number_of_withdrawals=12,
    reinvest_dividends=True,
    initial_investment_date=date(2024, 1, 15),
    first_withdrawal_date=date(2024, 2, 15),
    withdrawal_frequency="monthly",
    price_variance=0.0,
    dividend_variance=0.0,
    expense_ratio=0.0,
)


@pytest.fixture
def make_inputs():
    def _make(**overrides) -> CalculatorInputs:
        params = dict(BASE_INPUTS)
        params.update(overrides)
        return CalculatorInputs(**params)
    return _make
