import math
from datetime import date

import pytest

from engine.projection import project
from pm.decisions import generate_sustainability_report
from pm.metrics import (
    breakdown_to_frame,
    first_negative_month,
    is_goal_achievable,
    max_monthly_withdrawal,
    required_dividend_yield,
)


def test_headline_metrics():
    assert is_goal_achievable(0.01)
    assert not is_goal_achievable(0.0)
    assert not is_goal_achievable(math.nan)
    assert max_monthly_withdrawal(True, 471.0, 15000.0, 36) == 471.0
    assert max_monthly_withdrawal(False, 471.0, 15000.0, 36) == pytest.approx(15000.0 / 36 * 0.95)
    assert math.isinf(max_monthly_withdrawal(False, 471.0, 15000.0, 0))
    assert required_dividend_yield(471.0, 15000.0) == pytest.approx(37.68)
    assert math.isnan(required_dividend_yield(0.0, 0.0))


def test_breakdown_frame_running_totals(make_inputs):
    result = project(make_inputs(withdrawal_amount=25.0, expense_ratio=0.6))
    df = breakdown_to_frame(result)
    assert len(df) == result.n_months
    assert df["cum_dividends"].iloc[-1] == pytest.approx(result.total_dividends_earned)
    assert df["cum_expenses"].iloc[-1] == pytest.approx(result.total_expenses)
    assert df["cum_withdrawals"].iloc[-1] == pytest.approx(25.0 * 13)


def test_report_for_sustainable_plan(make_inputs):
    inputs = make_inputs(withdrawal_amount=20.0)
    result = project(inputs)
    report = generate_sustainability_report(inputs, result, scenario_name="Steady")
    assert report.is_goal_achievable
    assert report.depletion_date is None
    assert report.dividend_yield == pytest.approx(4.0)
    assert report.required_dividend_yield == pytest.approx(2.4)
    assert report.flags == []
    table = report.to_dataframe()
    assert table.iloc[0]["Value"] == "Steady"
    assert "FLAGS" not in set(table["Metric"])


def test_report_flags_depleted_plan(make_inputs):
    inputs = make_inputs(
        initial_amount=1000.0,
        stock_price=10.0,
        annual_dividend_per_share=0.0,
        withdrawal_amount=5000.0,
        number_of_withdrawals=3,
        initial_investment_date=date(2024, 1, 1),
        first_withdrawal_date=date(2024, 1, 1),
    )
    result = project(inputs)
    assert first_negative_month(result) == date(2024, 1, 1)
    report = generate_sustainability_report(inputs, result)
    assert report.depletion_date == date(2024, 1, 1)
    assert report.total_withdrawals == pytest.approx(20000.0)
    assert any(f.startswith("DEPLETED") for f in report.flags)
    assert any(f.startswith("HIGH_WITHDRAWAL_RATE") for f in report.flags)
    table = report.to_dataframe()
    assert "Depleted On" in set(table["Metric"])
    assert "FLAGS" in set(table["Metric"])


def test_report_flags_non_finite(make_inputs):
    inputs = make_inputs(stock_price=0.0)
    report = generate_sustainability_report(inputs, project(inputs))
    assert any(f.startswith("NON_FINITE") for f in report.flags)
