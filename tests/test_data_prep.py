import json
import math
from datetime import date

import pytest

from core.errors import InvalidInput
from data_prep.loader import inputs_from_dict, load_inputs_json
from data_prep.validators import validate_inputs

CAMEL = {
    "initialAmount": 15000,
    "stockPrice": "14.5",
    "annualDividendPerShare": 1.15,
    "dividendFrequency": "Monthly",
    "withdrawalAmount": 471,
    "numberOfWithdrawals": "36",
    "reinvestDividends": "true",
    "initialInvestmentDate": "2025-01-15",
    "firstWithdrawalDate": "2025-02-15",
    "withdrawalFrequency": "monthly",
    "expenseRatio": 0.65,
}


def test_valid_inputs_pass(make_inputs):
    check = validate_inputs(make_inputs())
    assert check.is_valid
    assert check.warnings == []
    assert "All checks passed" in check.summary()


def test_denominator_errors(make_inputs):
    check = validate_inputs(make_inputs(stock_price=0.0, initial_amount=-5.0, number_of_withdrawals=-1))
    assert not check.is_valid
    assert len(check.errors) == 3
    assert "ERRORS (3)" in check.summary()


def test_non_finite_values_are_errors(make_inputs):
    check = validate_inputs(make_inputs(price_variance=math.nan))
    assert not check.is_valid
    assert "price_variance" in check.errors[0]


def test_warnings(make_inputs):
    check = validate_inputs(
        make_inputs(
            dividend_frequency="daily",
            price_variance=-2.0,
            number_of_withdrawals=0,
            initial_investment_date=date(2024, 3, 1),
            first_withdrawal_date=date(2024, 1, 1),
        )
    )
    assert check.is_valid
    text = " ".join(check.warnings)
    assert "dividend_frequency" in text
    assert "price_variance" in text
    assert "number_of_withdrawals" in text
    assert "first_withdrawal_date" in text


def test_loader_accepts_camel_case():
    inputs = inputs_from_dict(CAMEL)
    assert inputs.initial_amount == 15000.0
    assert inputs.stock_price == 14.5
    assert inputs.dividend_frequency == "monthly"
    assert inputs.number_of_withdrawals == 36
    assert inputs.reinvest_dividends is True
    assert inputs.initial_investment_date == date(2025, 1, 15)
    assert inputs.price_variance == 0.0


def test_loader_accepts_snake_case():
    data = {
        "initial_amount": 1000, "stock_price": 10, "annual_dividend_per_share": 1,
        "dividend_frequency": "quarterly", "withdrawal_amount": 5,
        "number_of_withdrawals": 4, "reinvest_dividends": False,
        "initial_investment_date": "2024-01-01", "first_withdrawal_date": "2024-02-01",
    }
    inputs = inputs_from_dict(data)
    assert inputs.dividend_frequency == "quarterly"
    assert inputs.reinvest_dividends is False


def test_loader_reports_missing_fields():
    data = dict(CAMEL)
    del data["stockPrice"]
    del data["firstWithdrawalDate"]
    with pytest.raises(InvalidInput) as excinfo:
        inputs_from_dict(data)
    assert excinfo.value.messages == [
        "Missing required field: stock_price",
        "Missing required field: first_withdrawal_date",
    ]


def test_loader_rejects_bad_values():
    data = dict(CAMEL, numberOfWithdrawals=2.5, reinvestDividends="maybe")
    with pytest.raises(InvalidInput) as excinfo:
        inputs_from_dict(data)
    assert len(excinfo.value.messages) == 2


def test_loader_ignores_unknown_keys(caplog):
    with caplog.at_level("WARNING", logger="data_prep.loader"):
        inputs = inputs_from_dict(dict(CAMEL, favoriteColor="green"))
    assert inputs.withdrawal_amount == 471.0
    assert "favoriteColor" in caplog.text


def test_load_json_object_and_list(tmp_path):
    single = tmp_path / "one.json"
    single.write_text(json.dumps(CAMEL))
    assert load_inputs_json(single).withdrawal_amount == 471.0

    many = tmp_path / "many.json"
    many.write_text(json.dumps([CAMEL, dict(CAMEL, withdrawalAmount=100)]))
    loaded = load_inputs_json(many)
    assert [i.withdrawal_amount for i in loaded] == [471.0, 100.0]

    bad = tmp_path / "bad.json"
    bad.write_text("42")
    with pytest.raises(InvalidInput):
        load_inputs_json(bad)


def test_non_numeric_values_are_errors(make_inputs):
    check = validate_inputs(make_inputs(stock_price="cheap", number_of_withdrawals=None))
    assert not check.is_valid
    assert len(check.errors) == 2
    assert "stock_price" in check.errors[0]


def test_frequency_must_match_exactly(make_inputs):
    check = validate_inputs(make_inputs(dividend_frequency="Weekly"))
    assert any("dividend_frequency" in w for w in check.warnings)


def test_loader_folds_frequency_case():
    inputs = inputs_from_dict(dict(CAMEL, dividendFrequency=" Weekly "))
    assert inputs.dividend_frequency == "weekly"
