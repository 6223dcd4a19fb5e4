"""
Projection engine — month-by-month simulation of a dividend holding under a
reinvest-then-withdraw strategy.

One forward pass, one step per calendar month from the initial investment
date through the horizon (first withdrawal date + number of withdrawals
months), both inclusive. Per step:

  1. Perturb the price
  2. Charge the monthly expense by selling shares at that price
  3. Earn the (perturbed) dividend on the post-expense share count
  4. Reinvest it, or let it leave the holding
  5. From the first withdrawal date on, sell shares to fund the withdrawal
  6. Mark the holding to the month's price

Nothing is clamped: a withdrawal larger than the holding drives shares and
balance negative, which is how an unsustainable schedule shows up.

The dividend frequency only sets the per-step dividend rate (annual / 52, 12
or 4); the engine steps monthly whatever the frequency.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from core.config import CalculatorInputs
from core.errors import InvalidInput
from core.schema import CalculationResult, MonthlyData
from core.utils import add_months, frequency_divisor, monthly_steps
from data_prep.validators import validate_inputs
from distributions.sampler import PerturbationSource, UniformPerturbation
from pm.metrics import is_goal_achievable, max_monthly_withdrawal, required_dividend_yield

logger = logging.getLogger(__name__)


def project(
    inputs: CalculatorInputs,
    *,
    rng: Optional[PerturbationSource] = None,
    validate: bool = False,
) -> CalculationResult:
    """
    Run one projection.

    Parameters
    ----------
    inputs : CalculatorInputs
    rng : PerturbationSource, optional
        Source of the two per-month [-1, 1) draws (price, then dividend).
        Defaults to an unseeded UniformPerturbation.
    validate : bool
        If True, reject degenerate inputs with InvalidInput before simulating.
        If False, zero denominators surface as inf/nan in the result.
    """
    if validate:
        check = validate_inputs(inputs)
        for w in check.warnings:
            logger.warning("Input warning: %s", w)
        if not check.is_valid:
            raise InvalidInput(check.errors)

    if rng is None:
        rng = UniformPerturbation()

    stock_price = np.float64(inputs.stock_price)
    price_variance = np.float64(inputs.price_variance)
    dividend_variance = np.float64(inputs.dividend_variance)
    withdrawal_amount = np.float64(inputs.withdrawal_amount)

    dividend_per_period = np.float64(inputs.annual_dividend_per_share) / frequency_divisor(
        inputs.dividend_frequency
    )
    monthly_expense_rate = np.float64(inputs.expense_ratio) / 100 / 12

    horizon = add_months(inputs.first_withdrawal_date, inputs.number_of_withdrawals)
    steps = monthly_steps(inputs.initial_investment_date, horizon)

    breakdown: List[MonthlyData] = []
    total_dividends = np.float64(0.0)
    total_expenses = np.float64(0.0)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        shares = np.float64(inputs.initial_amount) / stock_price
        balance = np.float64(inputs.initial_amount)

        for step_date in steps:
            price = stock_price * (1 + rng.draw() * price_variance / 100)

            expense = shares * price * monthly_expense_rate
            shares -= expense / price
            total_expenses += expense

            dividend = dividend_per_period * (1 + rng.draw() * dividend_variance / 100)
            earned = shares * dividend
            total_dividends += earned

            if inputs.reinvest_dividends:
                shares += earned / price

            withdrawal = np.float64(0.0)
            if step_date >= inputs.first_withdrawal_date:
                withdrawal = withdrawal_amount
                shares -= withdrawal / price

            balance = shares * price

            breakdown.append(
                MonthlyData(
                    date=step_date,
                    shares=float(shares),
                    share_price=float(price),
                    dividend_amount=float(earned),
                    withdrawal_amount=float(withdrawal),
                    expense_amount=float(expense),
                    balance=float(balance),
                )
            )

    final_balance = float(balance)
    achievable = is_goal_achievable(final_balance)

    logger.debug(
        "Projected %d months through %s: final balance %.2f (%s)",
        len(breakdown),
        horizon.isoformat(),
        final_balance,
        "achievable" if achievable else "not achievable",
    )

    return CalculationResult(
        is_goal_achievable=achievable,
        max_monthly_withdrawal=max_monthly_withdrawal(
            achievable,
            inputs.withdrawal_amount,
            inputs.initial_amount,
            inputs.number_of_withdrawals,
        ),
        required_dividend_yield=required_dividend_yield(
            inputs.withdrawal_amount, inputs.initial_amount
        ),
        monthly_breakdown=breakdown,
        total_dividends_earned=float(total_dividends),
        total_expenses=float(total_expenses),
        final_balance=final_balance,
    )
