"""
Sanity checks for calculator inputs before they enter the engine.

Catches the inputs that make the projection degenerate:
- Zero or negative share price (share count becomes non-finite)
- Zero or negative initial amount (required yield becomes non-finite)
- Negative withdrawal count
- Dates in the wrong order, unknown frequencies, negative percentages
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from core.config import CalculatorInputs
from core.utils import FREQUENCY_DIVISORS


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for one set of inputs."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


_NUMERIC_FIELDS = (
    "initial_amount",
    "stock_price",
    "annual_dividend_per_share",
    "withdrawal_amount",
    "number_of_withdrawals",
    "price_variance",
    "dividend_variance",
    "expense_ratio",
)


def validate_inputs(inputs: CalculatorInputs) -> ValidationResult:
    """
    Run all validation checks on one set of calculator inputs.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    # --- Finite numbers ---
    for name in _NUMERIC_FIELDS:
        try:
            value = float(getattr(inputs, name))
        except (TypeError, ValueError):
            result.errors.append(f"{name} must be a number, got {getattr(inputs, name)!r}.")
            continue
        if not math.isfinite(value):
            result.errors.append(f"{name} must be a finite number, got {value}.")
    if not result.is_valid:
        return result  # remaining checks compare against these values

    # --- Denominators ---
    if inputs.stock_price <= 0:
        result.errors.append(f"stock_price must be positive, got {inputs.stock_price}.")
    if inputs.initial_amount <= 0:
        result.errors.append(f"initial_amount must be positive, got {inputs.initial_amount}.")
    if inputs.number_of_withdrawals < 0:
        result.errors.append(
            f"number_of_withdrawals must not be negative, got {inputs.number_of_withdrawals}."
        )
    elif inputs.number_of_withdrawals == 0:
        result.warnings.append(
            "number_of_withdrawals is 0; the fallback withdrawal estimate is undefined "
            "if the goal is not achievable."
        )

    # --- Amounts ---
    if inputs.annual_dividend_per_share < 0:
        result.warnings.append("annual_dividend_per_share is negative.")
    if inputs.withdrawal_amount < 0:
        result.warnings.append("withdrawal_amount is negative; withdrawals will add shares.")

    # --- Percentages ---
    for name in ("price_variance", "dividend_variance", "expense_ratio"):
        if getattr(inputs, name) < 0:
            result.warnings.append(f"{name} is negative ({getattr(inputs, name)}%).")
    if inputs.price_variance >= 100:
        result.warnings.append("price_variance >= 100% allows zero or negative prices.")

    # --- Frequency ---
    if inputs.dividend_frequency not in FREQUENCY_DIVISORS:
        result.warnings.append(
            f"Unrecognized dividend_frequency {inputs.dividend_frequency!r}, treated as monthly."
        )

    # --- Dates ---
    if inputs.first_withdrawal_date < inputs.initial_investment_date:
        result.warnings.append(
            "first_withdrawal_date is before initial_investment_date; "
            "withdrawals start with the first simulated month."
        )

    return result
