"""
Projection runner — wires settings and random sources into the engine and
runs named scenarios side by side.

Each scenario is one independent path. With a seed every scenario gets its
own generator seeded identically, so a scenario's result does not depend on
its position in the list.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Tuple, Union

import pandas as pd

from core.config import CalculatorInputs, ProjectionSettings, get_settings
from core.schema import CalculationResult
from distributions.sampler import UniformPerturbation
from pm.metrics import first_negative_month
from scenarios.presets import Scenario

from .projection import project

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = (
    "scenario",
    "goal_achievable",
    "final_balance",
    "total_dividends",
    "total_expenses",
    "total_withdrawals",
    "required_yield_pct",
    "max_monthly_withdrawal",
    "months",
    "first_negative_month",
)


def run_projection(
    inputs: CalculatorInputs,
    *,
    seed: Optional[int] = None,
    validate: Optional[bool] = None,
    settings: Optional[ProjectionSettings] = None,
) -> CalculationResult:
    """
    Project one set of inputs.

    seed and validate default to the values in settings (or get_settings()
    when no settings are passed).
    """
    cfg = settings if settings is not None else get_settings()
    if seed is None:
        seed = cfg.seed
    if validate is None:
        validate = cfg.validate
    return project(inputs, rng=UniformPerturbation(seed), validate=validate)


def run_scenarios(
    scenarios: Iterable[Union[Scenario, Tuple[str, CalculatorInputs]]],
    *,
    seed: Optional[int] = None,
    validate: Optional[bool] = None,
    settings: Optional[ProjectionSettings] = None,
) -> Tuple[pd.DataFrame, Dict[str, CalculationResult]]:
    """
    Project several named scenarios.

    Returns
    -------
    (summary_df, results)
    summary_df: one row per scenario with SUMMARY_COLUMNS
    results: scenario name -> CalculationResult
    """
    cfg = settings if settings is not None else get_settings()
    rows = []
    results: Dict[str, CalculationResult] = {}

    for item in scenarios:
        if isinstance(item, Scenario):
            name, inputs = item.name, item.inputs
        else:
            name, inputs = item
        if name in results:
            raise ValueError(f"Duplicate scenario name: {name!r}")

        result = run_projection(inputs, seed=seed, validate=validate, settings=cfg)
        results[name] = result
        logger.info(
            "Scenario %s: %s after %d months",
            name,
            "achievable" if result.is_goal_achievable else "not achievable",
            result.n_months,
        )

        rows.append({
            "scenario": name,
            "goal_achievable": result.is_goal_achievable,
            "final_balance": result.final_balance,
            "total_dividends": result.total_dividends_earned,
            "total_expenses": result.total_expenses,
            "total_withdrawals": sum(m.withdrawal_amount for m in result.monthly_breakdown),
            "required_yield_pct": result.required_dividend_yield,
            "max_monthly_withdrawal": result.max_monthly_withdrawal,
            "months": result.n_months,
            "first_negative_month": first_negative_month(result),
        })

    return pd.DataFrame(rows, columns=list(SUMMARY_COLUMNS)), results
