"""
Core package — input/result data model, settings, and shared utilities.
No business logic lives here.
"""

from .config import CalculatorInputs, ProjectionSettings, get_settings
from .errors import InvalidInput
from .schema import BREAKDOWN_COLUMNS, CalculationResult, MonthlyData
from .utils import add_months, frequency_divisor, monthly_steps, to_date

__all__ = [
    "CalculatorInputs",
    "ProjectionSettings",
    "get_settings",
    "InvalidInput",
    "BREAKDOWN_COLUMNS",
    "CalculationResult",
    "MonthlyData",
    "add_months",
    "frequency_divisor",
    "monthly_steps",
    "to_date",
]
