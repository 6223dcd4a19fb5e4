"""
PM outputs — summary metrics and the sustainability report.
"""

from .metrics import (
    breakdown_to_frame,
    first_negative_month,
    is_goal_achievable,
    max_monthly_withdrawal,
    required_dividend_yield,
)
from .decisions import SustainabilityReport, generate_sustainability_report

__all__ = [
    "breakdown_to_frame",
    "first_negative_month",
    "is_goal_achievable",
    "max_monthly_withdrawal",
    "required_dividend_yield",
    "SustainabilityReport",
    "generate_sustainability_report",
]
