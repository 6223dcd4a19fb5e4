from __future__ import annotations

from datetime import date, datetime
from typing import List

import pandas as pd
from dateutil.relativedelta import relativedelta

# Dividend payments per year for each supported frequency.
FREQUENCY_DIVISORS = {
    "weekly": 52,
    "monthly": 12,
    "quarterly": 4,
}
DEFAULT_FREQUENCY_DIVISOR = 12


def frequency_divisor(frequency: str) -> int:
    """Periods per year for a dividend frequency; unrecognized values count as monthly."""
    return FREQUENCY_DIVISORS.get(frequency, DEFAULT_FREQUENCY_DIVISOR)


def to_date(value) -> date:
    """Coerce an ISO 8601 string, datetime or Timestamp to a calendar date."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    ts = pd.Timestamp(value)
    if pd.isna(ts):
        raise ValueError(f"Not a valid date: {value!r}")
    return ts.date()


def add_months(start: date, months: int) -> date:
    """
    Shift a date by whole calendar months.

    The day of month is kept where the target month has it and clamped to the
    target month's last day otherwise (Jan 31 + 1 month -> Feb 28/29).
    """
    return start + relativedelta(months=int(months))


def monthly_steps(start: date, end: date) -> List[date]:
    """
    Monthly step dates from start through end, inclusive.

    Every step is offset from start (not from the previous step) so a
    month-end start date does not drift after passing through a short month.
    """
    steps = []
    k = 0
    current = start
    while current <= end:
        steps.append(current)
        k += 1
        current = add_months(start, k)
    return steps
