"""
Build CalculatorInputs from plain mappings or JSON files.

Keys may be snake_case (initial_amount) or camelCase (initialAmount).
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from core.config import CalculatorInputs
from core.errors import InvalidInput
from core.utils import to_date

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "initial_amount",
    "stock_price",
    "annual_dividend_per_share",
    "dividend_frequency",
    "withdrawal_amount",
    "number_of_withdrawals",
    "reinvest_dividends",
    "initial_investment_date",
    "first_withdrawal_date",
)

OPTIONAL_DEFAULTS: Dict[str, Any] = {
    "withdrawal_frequency": "monthly",
    "price_variance": 0.0,
    "dividend_variance": 0.0,
    "expense_ratio": 0.0,
}

_FLOAT_FIELDS = {
    "initial_amount",
    "stock_price",
    "annual_dividend_per_share",
    "withdrawal_amount",
    "price_variance",
    "dividend_variance",
    "expense_ratio",
}


def _snake(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        v = value.strip().lower()
        if v in ("true", "yes", "y", "1", "on"):
            return True
        if v in ("false", "no", "n", "0", "off", ""):
            return False
        raise ValueError(f"Not a boolean: {value!r}")
    return bool(value)


def _to_count(value: Any) -> int:
    f = float(value)
    if not f.is_integer():
        raise ValueError(f"Not a whole number: {value!r}")
    return int(f)


def inputs_from_dict(data: Mapping[str, Any]) -> CalculatorInputs:
    """
    Coerce a mapping into CalculatorInputs.

    Missing optional fields get their defaults; unknown keys are ignored with
    a warning. Raises InvalidInput for missing required fields or values that
    cannot be coerced.
    """
    known = set(REQUIRED_FIELDS) | set(OPTIONAL_DEFAULTS)
    normalized: Dict[str, Any] = {}
    for key, value in data.items():
        name = _snake(str(key))
        if name not in known:
            logger.warning("Ignoring unknown input field %r", key)
            continue
        normalized[name] = value

    missing = [f for f in REQUIRED_FIELDS if normalized.get(f) is None]
    if missing:
        raise InvalidInput([f"Missing required field: {f}" for f in missing])

    for name, default in OPTIONAL_DEFAULTS.items():
        if normalized.get(name) is None:
            normalized[name] = default

    problems: List[str] = []
    kwargs: Dict[str, Any] = {}
    for name, value in normalized.items():
        try:
            if name in _FLOAT_FIELDS:
                kwargs[name] = float(value)
            elif name == "number_of_withdrawals":
                kwargs[name] = _to_count(value)
            elif name == "reinvest_dividends":
                kwargs[name] = _to_bool(value)
            elif name.endswith("_date"):
                kwargs[name] = to_date(value)
            else:
                kwargs[name] = str(value).strip().lower()
        except (TypeError, ValueError) as exc:
            problems.append(f"{name}: {exc}")
    if problems:
        raise InvalidInput(problems)

    return CalculatorInputs(**kwargs)


def load_inputs_json(path: Union[str, Path]) -> Union[CalculatorInputs, List[CalculatorInputs]]:
    """Load one input object, or a list of them, from a JSON file."""
    with open(path, "r", encoding="utf-8") as fh:
        payload = json.load(fh)
    if isinstance(payload, list):
        return [inputs_from_dict(item) for item in payload]
    if not isinstance(payload, dict):
        raise InvalidInput([f"Expected a JSON object or list in {path}"])
    return inputs_from_dict(payload)
