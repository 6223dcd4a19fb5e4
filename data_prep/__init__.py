"""
Data preparation — loading calculator inputs and validating them.
"""

from .loader import inputs_from_dict, load_inputs_json
from .validators import ValidationResult, validate_inputs

__all__ = [
    "inputs_from_dict",
    "load_inputs_json",
    "ValidationResult",
    "validate_inputs",
]
