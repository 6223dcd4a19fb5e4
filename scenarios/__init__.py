"""
Scenario presets — pre-filled calculator inputs for quick comparisons.
"""

from .presets import Scenario, build_test_scenarios, default_inputs, get_scenario

__all__ = [
    "Scenario",
    "build_test_scenarios",
    "default_inputs",
    "get_scenario",
]
