"""
Projection engine — monthly reinvest/withdraw simulation + scenario runner.
"""

from .projection import project
from .runner import run_projection, run_scenarios

__all__ = ["project", "run_projection", "run_scenarios"]
