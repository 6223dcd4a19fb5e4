"""
Distributions package — random perturbation sources consumed by the engine.
"""

from .sampler import ConstantPerturbation, PerturbationSource, UniformPerturbation

__all__ = [
    "PerturbationSource",
    "UniformPerturbation",
    "ConstantPerturbation",
]
