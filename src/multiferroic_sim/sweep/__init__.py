"""Sweep driver and application workflow."""

from .optimizer import MultiferroicOptimizer
from .runner import SweepResult, run_application_sweep

__all__ = [
    "MultiferroicOptimizer",
    "SweepResult",
    "run_application_sweep",
]
