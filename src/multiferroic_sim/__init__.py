"""Coupled polarization/magnetization/strain model for multiferroic materials.

This package provides a scalar state-update model for multiferroic materials
driven by position- and time-dependent fields, with application presets for
sensor, actuator, memory and energy-harvesting use.
"""

__version__ = "0.1.0"
__author__ = "Awarru"

# Core imports
from .core import MaterialConfig, MaterialState, EnergyBreakdown, DriveFields, evaluate_drive_fields

# Material imports
from .materials import (
    ApplicationType,
    MultiferroicMaterial,
    create_material,
    legacy_config,
    preset_config,
)

# Sweep imports
from .sweep import MultiferroicOptimizer, SweepResult, run_application_sweep

__all__ = [
    "MaterialConfig",
    "MaterialState",
    "EnergyBreakdown",
    "DriveFields",
    "evaluate_drive_fields",
    "ApplicationType",
    "MultiferroicMaterial",
    "create_material",
    "legacy_config",
    "preset_config",
    "MultiferroicOptimizer",
    "SweepResult",
    "run_application_sweep",
]
