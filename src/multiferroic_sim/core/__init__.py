"""Core coupling rule, drive signals and configuration container."""

from .config import MaterialConfig
from .coupling import EnergyBreakdown, MaterialState, clamp, coupled_update, energy_terms
from .drive import DriveFields, evaluate_drive_fields

__all__ = [
    "MaterialConfig",
    "EnergyBreakdown",
    "MaterialState",
    "clamp",
    "coupled_update",
    "energy_terms",
    "DriveFields",
    "evaluate_drive_fields",
]
