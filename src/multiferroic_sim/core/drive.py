"""Position/time drive signals for multiferroic material queries."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .config import MaterialConfig


@dataclass(frozen=True)
class DriveFields:
    """Instantaneous drive values applied to the material for one step."""

    electric_field: float
    magnetic_field: float
    mechanical_stress: float


def evaluate_drive_fields(config: MaterialConfig, position_x: float, time: float) -> DriveFields:
    """Map a scalar position and time onto electric, magnetic and stress drives.

    The electric and magnetic drives are in quadrature along ``position_x``;
    the mechanical stress oscillates in ``time`` only.
    """
    phase_x = position_x * config.spatial_frequency
    phase_t = time * config.temporal_frequency
    return DriveFields(
        electric_field=float(np.sin(phase_x) * config.electric_field_amplitude),
        magnetic_field=float(np.cos(phase_x) * config.magnetic_field_amplitude),
        mechanical_stress=float(np.sin(phase_t) * config.mechanical_stress_amplitude),
    )
