"""Sequential magnetoelectric-elastic coupling rule and energy terms."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .config import MaterialConfig
from .drive import DriveFields


@dataclass(frozen=True)
class MaterialState:
    """Snapshot of polarization, magnetization and strain."""

    polarization: float
    magnetization: float
    strain: float


@dataclass(frozen=True)
class EnergyBreakdown:
    """Per-channel contributions to the energy density of one query."""

    electric: float
    magnetic: float
    mechanical: float
    coupling: float

    @property
    def total(self) -> float:
        return self.electric + self.magnetic + self.mechanical + self.coupling


def clamp(value: float, lower: float, upper: float) -> float:
    """Saturate ``value`` to ``[lower, upper]``; NaN passes through unchanged."""
    return float(np.clip(value, lower, upper))


def coupled_update(
    state: MaterialState,
    electric_field: float,
    magnetic_field: float,
    mechanical_stress: float,
    config: MaterialConfig,
) -> MaterialState:
    """Advance ``state`` by one coupled step and clamp to ``config`` bounds.

    The three increments are applied in order P, M, S. Each increment sees
    the values already written by the previous one, so the strain term uses
    the freshly updated polarization while the polarization term uses the
    magnetization from before this step. Clamping happens once, after all
    three increments.

    Parameters
    ----------
    state
        State before the step.
    electric_field, magnetic_field, mechanical_stress
        Instantaneous drive values. Any float is accepted; non-finite values
        propagate through ordinary float arithmetic.
    config
        Supplies the coupling strength and clamp bounds, read at call time.
    """
    k = config.coupling_strength

    polarization = state.polarization + k * electric_field * state.magnetization
    magnetization = state.magnetization + k * magnetic_field * state.strain
    strain = state.strain + k * mechanical_stress * polarization

    return MaterialState(
        polarization=clamp(polarization, config.polarization_min, config.polarization_max),
        magnetization=clamp(magnetization, config.magnetization_min, config.magnetization_max),
        strain=clamp(strain, config.strain_min, config.strain_max),
    )


def energy_terms(state: MaterialState, drive: DriveFields, coupling_strength: float) -> EnergyBreakdown:
    """Return the electric/magnetic/mechanical/coupling energy-density terms."""
    return EnergyBreakdown(
        electric=0.5 * drive.electric_field * state.polarization,
        magnetic=0.5 * drive.magnetic_field * state.magnetization,
        mechanical=0.5 * drive.mechanical_stress * state.strain,
        coupling=coupling_strength * state.polarization * state.magnetization * state.strain,
    )
