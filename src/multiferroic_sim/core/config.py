"""Parameter container for multiferroic material models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace

import numpy as np

from ..utils.constants import (
    DEFAULT_COUPLING_STRENGTH,
    DEFAULT_ELECTRIC_FIELD,
    DEFAULT_ELECTRIC_FIELD_AMPLITUDE,
    DEFAULT_INITIAL_MAGNETIZATION,
    DEFAULT_INITIAL_POLARIZATION,
    DEFAULT_INITIAL_STRAIN,
    DEFAULT_MAGNETIC_FIELD,
    DEFAULT_MAGNETIC_FIELD_AMPLITUDE,
    DEFAULT_MECHANICAL_STRESS,
    DEFAULT_MECHANICAL_STRESS_AMPLITUDE,
    DEFAULT_SPATIAL_FREQUENCY,
    DEFAULT_TEMPORAL_FREQUENCY,
    MAGNETIZATION_LIMITS,
    POLARIZATION_LIMITS,
    STRAIN_LIMITS,
)


@dataclass
class MaterialConfig:
    """Initial conditions, coupling, clamp bounds and drive-signal shape.

    This is a parameter bag: no relation between fields is enforced on
    construction. Call :meth:`validate` explicitly to check consistency.

    Parameters
    ----------
    initial_polarization, initial_magnetization, initial_strain
        State the material model starts from.
    coupling_strength
        Coefficient of the sequential P/M/S coupling rule.
    electric_field, magnetic_field, mechanical_stress
        Steady field seeds. Recorded for inspection only; the model derives
        its drive fields from position and time instead.
    polarization_min, polarization_max, magnetization_min, magnetization_max,
    strain_min, strain_max
        Closed clamp intervals applied after every update.
    spatial_frequency, temporal_frequency
        Angular frequencies of the position/time drive signals.
    electric_field_amplitude, magnetic_field_amplitude, mechanical_stress_amplitude
        Drive-signal amplitudes.
    """

    initial_polarization: float = DEFAULT_INITIAL_POLARIZATION
    initial_magnetization: float = DEFAULT_INITIAL_MAGNETIZATION
    initial_strain: float = DEFAULT_INITIAL_STRAIN
    coupling_strength: float = DEFAULT_COUPLING_STRENGTH
    electric_field: float = DEFAULT_ELECTRIC_FIELD
    magnetic_field: float = DEFAULT_MAGNETIC_FIELD
    mechanical_stress: float = DEFAULT_MECHANICAL_STRESS

    polarization_min: float = POLARIZATION_LIMITS[0]
    polarization_max: float = POLARIZATION_LIMITS[1]
    magnetization_min: float = MAGNETIZATION_LIMITS[0]
    magnetization_max: float = MAGNETIZATION_LIMITS[1]
    strain_min: float = STRAIN_LIMITS[0]
    strain_max: float = STRAIN_LIMITS[1]

    spatial_frequency: float = DEFAULT_SPATIAL_FREQUENCY
    temporal_frequency: float = DEFAULT_TEMPORAL_FREQUENCY
    electric_field_amplitude: float = DEFAULT_ELECTRIC_FIELD_AMPLITUDE
    magnetic_field_amplitude: float = DEFAULT_MAGNETIC_FIELD_AMPLITUDE
    mechanical_stress_amplitude: float = DEFAULT_MECHANICAL_STRESS_AMPLITUDE

    def copy(self) -> "MaterialConfig":
        """Return an independent copy with every field duplicated."""
        return replace(self)

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    def validate(self) -> None:
        """Raise ``ValueError`` when values are non-finite or bounds are inverted."""
        for item in fields(self):
            value = getattr(self, item.name)
            if not np.isfinite(value):
                raise ValueError(f"{item.name} must be finite, got {value!r}")
        for name in ("polarization", "magnetization", "strain"):
            lower = getattr(self, f"{name}_min")
            upper = getattr(self, f"{name}_max")
            if lower > upper:
                raise ValueError(f"{name}_min must not exceed {name}_max")
