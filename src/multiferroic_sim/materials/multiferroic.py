"""Stateful multiferroic material model driven by position/time queries."""

from __future__ import annotations

from typing import Optional

from ..core.config import MaterialConfig
from ..core.coupling import EnergyBreakdown, MaterialState, coupled_update, energy_terms
from ..core.drive import evaluate_drive_fields
from ..utils.constants import (
    DEFAULT_COUPLING_STRENGTH,
    DEFAULT_ELECTRIC_FIELD,
    DEFAULT_INITIAL_MAGNETIZATION,
    DEFAULT_INITIAL_STRAIN,
    DEFAULT_MAGNETIC_FIELD,
    DEFAULT_MECHANICAL_STRESS,
)

# Fields overwritten by MultiferroicMaterial.update_configuration. Initial
# values, field seeds and clamp bounds stay fixed for the model lifetime.
RECONFIGURABLE_FIELDS = (
    "coupling_strength",
    "spatial_frequency",
    "temporal_frequency",
    "electric_field_amplitude",
    "magnetic_field_amplitude",
    "mechanical_stress_amplitude",
)


def legacy_config(
    initial_polarization: float,
    electric_field: float = DEFAULT_ELECTRIC_FIELD,
    magnetic_field: float = DEFAULT_MAGNETIC_FIELD,
    mechanical_stress: float = DEFAULT_MECHANICAL_STRESS,
    *,
    initial_magnetization: float = DEFAULT_INITIAL_MAGNETIZATION,
    initial_strain: float = DEFAULT_INITIAL_STRAIN,
    coupling_strength: float = DEFAULT_COUPLING_STRENGTH,
) -> MaterialConfig:
    """Build a configuration from positional initial-state and field seeds.

    Clamp bounds and drive-signal shape take their defaults. Passing only
    ``initial_polarization`` and the three seeds reproduces the simplified
    construction path; the keyword arguments cover the full one.
    """
    return MaterialConfig(
        initial_polarization=initial_polarization,
        initial_magnetization=initial_magnetization,
        initial_strain=initial_strain,
        coupling_strength=coupling_strength,
        electric_field=electric_field,
        magnetic_field=magnetic_field,
        mechanical_stress=mechanical_stress,
    )


class MultiferroicMaterial:
    """Coupled polarization/magnetization/strain state bound to a configuration.

    The model keeps a private copy of the configuration it was built with, so
    two models never share mutable parameters. Every energy query advances the
    state by one coupled step before evaluating the energy.
    """

    def __init__(self, config: Optional[MaterialConfig]):
        if config is None:
            raise ValueError("config must not be None; clamp bounds are undefined without one")

        self._config = config.copy()
        self._state = MaterialState(
            polarization=self._config.initial_polarization,
            magnetization=self._config.initial_magnetization,
            strain=self._config.initial_strain,
        )

    @classmethod
    def from_legacy(
        cls,
        initial_polarization: float,
        electric_field: float = DEFAULT_ELECTRIC_FIELD,
        magnetic_field: float = DEFAULT_MAGNETIC_FIELD,
        mechanical_stress: float = DEFAULT_MECHANICAL_STRESS,
        **kwargs: float,
    ) -> "MultiferroicMaterial":
        """Construct from seed values; see :func:`legacy_config`."""
        return cls(
            legacy_config(
                initial_polarization,
                electric_field,
                magnetic_field,
                mechanical_stress,
                **kwargs,
            )
        )

    @property
    def config(self) -> MaterialConfig:
        """Copy of the bound configuration; edits to it do not reach the model."""
        return self._config.copy()

    @property
    def state(self) -> MaterialState:
        return self._state

    @property
    def polarization(self) -> float:
        return self._state.polarization

    @property
    def magnetization(self) -> float:
        return self._state.magnetization

    @property
    def strain(self) -> float:
        return self._state.strain

    @property
    def coupling_strength(self) -> float:
        return self._config.coupling_strength

    def update(self, electric_field: float, magnetic_field: float, mechanical_stress: float) -> None:
        """Apply one coupled P -> M -> S step and clamp to the configured bounds."""
        self._state = coupled_update(
            self._state,
            electric_field,
            magnetic_field,
            mechanical_stress,
            self._config,
        )

    def energy_breakdown(
        self,
        position_x: float = 0.0,
        position_y: float = 0.0,
        time: float = 0.0,
    ) -> EnergyBreakdown:
        """Drive the material at ``(position_x, time)`` and return the energy terms.

        ``position_y`` is accepted for call-site symmetry and does not enter
        the drive signals. The state is updated before the terms are
        evaluated, so repeated calls with the same arguments differ.
        """
        drive = evaluate_drive_fields(self._config, position_x, time)
        self.update(drive.electric_field, drive.magnetic_field, drive.mechanical_stress)
        return energy_terms(self._state, drive, self._config.coupling_strength)

    def energy_density(self, position_x: float = 0.0, position_y: float = 0.0, time: float = 0.0) -> float:
        """Drive the material one step and return the total energy density."""
        return self.energy_breakdown(position_x, position_y, time).total

    def update_configuration(self, new_config: Optional[MaterialConfig]) -> None:
        """Overwrite coupling strength and drive-signal shape from ``new_config``.

        ``None`` is ignored. The current state is left as is; only later
        updates see the new parameters.
        """
        if new_config is None:
            return

        for name in RECONFIGURABLE_FIELDS:
            setattr(self._config, name, getattr(new_config, name))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(polarization={self.polarization!r}, "
            f"magnetization={self.magnetization!r}, strain={self.strain!r}, "
            f"coupling_strength={self.coupling_strength!r})"
        )
