"""Position/time sweep driver for multiferroic material models."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..core.coupling import MaterialState
from ..io.report import print_state_line
from ..materials.multiferroic import MultiferroicMaterial
from ..utils.constants import (
    DEFAULT_POSITION_STEP,
    DEFAULT_REPORT_EVERY,
    DEFAULT_SWEEP_STEPS,
    DEFAULT_TIME_STEP,
)


@dataclass(frozen=True)
class SweepResult:
    """Trajectory recorded over one sweep, one entry per energy query."""

    application: str
    positions: np.ndarray
    times: np.ndarray
    energy: np.ndarray
    polarization: np.ndarray
    magnetization: np.ndarray
    strain: np.ndarray

    @property
    def steps(self) -> int:
        return int(self.energy.size)

    @property
    def final_state(self) -> MaterialState:
        return MaterialState(
            polarization=float(self.polarization[-1]),
            magnetization=float(self.magnetization[-1]),
            strain=float(self.strain[-1]),
        )


def run_application_sweep(
    material: MultiferroicMaterial,
    *,
    steps: int = DEFAULT_SWEEP_STEPS,
    position_step: float = DEFAULT_POSITION_STEP,
    time_step: float = DEFAULT_TIME_STEP,
    report_every: int = DEFAULT_REPORT_EVERY,
    application: str = "",
    verbose: bool = False,
) -> SweepResult:
    """Query ``material`` at ``x = i*position_step``, ``t = i*time_step``.

    Each query advances the material state, so the returned arrays hold the
    post-update trajectory. ``position_y`` is always 0.

    Parameters
    ----------
    material
        Model to drive. Its state is mutated in place.
    steps
        Number of energy queries.
    report_every
        Print a trajectory line every ``report_every`` steps when ``verbose``.
    application
        Label stored on the result; empty unless the caller names the preset.
    """
    if material is None:
        raise ValueError("material must not be None")
    if steps <= 0:
        raise ValueError("steps must be positive")
    if report_every <= 0:
        raise ValueError("report_every must be positive")

    indices = np.arange(steps, dtype=np.float64)
    positions = indices * position_step
    times = indices * time_step

    energy = np.zeros(steps, dtype=np.float64)
    polarization = np.zeros(steps, dtype=np.float64)
    magnetization = np.zeros(steps, dtype=np.float64)
    strain = np.zeros(steps, dtype=np.float64)

    for i in range(steps):
        energy[i] = material.energy_density(float(positions[i]), 0.0, float(times[i]))
        state = material.state
        polarization[i] = state.polarization
        magnetization[i] = state.magnetization
        strain[i] = state.strain

        if verbose and i % report_every == 0:
            print_state_line(i, float(energy[i]), state)

    return SweepResult(
        application=str(application),
        positions=positions,
        times=times,
        energy=energy,
        polarization=polarization,
        magnetization=magnetization,
        strain=strain,
    )
