"""Console diagnostics for material sweeps and configurations."""

from __future__ import annotations

from typing import Optional, Sequence

from ..core.config import MaterialConfig
from ..core.coupling import MaterialState

# Field groups shown by format_config_summary, in display order.
CONFIG_SUMMARY_GROUPS = (
    ("initial", ("initial_polarization", "initial_magnetization", "initial_strain")),
    ("coupling", ("coupling_strength",)),
    (
        "limits",
        (
            "polarization_min",
            "polarization_max",
            "magnetization_min",
            "magnetization_max",
            "strain_min",
            "strain_max",
        ),
    ),
    (
        "drive",
        (
            "spatial_frequency",
            "temporal_frequency",
            "electric_field_amplitude",
            "magnetic_field_amplitude",
            "mechanical_stress_amplitude",
        ),
    ),
)


def format_state_line(step: int, energy: float, state: MaterialState) -> str:
    """Build the per-step trajectory line used by the sweep driver."""
    return (
        f"Step {step}: Energy = {energy:.3E}, "
        f"P = {state.polarization:.3E}, "
        f"M = {state.magnetization:.3E}, "
        f"S = {state.strain:.3E}"
    )


def format_config_summary(
    config: MaterialConfig,
    groups: Optional[Sequence[tuple[str, Sequence[str]]]] = None,
) -> str:
    """Build a compact deterministic ``group: name=value`` summary string."""
    rendered = []
    for group, names in groups or CONFIG_SUMMARY_GROUPS:
        values = ", ".join(f"{name}={getattr(config, name):.3e}" for name in names)
        rendered.append(f"{group}: {values}")
    return "; ".join(rendered)


def print_state_line(step: int, energy: float, state: MaterialState, prefix: str = "[sweep] ") -> None:
    print(f"{prefix}{format_state_line(step, energy, state)}")


def print_config_summary(config: MaterialConfig, prefix: str = "[config] ") -> None:
    """Print one line per configuration group."""
    for line in format_config_summary(config).split("; "):
        print(f"{prefix}{line}")
