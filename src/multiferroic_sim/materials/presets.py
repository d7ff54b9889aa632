"""Application presets and material factory helpers."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union

from ..core.config import MaterialConfig
from .multiferroic import MultiferroicMaterial


class ApplicationType(str, Enum):
    """Application tags with a tuned material preset (CUSTOM has none)."""

    GENERAL = "general"
    SENSOR = "sensor"
    ACTUATOR = "actuator"
    MEMORY = "memory"
    ENERGY_HARVESTING = "energy-harvesting"
    CUSTOM = "custom"


ApplicationTag = Union[ApplicationType, str]
ConfigCustomizer = Callable[[MaterialConfig], None]

# Overrides on top of the MaterialConfig defaults, per application.
APPLICATION_PRESETS: Mapping[ApplicationType, Mapping[str, float]] = MappingProxyType(
    {
        ApplicationType.GENERAL: MappingProxyType(
            {
                "initial_polarization": 0.1,
                "coupling_strength": 1e-8,
                "electric_field_amplitude": 1e3,
                "magnetic_field_amplitude": 1e-3,
                "mechanical_stress_amplitude": 1e6,
            }
        ),
        # Lower bias and stress for sensitivity, finer spatial/temporal response
        ApplicationType.SENSOR: MappingProxyType(
            {
                "initial_polarization": 0.05,
                "coupling_strength": 5e-8,
                "electric_field_amplitude": 500.0,
                "magnetic_field_amplitude": 5e-4,
                "mechanical_stress_amplitude": 1e5,
                "spatial_frequency": 0.2,
                "temporal_frequency": 0.1,
            }
        ),
        # Strong drive and widened polarization/strain limits for output stroke
        ApplicationType.ACTUATOR: MappingProxyType(
            {
                "initial_polarization": 0.2,
                "coupling_strength": 2e-7,
                "electric_field_amplitude": 5e3,
                "magnetic_field_amplitude": 5e-3,
                "mechanical_stress_amplitude": 5e6,
                "polarization_max": 5e-2,
                "strain_max": 0.2,
            }
        ),
        # Neutral start, switching-level fields, slow temporal drive for retention
        ApplicationType.MEMORY: MappingProxyType(
            {
                "initial_polarization": 0.0,
                "coupling_strength": 1e-7,
                "electric_field_amplitude": 2e3,
                "magnetic_field_amplitude": 2e-3,
                "mechanical_stress_amplitude": 2e6,
                "temporal_frequency": 0.01,
            }
        ),
        # Broad spatial coverage, high-frequency stress for AC harvesting
        ApplicationType.ENERGY_HARVESTING: MappingProxyType(
            {
                "initial_polarization": 0.1,
                "coupling_strength": 1e-7,
                "electric_field_amplitude": 1.5e3,
                "magnetic_field_amplitude": 1.5e-3,
                "mechanical_stress_amplitude": 3e6,
                "spatial_frequency": 0.05,
                "temporal_frequency": 0.2,
            }
        ),
    }
)


def resolve_application(tag: ApplicationTag) -> ApplicationType:
    """Return the preset key for ``tag``; unrecognized tags resolve to GENERAL."""
    if isinstance(tag, ApplicationType):
        application = tag
    elif isinstance(tag, str):
        normalized = tag.strip().lower().replace("_", "-").replace(" ", "-")
        try:
            application = ApplicationType(normalized)
        except ValueError:
            return ApplicationType.GENERAL
    else:
        return ApplicationType.GENERAL

    if application not in APPLICATION_PRESETS:
        return ApplicationType.GENERAL
    return application


def preset_config(tag: ApplicationTag) -> MaterialConfig:
    """Return a fresh configuration for ``tag``, falling back to the general preset."""
    return MaterialConfig(**APPLICATION_PRESETS[resolve_application(tag)])


def available_applications() -> tuple[ApplicationType, ...]:
    return tuple(ApplicationType)


def create_default_material() -> MultiferroicMaterial:
    return MultiferroicMaterial(preset_config(ApplicationType.GENERAL))


def create_material(
    application: ApplicationTag = ApplicationType.GENERAL,
    customizer: Optional[ConfigCustomizer] = None,
) -> MultiferroicMaterial:
    """Build a material from a preset, optionally tweaked by ``customizer``.

    Parameters
    ----------
    application
        Preset tag. Unknown tags use the general preset.
    customizer
        Callable receiving a private copy of the preset; it mutates the copy
        in place before the model is bound to it.
    """
    config = preset_config(application)
    if customizer is not None:
        customizer(config)
    return MultiferroicMaterial(config)


def create_custom_material(config: MaterialConfig) -> MultiferroicMaterial:
    return MultiferroicMaterial(config)


def create_material_with_field_seeds(electric_field: float, magnetic_field: float) -> MultiferroicMaterial:
    """General preset with the steady electric/magnetic seeds overwritten."""
    config = preset_config(ApplicationType.GENERAL)
    config.electric_field = electric_field
    config.magnetic_field = magnetic_field
    return MultiferroicMaterial(config)
