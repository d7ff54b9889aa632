"""Multiferroic material model and application presets."""

from .multiferroic import RECONFIGURABLE_FIELDS, MultiferroicMaterial, legacy_config
from .presets import (
    APPLICATION_PRESETS,
    ApplicationType,
    available_applications,
    create_custom_material,
    create_default_material,
    create_material,
    create_material_with_field_seeds,
    preset_config,
    resolve_application,
)

__all__ = [
    "RECONFIGURABLE_FIELDS",
    "MultiferroicMaterial",
    "legacy_config",
    "APPLICATION_PRESETS",
    "ApplicationType",
    "available_applications",
    "create_custom_material",
    "create_default_material",
    "create_material",
    "create_material_with_field_seeds",
    "preset_config",
    "resolve_application",
]
