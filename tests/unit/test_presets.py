"""Tests for application presets and the construction paths built on them."""

from __future__ import annotations

import pytest

from multiferroic_sim.core import MaterialConfig
from multiferroic_sim.materials import (
    APPLICATION_PRESETS,
    ApplicationType,
    MultiferroicMaterial,
    available_applications,
    create_custom_material,
    create_default_material,
    create_material,
    create_material_with_field_seeds,
    legacy_config,
    preset_config,
    resolve_application,
)


def _trajectory(material: MultiferroicMaterial, steps: int = 25) -> list[float]:
    return [material.energy_density(0.1 * i, 0.0, 0.01 * i) for i in range(steps)]


@pytest.mark.parametrize("tag", ["bogus", "", "custom", ApplicationType.CUSTOM, None, 42])
def test_unrecognized_tag_falls_back_to_general(tag):
    assert preset_config(tag) == preset_config(ApplicationType.GENERAL)


def test_general_preset_matches_configuration_defaults():
    assert preset_config("general") == MaterialConfig()


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("sensor", ApplicationType.SENSOR),
        ("ACTUATOR", ApplicationType.ACTUATOR),
        (" memory ", ApplicationType.MEMORY),
        ("energy-harvesting", ApplicationType.ENERGY_HARVESTING),
        ("energy_harvesting", ApplicationType.ENERGY_HARVESTING),
        (ApplicationType.SENSOR, ApplicationType.SENSOR),
    ],
)
def test_tag_resolution(tag, expected):
    assert resolve_application(tag) == expected


def test_preset_values_are_applied_over_defaults():
    sensor = preset_config(ApplicationType.SENSOR)
    actuator = preset_config(ApplicationType.ACTUATOR)
    memory = preset_config(ApplicationType.MEMORY)
    harvesting = preset_config(ApplicationType.ENERGY_HARVESTING)

    assert sensor.coupling_strength == 5e-8
    assert sensor.spatial_frequency == 0.2
    assert sensor.strain_max == 0.1
    assert actuator.polarization_max == 5e-2
    assert actuator.strain_max == 0.2
    assert actuator.polarization_min == -1e-2
    assert memory.initial_polarization == 0.0
    assert memory.temporal_frequency == 0.01
    assert memory.spatial_frequency == 0.1
    assert harvesting.mechanical_stress_amplitude == 3e6
    assert harvesting.temporal_frequency == 0.2


def test_preset_lookup_returns_private_copies():
    first = preset_config(ApplicationType.SENSOR)
    first.coupling_strength = 1.0

    assert preset_config(ApplicationType.SENSOR).coupling_strength == 5e-8
    assert APPLICATION_PRESETS[ApplicationType.SENSOR]["coupling_strength"] == 5e-8


def test_preset_table_is_read_only():
    with pytest.raises(TypeError):
        APPLICATION_PRESETS[ApplicationType.SENSOR]["coupling_strength"] = 1.0  # type: ignore[index]


def test_available_applications_lists_every_tag():
    applications = available_applications()

    assert applications[0] is ApplicationType.GENERAL
    assert set(applications) == set(ApplicationType)
    assert ApplicationType.CUSTOM not in APPLICATION_PRESETS


def test_customizer_mutates_a_private_copy():
    seen = []

    def tweak(config: MaterialConfig) -> None:
        seen.append(config)
        config.coupling_strength *= 2.0
        config.spatial_frequency = 0.5

    material = create_material(ApplicationType.SENSOR, tweak)

    assert len(seen) == 1
    assert material.coupling_strength == pytest.approx(1e-7)
    assert material.config.spatial_frequency == 0.5
    assert preset_config(ApplicationType.SENSOR).spatial_frequency == 0.2


def test_missing_customizer_is_ignored():
    assert create_material(ApplicationType.MEMORY, None).config == preset_config("memory")


def test_create_material_does_not_alias_preset_between_models():
    a = create_material(ApplicationType.ACTUATOR)
    b = create_material(ApplicationType.ACTUATOR)

    a.update_configuration(MaterialConfig(coupling_strength=0.0))

    assert b.coupling_strength == 2e-7
    assert preset_config(ApplicationType.ACTUATOR).coupling_strength == 2e-7


def test_field_seed_factory_only_overwrites_seeds():
    material = create_material_with_field_seeds(12.0, 0.5)
    expected = preset_config(ApplicationType.GENERAL)
    expected.electric_field = 12.0
    expected.magnetic_field = 0.5

    assert material.config == expected


def test_simplified_legacy_config_defaults_remaining_state():
    config = legacy_config(0.05, 1.0, 2.0, 3.0)

    assert config.initial_polarization == 0.05
    assert (config.electric_field, config.magnetic_field, config.mechanical_stress) == (1.0, 2.0, 3.0)
    assert config.initial_magnetization == 1e-6
    assert config.initial_strain == 0.0
    assert config.coupling_strength == 1e-8
    assert config.strain_max == 0.1
    assert config.spatial_frequency == 0.1


def test_full_legacy_config_sets_initial_state_and_coupling():
    material = MultiferroicMaterial.from_legacy(
        0.005,
        1.0,
        2.0,
        3.0,
        initial_magnetization=4e-6,
        initial_strain=0.01,
        coupling_strength=2e-8,
    )

    assert (material.polarization, material.magnetization, material.strain) == (0.005, 4e-6, 0.01)
    assert material.coupling_strength == 2e-8
    assert material.config.mechanical_stress == 3.0


def test_construction_paths_converge_on_identical_behavior():
    explicit = MaterialConfig(
        initial_polarization=0.005,
        initial_magnetization=4e-6,
        initial_strain=0.01,
        coupling_strength=2e-8,
        electric_field=1.0,
        magnetic_field=2.0,
        mechanical_stress=3.0,
    )
    legacy = MultiferroicMaterial.from_legacy(
        0.005, 1.0, 2.0, 3.0, initial_magnetization=4e-6, initial_strain=0.01, coupling_strength=2e-8
    )

    def customize(config: MaterialConfig) -> None:
        for name, value in explicit.as_dict().items():
            setattr(config, name, value)

    customized = create_material("sensor", customize)

    reference = _trajectory(create_custom_material(explicit))
    assert _trajectory(legacy) == reference
    assert _trajectory(customized) == reference
    assert _trajectory(create_default_material()) == _trajectory(create_material(ApplicationType.GENERAL))
