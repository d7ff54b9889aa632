"""
Example: Multiferroic material sweeps for each application preset.

This example drives preset, custom and customized materials through the
default position/time sweep and prints the state trajectory every 20 steps.
"""

from multiferroic_sim.core import MaterialConfig
from multiferroic_sim.io import print_config_summary
from multiferroic_sim.materials import ApplicationType, create_material
from multiferroic_sim.sweep import MultiferroicOptimizer, run_application_sweep


def main():
    """Run the preset, custom and switching workflows."""
    print("=" * 60)
    print("Example: Multiferroic material optimization")
    print("=" * 60)

    print("\n1. Sensor application:")
    MultiferroicOptimizer(ApplicationType.SENSOR).optimize_for_application()

    print("\n2. Actuator application:")
    MultiferroicOptimizer(ApplicationType.ACTUATOR).optimize_for_application()

    print("\n3. Custom configuration:")
    custom_config = MaterialConfig(
        initial_polarization=0.15,
        coupling_strength=3e-8,
        electric_field_amplitude=2e3,
        spatial_frequency=0.15,
        temporal_frequency=0.08,
    )
    print_config_summary(custom_config)
    MultiferroicOptimizer(custom_config).optimize_for_application()

    print("\n4. Application switching:")
    adaptive = MultiferroicOptimizer(ApplicationType.MEMORY)
    adaptive.optimize_for_application()
    adaptive.adapt_to_new_application(ApplicationType.ENERGY_HARVESTING)
    adaptive.optimize_for_application()

    print("\n5. Sensor with custom tweaks:")

    def double_coupling(config):
        config.coupling_strength *= 2.0
        config.spatial_frequency = 0.5

    tweaked = create_material(ApplicationType.SENSOR, double_coupling)
    print_config_summary(tweaked.config)
    result = run_application_sweep(tweaked, application="sensor (tweaked)", verbose=True)
    final = result.final_state
    print(f"  final P/M/S: {final.polarization:.3E} / {final.magnetization:.3E} / {final.strain:.3E}")

    print("\n" + "=" * 60)
    print("Example completed")
    print("=" * 60)


if __name__ == "__main__":
    main()
