"""
Example: Energy-density and state trajectories across application presets.

Runs the default sweep for every preset and plots energy density and
normalized strain against sweep position.
"""

import matplotlib.pyplot as plt

from multiferroic_sim.materials import APPLICATION_PRESETS, create_material
from multiferroic_sim.sweep import run_application_sweep


def main():
    """Sweep every preset and save a comparison plot."""
    print("=" * 60)
    print("Example: Energy trajectories per application")
    print("=" * 60)

    results = {}
    for application in APPLICATION_PRESETS:
        material = create_material(application)
        results[application.value] = run_application_sweep(material, application=application.value)
        final = results[application.value].final_state
        print(
            f"  {application.value:>18}: "
            f"E_last={results[application.value].energy[-1]:.3E}, "
            f"S_last={final.strain:.3E}"
        )

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    ax = axes[0]
    for name, result in results.items():
        ax.plot(result.positions, result.energy, label=name)
    ax.set_xlabel('Position x')
    ax.set_ylabel('Energy density')
    ax.set_title('Energy density along sweep')
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    for name, result in results.items():
        material = create_material(name)
        ax.plot(result.positions, result.strain / material.config.strain_max, label=name)
    ax.set_xlabel('Position x')
    ax.set_ylabel('Strain / strain_max')
    ax.set_title('Normalized strain')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig('multiferroic_trajectories.png', dpi=150, bbox_inches='tight')
    print("\n  Plot saved to: multiferroic_trajectories.png")
    plt.close()

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)

    return results


if __name__ == "__main__":
    main()
