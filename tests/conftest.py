"""Test configuration and fixtures.

Policy:
- tests/unit cover the coupling rule, presets and formatting and always run in CI
- all non-unit tests are marked `slow` automatically
  (full-length preset sweeps, intended for manual runs)
"""

from __future__ import annotations

from pathlib import Path
import pytest

from multiferroic_sim.core import MaterialConfig

# Clamp half-width far outside any trajectory the unit tests drive.
WIDE_BOUND = 1e9


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "slow: full-length sweep test")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        p = Path(str(item.fspath))
        # Sweeps outside tests/unit drive every preset for hundreds of steps.
        if "tests" in p.parts and "unit" not in p.parts:
            item.add_marker(pytest.mark.slow)


@pytest.fixture
def wide_bounds_config() -> MaterialConfig:
    """Unit coupling from state (1, 2, 3) with clamp bounds that never engage."""
    return MaterialConfig(
        initial_polarization=1.0,
        initial_magnetization=2.0,
        initial_strain=3.0,
        coupling_strength=1.0,
        polarization_min=-WIDE_BOUND,
        polarization_max=WIDE_BOUND,
        magnetization_min=-WIDE_BOUND,
        magnetization_max=WIDE_BOUND,
        strain_min=-WIDE_BOUND,
        strain_max=WIDE_BOUND,
    )
