"""Application-bound sweep workflow with preset switching."""

from __future__ import annotations

from typing import Union

from ..core.config import MaterialConfig
from ..materials.multiferroic import MultiferroicMaterial
from ..materials.presets import (
    ApplicationTag,
    ApplicationType,
    create_custom_material,
    create_material,
    resolve_application,
)
from ..utils.constants import DEFAULT_POSITION_STEP, DEFAULT_REPORT_EVERY, DEFAULT_SWEEP_STEPS, DEFAULT_TIME_STEP
from .runner import SweepResult, run_application_sweep


class MultiferroicOptimizer:
    """Drive a preset (or custom) material through a position/time sweep.

    Passing a :class:`MaterialConfig` binds a custom material and labels the
    workflow ``custom``; passing a tag binds the matching preset.
    """

    def __init__(self, application: Union[ApplicationTag, MaterialConfig] = ApplicationType.GENERAL):
        if isinstance(application, MaterialConfig):
            self._application = ApplicationType.CUSTOM
            self._material = create_custom_material(application)
        else:
            self._application = _label_for(application)
            self._material = create_material(application)

    @property
    def application(self) -> ApplicationType:
        return self._application

    @property
    def material(self) -> MultiferroicMaterial:
        return self._material

    def optimize_for_application(
        self,
        *,
        steps: int = DEFAULT_SWEEP_STEPS,
        position_step: float = DEFAULT_POSITION_STEP,
        time_step: float = DEFAULT_TIME_STEP,
        report_every: int = DEFAULT_REPORT_EVERY,
        verbose: bool = True,
    ) -> SweepResult:
        if verbose:
            print(f"Optimizing for {self._application.value} application")

        return run_application_sweep(
            self._material,
            steps=steps,
            position_step=position_step,
            time_step=time_step,
            report_every=report_every,
            application=self._application.value,
            verbose=verbose,
        )

    def adapt_to_new_application(self, application: ApplicationTag, *, verbose: bool = True) -> None:
        """Replace the bound material with a fresh preset material for ``application``."""
        self._application = _label_for(application)
        self._material = create_material(application)
        if verbose:
            print(f"Adapted to {self._application.value} application")


def _label_for(tag: ApplicationTag) -> ApplicationType:
    # CUSTOM keeps its label even though it resolves to the general preset.
    if isinstance(tag, str) and tag.strip().lower() == ApplicationType.CUSTOM.value:
        return ApplicationType.CUSTOM
    return resolve_application(tag)
