from __future__ import annotations

from ..settings import SimulationSettings
from .builtin import SettingsScenario
from .registry import scenario_registry

scenario_registry.register(
    SettingsScenario(
        scenario_id="forces_angular_motion",
        name="Forces and Angular Motion",
        settings=SimulationSettings(),
    )
)
