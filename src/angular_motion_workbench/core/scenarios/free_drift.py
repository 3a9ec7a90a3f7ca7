from __future__ import annotations

from ..settings import SimulationSettings
from .builtin import SettingsScenario
from .registry import scenario_registry

# No pull at all: every mover keeps its initial velocity and never spins.
scenario_registry.register(
    SettingsScenario(
        scenario_id="free_drift",
        name="Free Drift (no attraction)",
        settings=SimulationSettings(gravitational_constant=0.0),
    )
)
