from __future__ import annotations

from ..settings import SimulationSettings
from .builtin import SettingsScenario
from .registry import scenario_registry

scenario_registry.register(
    SettingsScenario(
        scenario_id="crowded_field",
        name="Crowded Field",
        settings=SimulationSettings(body_count=60, region_width=600.0, region_height=600.0),
    )
)
