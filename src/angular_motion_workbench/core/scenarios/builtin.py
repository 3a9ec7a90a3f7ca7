from __future__ import annotations

from ..settings import SimulationSettings, simulation_from_settings
from ..sim import Simulation
from .base import ScenarioUIDefaults


class SettingsScenario:
    """Scenario fully described by a ``SimulationSettings`` value."""

    def __init__(self, scenario_id: str, name: str, settings: SimulationSettings) -> None:
        settings.validate()
        self.scenario_id = scenario_id
        self.name = name
        self._settings = settings

    def settings(self) -> SimulationSettings:
        return self._settings

    def create_simulation(self, seed: int | None = None) -> Simulation:
        settings = self._settings if seed is None else self._settings.replace(seed=seed)
        return simulation_from_settings(settings)

    def ui_defaults(self) -> ScenarioUIDefaults:
        x_min, x_max, y_min, y_max = self._settings.view_range
        margin = 0.05 * max(x_max - x_min, y_max - y_min)
        return ScenarioUIDefaults(view_range=(x_min - margin, x_max + margin, y_min - margin, y_max + margin))
