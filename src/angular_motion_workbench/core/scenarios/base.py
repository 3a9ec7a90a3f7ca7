from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..settings import SimulationSettings
from ..sim import Simulation


@dataclass(frozen=True)
class ScenarioUIDefaults:
    view_range: tuple[float, float, float, float] | None = None
    frame_interval_ms: int = 16


class Scenario(Protocol):
    scenario_id: str
    name: str

    def settings(self) -> SimulationSettings:
        ...

    def create_simulation(self, seed: int | None = None) -> Simulation:
        ...

    def ui_defaults(self) -> ScenarioUIDefaults | None:
        ...
