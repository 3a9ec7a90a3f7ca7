from .base import Scenario, ScenarioUIDefaults
from .builtin import SettingsScenario
from .registry import ScenarioRegistry, scenario_registry


def load_builtin_scenarios() -> None:
    # Import side effects to register built-in scenarios.
    from . import forces_angular_motion  # noqa: F401
    from . import free_drift  # noqa: F401
    from . import crowded_field  # noqa: F401


__all__ = [
    "Scenario",
    "ScenarioUIDefaults",
    "ScenarioRegistry",
    "SettingsScenario",
    "scenario_registry",
    "load_builtin_scenarios",
]
