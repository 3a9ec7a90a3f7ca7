from .diagnostics_panel import DiagnosticsPanel
from .inspector import InspectorPanel
from .scene_view import SceneView
from .simulation_panel import SimulationPanel

__all__ = [
    "DiagnosticsPanel",
    "InspectorPanel",
    "SceneView",
    "SimulationPanel",
]
