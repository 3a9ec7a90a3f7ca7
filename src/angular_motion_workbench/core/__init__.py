from .errors import ConfigurationError
from .model import Attractor, Mover, Region, Vector
from .physics import compute_force, kinetic_energy, max_angular_speed, total_mass
from .settings import SimulationSettings, simulation_from_settings
from .sim import (
    AttractorSnapshot,
    FrameSink,
    MoverSnapshot,
    Simulation,
    SimulationSnapshot,
    initialize,
    run_frames,
    snapshot,
    tick,
)

__all__ = [
    "ConfigurationError",
    "Attractor",
    "Mover",
    "Region",
    "Vector",
    "compute_force",
    "kinetic_energy",
    "max_angular_speed",
    "total_mass",
    "SimulationSettings",
    "simulation_from_settings",
    "AttractorSnapshot",
    "FrameSink",
    "MoverSnapshot",
    "Simulation",
    "SimulationSnapshot",
    "initialize",
    "run_frames",
    "snapshot",
    "tick",
]
