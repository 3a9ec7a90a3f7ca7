from .loop import FrameSink, run_frames
from .simulation import Simulation, initialize, snapshot, tick
from .snapshot import AttractorSnapshot, MoverSnapshot, SimulationSnapshot

__all__ = [
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
