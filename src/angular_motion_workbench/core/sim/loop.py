from __future__ import annotations

from typing import Protocol

from ..errors import ConfigurationError
from .simulation import Simulation
from .snapshot import SimulationSnapshot


class FrameSink(Protocol):
    def draw(self, snapshot: SimulationSnapshot) -> None:
        ...


def run_frames(simulation: Simulation, sink: FrameSink, frames: int) -> SimulationSnapshot:
    """Tick then draw, once per frame. Returns the last snapshot drawn."""
    if frames < 0:
        raise ConfigurationError(f"frames must not be negative, got {frames}")
    current = simulation.snapshot()
    for _ in range(frames):
        simulation.tick()
        current = simulation.snapshot()
        sink.draw(current)
    return current
