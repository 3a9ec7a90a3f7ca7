from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..model import Attractor, Mover, Vector

ATTRACTOR_SIZE_PER_MASS = 2.4
MOVER_SIZE_PER_MASS = 16.0


def _frozen_copy(vec: Vector) -> Vector:
    arr = np.array(vec, dtype=float, copy=True)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class AttractorSnapshot:
    entity_id: str
    position: Vector
    mass: float
    visual_size: float

    @classmethod
    def capture(cls, attractor: Attractor) -> "AttractorSnapshot":
        return cls(
            entity_id=attractor.entity_id,
            position=_frozen_copy(attractor.position),
            mass=float(attractor.mass),
            visual_size=float(attractor.mass) * ATTRACTOR_SIZE_PER_MASS,
        )


@dataclass(frozen=True)
class MoverSnapshot:
    entity_id: str
    position: Vector
    size: float
    angle: float

    @classmethod
    def capture(cls, mover: Mover) -> "MoverSnapshot":
        return cls(
            entity_id=mover.entity_id,
            position=_frozen_copy(mover.position),
            size=float(mover.mass) * MOVER_SIZE_PER_MASS,
            angle=float(mover.angle),
        )

    def corners(self) -> np.ndarray:
        """Corners of the rotated square, counter-clockwise from bottom-left."""
        half = 0.5 * self.size
        local = np.array(
            [[-half, -half], [half, -half], [half, half], [-half, half]],
            dtype=float,
        )
        cos_a = np.cos(self.angle)
        sin_a = np.sin(self.angle)
        rotation = np.array([[cos_a, -sin_a], [sin_a, cos_a]], dtype=float)
        return local @ rotation.T + self.position


@dataclass(frozen=True)
class SimulationSnapshot:
    tick_count: int
    attractor: AttractorSnapshot
    movers: tuple[MoverSnapshot, ...]

    def mover(self, entity_id: str) -> MoverSnapshot | None:
        for mover in self.movers:
            if mover.entity_id == entity_id:
                return mover
        return None
