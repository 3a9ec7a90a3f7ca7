from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass, field

import numpy as np

from ..errors import ConfigurationError
from ..model import Attractor, Mover, Region
from ..physics import compute_force
from .snapshot import AttractorSnapshot, MoverSnapshot, SimulationSnapshot

MOVER_MASS_RANGE = (0.1, 2.0)
MOVER_SPEED_RANGE = (-1.0, 1.0)

_LOG = logging.getLogger(__name__)


@dataclass
class Simulation:
    attractor: Attractor
    movers: list[Mover]
    region: Region
    tick_count: int = field(default=0)

    def tick(self) -> None:
        # Movers only read the shared attractor, so order does not change the result.
        for mover in self.movers:
            mover.apply_force(compute_force(self.attractor, mover))
            mover.update()
        self.tick_count += 1

    def snapshot(self) -> SimulationSnapshot:
        return SimulationSnapshot(
            tick_count=self.tick_count,
            attractor=AttractorSnapshot.capture(self.attractor),
            movers=tuple(MoverSnapshot.capture(mover) for mover in self.movers),
        )

    def get_mover(self, entity_id: str) -> Mover | None:
        for mover in self.movers:
            if mover.entity_id == entity_id:
                return mover
        return None


def initialize(
    body_count: int,
    region_width: float,
    region_height: float,
    *,
    rng: np.random.Generator | None = None,
    attractor_mass: float = 20.0,
    gravitational_constant: float = 0.4,
) -> Simulation:
    """Build a simulation with ``body_count`` randomly placed movers.

    The attractor sits at the centre of the region. Each mover samples its
    mass, then its position inside the region, then its velocity, all from
    ``rng`` so a seeded generator reproduces the same scene.
    """
    if isinstance(body_count, bool) or not isinstance(body_count, numbers.Integral):
        raise ConfigurationError(f"body_count must be an integer, got {body_count!r}")
    if body_count < 0:
        raise ConfigurationError(f"body_count must not be negative, got {body_count}")
    region = Region(width=float(region_width), height=float(region_height))
    attractor = Attractor(
        mass=float(attractor_mass),
        position=region.center,
        gravitational_constant=float(gravitational_constant),
    )
    if rng is None:
        rng = np.random.default_rng()

    x_min, x_max, y_min, y_max = region.bounds
    movers: list[Mover] = []
    for idx in range(int(body_count)):
        mass = float(rng.uniform(*MOVER_MASS_RANGE))
        position = np.array([rng.uniform(x_min, x_max), rng.uniform(y_min, y_max)], dtype=float)
        velocity = rng.uniform(*MOVER_SPEED_RANGE, size=2)
        movers.append(Mover(entity_id=f"M{idx + 1}", mass=mass, position=position, velocity=velocity))

    _LOG.info(
        "Initialized simulation with %d movers in %.1f x %.1f region",
        len(movers),
        region.width,
        region.height,
    )
    return Simulation(attractor=attractor, movers=movers, region=region)


def tick(simulation: Simulation) -> None:
    simulation.tick()


def snapshot(simulation: Simulation) -> SimulationSnapshot:
    return simulation.snapshot()
