from __future__ import annotations

from typing import Iterable

import numpy as np

from ..model import Mover


def total_mass(movers: Iterable[Mover]) -> float:
    masses = [mover.mass for mover in movers]
    return float(np.sum(masses))


def kinetic_energy(movers: Iterable[Mover]) -> float:
    movers_list = list(movers)
    if not movers_list:
        return 0.0
    masses = np.array([mover.mass for mover in movers_list], dtype=float)
    velocities = np.stack([mover.velocity for mover in movers_list])
    return float(0.5 * np.sum(masses * np.sum(velocities * velocities, axis=1)))


def max_angular_speed(movers: Iterable[Mover]) -> float:
    speeds = [abs(mover.angular_velocity) for mover in movers]
    if not speeds:
        return 0.0
    return float(np.max(speeds))
