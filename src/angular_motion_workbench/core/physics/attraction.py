from __future__ import annotations

import logging

import numpy as np

from ..model import Attractor, Mover, Vector

MIN_DISTANCE = 5.0
MAX_DISTANCE = 25.0

_LOG = logging.getLogger(__name__)


def clamp_distance(distance: float) -> float:
    return float(min(max(distance, MIN_DISTANCE), MAX_DISTANCE))


def compute_force(attractor: Attractor, mover: Mover) -> Vector:
    """Force pulling ``mover`` toward ``attractor``.

    The distance is clamped to ``[MIN_DISTANCE, MAX_DISTANCE]`` before the
    inverse-square falloff, so the pull plateaus both very close and far away.
    Coincident positions have no direction and yield a zero force.
    """
    direction = attractor.position - mover.position
    distance = float(np.linalg.norm(direction))
    if distance == 0.0:
        _LOG.debug("Mover %s sits on attractor %s; no force applied", mover.entity_id, attractor.entity_id)
        return np.zeros(2, dtype=float)
    clamped = clamp_distance(distance)
    strength = (attractor.gravitational_constant * attractor.mass * mover.mass) / (clamped * clamped)
    return direction / distance * strength
