from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from ..errors import ConfigurationError

Vector = np.ndarray

MAX_ANGULAR_VELOCITY = 0.1
ANGULAR_ACCELERATION_DIVISOR = 10.0


def _to_vector(values: Iterable[float], *, length: int = 2) -> Vector:
    arr = np.asarray(list(values), dtype=float)
    if arr.ndim != 1:
        raise ValueError("Vector must be 1D")
    if arr.size != length:
        raise ValueError(f"Vector must have length {length}")
    return arr


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle centred on the origin, y pointing up."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if not (np.isfinite(self.width) and np.isfinite(self.height)) or self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Region dimensions must be positive and finite, got {self.width} x {self.height}"
            )

    @property
    def center(self) -> Vector:
        return np.zeros(2, dtype=float)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        half_w = 0.5 * self.width
        half_h = 0.5 * self.height
        return (-half_w, half_w, -half_h, half_h)

    def contains(self, point: Iterable[float]) -> bool:
        x, y = _to_vector(point)
        x_min, x_max, y_min, y_max = self.bounds
        return x_min <= x <= x_max and y_min <= y <= y_max


@dataclass(frozen=True)
class Attractor:
    mass: float = 20.0
    position: Vector = field(default_factory=lambda: np.zeros(2, dtype=float))
    gravitational_constant: float = 0.4
    entity_id: str = "A"

    def __post_init__(self) -> None:
        if not np.isfinite(self.mass) or self.mass <= 0:
            raise ConfigurationError(f"Attractor mass must be positive and finite, got {self.mass}")
        if not np.isfinite(self.gravitational_constant) or self.gravitational_constant < 0:
            raise ConfigurationError(
                f"Gravitational constant must be finite and not negative, got {self.gravitational_constant}"
            )
        position = _to_vector(self.position)
        position.setflags(write=False)
        object.__setattr__(self, "position", position)


@dataclass
class Mover:
    entity_id: str
    mass: float
    position: Vector = field(default_factory=lambda: np.zeros(2, dtype=float))
    velocity: Vector = field(default_factory=lambda: np.zeros(2, dtype=float))
    acceleration: Vector = field(default_factory=lambda: np.zeros(2, dtype=float))
    angle: float = 0.0
    angular_velocity: float = 0.0
    angular_acceleration: float = 0.0

    def __post_init__(self) -> None:
        if not np.isfinite(self.mass) or self.mass <= 0:
            raise ConfigurationError(f"Mover mass must be positive and finite, got {self.mass}")
        self.position = _to_vector(self.position)
        self.velocity = _to_vector(self.velocity)
        self.acceleration = _to_vector(self.acceleration)

    def apply_force(self, force: Iterable[float]) -> None:
        self.acceleration = self.acceleration + _to_vector(force) / self.mass

    def update(self) -> None:
        """Advance one frame (dt = 1).

        Angular acceleration is read from this frame's linear acceleration,
        so it must be computed before the acceleration is cleared.
        """
        self.velocity = self.velocity + self.acceleration
        self.position = self.position + self.velocity

        self.angular_acceleration = float(self.acceleration[0]) / ANGULAR_ACCELERATION_DIVISOR
        self.angular_velocity = float(
            np.clip(
                self.angular_velocity + self.angular_acceleration,
                -MAX_ANGULAR_VELOCITY,
                MAX_ANGULAR_VELOCITY,
            )
        )
        self.angle += self.angular_velocity

        self.acceleration = np.zeros(2, dtype=float)

    @property
    def speed(self) -> float:
        return float(np.linalg.norm(self.velocity))
