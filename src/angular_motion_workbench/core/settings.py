from __future__ import annotations

import dataclasses
import numbers
from dataclasses import dataclass

import numpy as np

from .errors import ConfigurationError
from .sim import Simulation, initialize

DEFAULT_BODY_COUNT = 20
DEFAULT_REGION_WIDTH = 800.0
DEFAULT_REGION_HEIGHT = 200.0
DEFAULT_ATTRACTOR_MASS = 20.0
DEFAULT_GRAVITATIONAL_CONSTANT = 0.4


@dataclass(frozen=True)
class SimulationSettings:
    body_count: int = DEFAULT_BODY_COUNT
    region_width: float = DEFAULT_REGION_WIDTH
    region_height: float = DEFAULT_REGION_HEIGHT
    attractor_mass: float = DEFAULT_ATTRACTOR_MASS
    gravitational_constant: float = DEFAULT_GRAVITATIONAL_CONSTANT
    seed: int | None = None

    def validate(self) -> None:
        if isinstance(self.body_count, bool) or not isinstance(self.body_count, numbers.Integral):
            raise ConfigurationError(f"body_count must be an integer, got {self.body_count!r}")
        if self.body_count < 0:
            raise ConfigurationError(f"body_count must not be negative, got {self.body_count}")
        if not np.isfinite(self.region_width) or self.region_width <= 0:
            raise ConfigurationError(f"region_width must be positive and finite, got {self.region_width}")
        if not np.isfinite(self.region_height) or self.region_height <= 0:
            raise ConfigurationError(f"region_height must be positive and finite, got {self.region_height}")
        if not np.isfinite(self.attractor_mass) or self.attractor_mass <= 0:
            raise ConfigurationError(f"attractor_mass must be positive and finite, got {self.attractor_mass}")
        if not np.isfinite(self.gravitational_constant) or self.gravitational_constant < 0:
            raise ConfigurationError(
                f"gravitational_constant must be finite and not negative, got {self.gravitational_constant}"
            )
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, numbers.Integral)):
            raise ConfigurationError(f"seed must be an integer or None, got {self.seed!r}")
        if self.seed is not None and self.seed < 0:
            raise ConfigurationError(f"seed must not be negative, got {self.seed}")

    def replace(self, **changes) -> "SimulationSettings":
        return dataclasses.replace(self, **changes)

    @property
    def view_range(self) -> tuple[float, float, float, float]:
        half_w = 0.5 * self.region_width
        half_h = 0.5 * self.region_height
        return (-half_w, half_w, -half_h, half_h)


def simulation_from_settings(settings: SimulationSettings) -> Simulation:
    settings.validate()
    return initialize(
        settings.body_count,
        settings.region_width,
        settings.region_height,
        rng=np.random.default_rng(settings.seed),
        attractor_mass=settings.attractor_mass,
        gravitational_constant=settings.gravitational_constant,
    )
