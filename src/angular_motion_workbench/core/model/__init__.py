from .entities import (
    MAX_ANGULAR_VELOCITY,
    Attractor,
    Mover,
    Region,
    Vector,
)

__all__ = [
    "MAX_ANGULAR_VELOCITY",
    "Attractor",
    "Mover",
    "Region",
    "Vector",
]
