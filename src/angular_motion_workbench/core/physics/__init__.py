from .attraction import MAX_DISTANCE, MIN_DISTANCE, clamp_distance, compute_force
from .diagnostics import kinetic_energy, max_angular_speed, total_mass

__all__ = [
    "MAX_DISTANCE",
    "MIN_DISTANCE",
    "clamp_distance",
    "compute_force",
    "kinetic_energy",
    "max_angular_speed",
    "total_mass",
]
