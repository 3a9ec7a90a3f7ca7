import logging

import numpy as np

from angular_motion_workbench.core.model import Attractor, Mover
from angular_motion_workbench.core.physics import MAX_DISTANCE, MIN_DISTANCE, compute_force


def _mover_at(x: float, y: float = 0.0, mass: float = 1.0) -> Mover:
    return Mover(entity_id="M1", mass=mass, position=np.array([x, y]))


def test_force_matches_inverse_square_inside_clamp() -> None:
    attractor = Attractor(mass=20.0, position=np.zeros(2), gravitational_constant=0.4)
    force = compute_force(attractor, _mover_at(10.0))
    np.testing.assert_allclose(force, np.array([-0.08, 0.0]), atol=1e-12)


def test_force_plateaus_below_min_distance() -> None:
    attractor = Attractor(mass=20.0, position=np.zeros(2), gravitational_constant=0.4)
    at_three = np.linalg.norm(compute_force(attractor, _mover_at(3.0)))
    at_floor = np.linalg.norm(compute_force(attractor, _mover_at(MIN_DISTANCE)))
    at_half = np.linalg.norm(compute_force(attractor, _mover_at(0.5)))
    assert at_three == at_floor
    assert at_half == at_floor
    np.testing.assert_allclose(at_floor, 0.4 * 20.0 / MIN_DISTANCE**2)


def test_force_non_increasing_beyond_max_distance() -> None:
    attractor = Attractor(mass=20.0, position=np.zeros(2), gravitational_constant=0.4)
    distances = np.linspace(MAX_DISTANCE, 400.0, 50)
    magnitudes = [np.linalg.norm(compute_force(attractor, _mover_at(d))) for d in distances]
    assert all(later <= earlier for earlier, later in zip(magnitudes, magnitudes[1:]))
    np.testing.assert_allclose(magnitudes[-1], 0.4 * 20.0 / MAX_DISTANCE**2)


def test_force_points_toward_attractor() -> None:
    attractor = Attractor(mass=15.0, position=np.array([3.0, -2.0]), gravitational_constant=0.7)
    rng = np.random.default_rng(7)
    for _ in range(100):
        position = rng.uniform(-100.0, 100.0, size=2)
        mover = Mover(entity_id="M", mass=float(rng.uniform(0.1, 2.0)), position=position)
        force = compute_force(attractor, mover)
        assert float(np.dot(force, attractor.position - position)) > 0.0


def test_force_scales_with_mover_mass() -> None:
    attractor = Attractor()
    light = compute_force(attractor, _mover_at(12.0, 4.0, mass=0.5))
    heavy = compute_force(attractor, _mover_at(12.0, 4.0, mass=2.0))
    np.testing.assert_allclose(heavy, 4.0 * light)


def test_coincident_positions_give_zero_force(caplog) -> None:
    attractor = Attractor(position=np.array([1.0, 1.0]))
    with caplog.at_level(logging.DEBUG, logger="angular_motion_workbench.core.physics.attraction"):
        force = compute_force(attractor, _mover_at(1.0, 1.0))
    assert any(
        record.levelno == logging.DEBUG and "sits on attractor" in record.getMessage()
        for record in caplog.records
    )
    np.testing.assert_array_equal(force, np.zeros(2))
    assert np.all(np.isfinite(force))


def test_zero_gravitational_constant_gives_zero_force() -> None:
    attractor = Attractor(gravitational_constant=0.0)
    np.testing.assert_array_equal(compute_force(attractor, _mover_at(10.0)), np.zeros(2))
