import numpy as np
import pytest

from angular_motion_workbench.core.errors import ConfigurationError
from angular_motion_workbench.core.model import MAX_ANGULAR_VELOCITY, Attractor, Mover, Region
from angular_motion_workbench.core.physics import compute_force


def test_single_step_scenario() -> None:
    attractor = Attractor(mass=20.0, position=np.zeros(2), gravitational_constant=0.4)
    mover = Mover(entity_id="M1", mass=1.0, position=np.array([10.0, 0.0]), velocity=np.zeros(2))

    mover.apply_force(compute_force(attractor, mover))
    np.testing.assert_allclose(mover.acceleration, np.array([-0.08, 0.0]))

    mover.update()
    np.testing.assert_allclose(mover.velocity, np.array([-0.08, 0.0]))
    np.testing.assert_allclose(mover.position, np.array([9.92, 0.0]))
    assert mover.angular_acceleration == pytest.approx(-0.008)
    assert mover.angular_velocity == pytest.approx(-0.008)
    assert mover.angle == pytest.approx(-0.008)
    np.testing.assert_array_equal(mover.acceleration, np.zeros(2))


def test_apply_force_accumulates_and_divides_by_mass() -> None:
    mover = Mover(entity_id="M1", mass=2.0)
    mover.apply_force(np.array([1.0, 0.0]))
    mover.apply_force(np.array([0.0, -4.0]))
    np.testing.assert_allclose(mover.acceleration, np.array([0.5, -2.0]))


def test_angular_acceleration_is_recomputed_each_update() -> None:
    mover = Mover(entity_id="M1", mass=1.0)
    mover.apply_force(np.array([0.5, 0.0]))
    mover.update()
    assert mover.angular_acceleration == pytest.approx(0.05)
    mover.update()
    assert mover.angular_acceleration == 0.0
    assert mover.angular_velocity == pytest.approx(0.05)
    assert mover.angle == pytest.approx(0.1)


def test_angular_acceleration_ignores_vertical_force() -> None:
    mover = Mover(entity_id="M1", mass=1.0)
    mover.apply_force(np.array([0.0, 50.0]))
    mover.update()
    assert mover.angular_velocity == 0.0
    assert mover.angle == 0.0


def test_angular_velocity_is_clamped() -> None:
    mover = Mover(entity_id="M1", mass=0.1)
    for step in range(200):
        sign = 1.0 if (step // 20) % 2 == 0 else -1.0
        mover.apply_force(np.array([sign * 1e6, 3.0]))
        mover.update()
        assert -MAX_ANGULAR_VELOCITY <= mover.angular_velocity <= MAX_ANGULAR_VELOCITY
    mover.apply_force(np.array([1e9, 0.0]))
    mover.update()
    assert mover.angular_velocity == MAX_ANGULAR_VELOCITY


def test_mover_requires_positive_mass() -> None:
    with pytest.raises(ConfigurationError):
        Mover(entity_id="M1", mass=0.0)
    with pytest.raises(ConfigurationError):
        Mover(entity_id="M1", mass=float("nan"))
    with pytest.raises(ConfigurationError):
        Mover(entity_id="M1", mass=float("inf"))
    with pytest.raises(ValueError):
        Mover(entity_id="M1", mass=-1.0)


def test_mover_rejects_non_planar_vectors() -> None:
    with pytest.raises(ValueError):
        Mover(entity_id="M1", mass=1.0, position=np.zeros(3))


def test_attractor_is_immutable() -> None:
    attractor = Attractor()
    with pytest.raises(AttributeError):
        attractor.mass = 5.0  # type: ignore[misc]
    with pytest.raises(ValueError):
        attractor.position[0] = 1.0


def test_attractor_validates_parameters() -> None:
    with pytest.raises(ConfigurationError):
        Attractor(mass=0.0)
    with pytest.raises(ConfigurationError):
        Attractor(mass=float("nan"))
    with pytest.raises(ConfigurationError):
        Attractor(gravitational_constant=float("inf"))
    with pytest.raises(ConfigurationError):
        Attractor(gravitational_constant=-0.1)


def test_region_rejects_non_finite_dimensions() -> None:
    with pytest.raises(ConfigurationError):
        Region(width=float("nan"), height=200.0)
    with pytest.raises(ConfigurationError):
        Region(width=800.0, height=float("inf"))


def test_speed_is_velocity_magnitude() -> None:
    mover = Mover(entity_id="M1", mass=1.0, velocity=np.array([3.0, -4.0]))
    assert mover.speed == pytest.approx(5.0)
