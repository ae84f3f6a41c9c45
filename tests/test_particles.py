import random

import numpy as np
import pytest

import config
from particles import Bounds, Particle, edge_repulsion


def make_particle(position=(0.0, 0.0), velocity=(0.0, 0.0), max_speed=10.0):
    return Particle(position, velocity, max_speed, radius=2.0, color=(255, 255, 255))


def test_advance_clamps_speed_to_max():
    particle = make_particle(velocity=(30.0, 40.0), max_speed=10.0)

    for _ in range(5):
        particle.advance(0.01)
        assert particle.speed == pytest.approx(10.0)

    # Direction is kept
    np.testing.assert_allclose(particle.velocity, [6.0, 8.0])


def test_advance_below_max_speed_keeps_velocity():
    particle = make_particle(velocity=(3.0, 4.0), max_speed=10.0)
    particle.advance(0.5)

    np.testing.assert_allclose(particle.velocity, [3.0, 4.0])
    np.testing.assert_allclose(particle.position, [1.5, 2.0])


def test_advance_with_force_doubles_force():
    particle = make_particle(max_speed=1000.0)
    force = np.array([3.0, -2.0])
    particle.advance_with_force(0.1, force)

    np.testing.assert_allclose(particle.velocity, 2 * force * 0.1)
    # The caller's vector is left alone
    np.testing.assert_allclose(force, [3.0, -2.0])


def test_position_update_uses_velocity_after_force():
    particle = make_particle(position=(10.0, 20.0), velocity=(1.0, 1.0), max_speed=1000.0)
    dt = 0.25
    particle.advance_with_force(dt, (4.0, 0.0))

    expected_velocity = np.array([1.0, 1.0]) + 2 * np.array([4.0, 0.0]) * dt
    np.testing.assert_allclose(particle.velocity, expected_velocity)
    np.testing.assert_allclose(particle.position, np.array([10.0, 20.0]) + expected_velocity * dt)


def test_advance_with_force_still_clamps():
    particle = make_particle(max_speed=5.0)
    particle.advance_with_force(1.0, (100.0, 0.0))

    assert particle.speed == pytest.approx(5.0)


def test_edge_repulsion_floor_at_threshold():
    bounds = Bounds(1000.0, 1000.0)
    threshold = 25.0
    # Exactly threshold away from the top edge (y = 0)
    force = edge_repulsion((500.0, 25.0), bounds, threshold)

    assert force[0] == pytest.approx(0.0)
    assert force[1] == pytest.approx(1 / 0.1 - 1 / 950.0)


def test_edge_repulsion_floor_past_threshold():
    bounds = Bounds(1000.0, 1000.0)
    inside = edge_repulsion((10.0, 500.0), bounds, 25.0)
    outside = edge_repulsion((-300.0, 500.0), bounds, 25.0)

    # Both sides of the threshold hit the same floor
    assert inside[0] == pytest.approx(outside[0], rel=1e-2)
    assert np.all(np.isfinite(outside))


def test_edge_repulsion_balanced_at_center():
    force = edge_repulsion((500.0, 300.0), Bounds(1000.0, 600.0), 25.0)
    np.testing.assert_allclose(force, [0.0, 0.0], atol=1e-12)


def test_advance_constrained_pushes_away_from_edge():
    bounds = Bounds(800.0, 600.0)
    particle = make_particle(position=(30.0, 300.0), max_speed=1000.0)
    particle.advance_constrained(0.01, bounds, 25.0, 10.0)

    assert particle.velocity[0] > 0
    assert particle.velocity[1] == pytest.approx(0.0, abs=1e-9)


def test_advance_constrained_matches_manual_force():
    bounds = Bounds(400.0, 300.0)
    threshold, strength, dt = 25.0, 10.0, 0.01
    particle = make_particle(position=(120.0, 80.0), velocity=(2.0, -1.0), max_speed=1000.0)

    force = edge_repulsion(particle.position, bounds, threshold) * strength
    expected_velocity = np.array([2.0, -1.0]) + config.FORCE_FACTOR * force * dt
    expected_position = np.array([120.0, 80.0]) + expected_velocity * dt

    particle.advance_constrained(dt, bounds, threshold, strength)

    np.testing.assert_allclose(particle.velocity, expected_velocity)
    np.testing.assert_allclose(particle.position, expected_position)


def test_initialize_speed_within_range():
    rng = random.Random(7)
    bounds = Bounds(640.0, 480.0)

    for _ in range(500):
        particle = Particle.initialize((1, 2, 3), 2.0, 5.0, 10.0, bounds, rng)
        assert 5.0 - 1e-9 <= particle.speed <= 10.0 + 1e-9
        assert particle.max_speed == 10.0
        assert particle.radius == 2.0
        assert particle.color == (1, 2, 3)


def test_initialize_position_within_bounds():
    rng = random.Random(1234)
    bounds = Bounds(300.0, 200.0)

    for _ in range(10000):
        particle = Particle.initialize(config.DOT_COLOR, 2.0, 5.0, 10.0, bounds, rng)
        x, y = particle.position
        assert 0.0 <= x <= bounds.width
        assert 0.0 <= y <= bounds.height


def test_initialize_is_reproducible_with_seed():
    bounds = Bounds(500.0, 500.0)
    a = Particle.initialize(config.DOT_COLOR, 2.0, 5.0, 10.0, bounds, random.Random(42))
    b = Particle.initialize(config.DOT_COLOR, 2.0, 5.0, 10.0, bounds, random.Random(42))

    np.testing.assert_array_equal(a.position, b.position)
    np.testing.assert_array_equal(a.velocity, b.velocity)


class ZeroRandom(random.Random):
    def random(self):
        return 0.0


def test_initialize_zero_direction_stays_at_rest():
    particle = Particle.initialize(config.DOT_COLOR, 2.0, 5.0, 10.0, Bounds(100.0, 100.0), ZeroRandom())

    np.testing.assert_array_equal(particle.velocity, [0.0, 0.0])
    np.testing.assert_array_equal(particle.position, [0.0, 0.0])
