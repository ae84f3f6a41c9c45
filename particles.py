# Particle physics for the animated background
# Each particle drifts with a capped speed and is pushed away from the edges of its bounds

import random
from typing import NamedTuple

import numpy as np

import config

# Unit vectors pointing away from each edge
UP = np.array([0.0, -1.0])
DOWN = np.array([0.0, 1.0])
LEFT = np.array([-1.0, 0.0])
RIGHT = np.array([1.0, 0.0])


class Bounds(NamedTuple):
    """Viewport size the particles move in."""
    width: float
    height: float


def edge_repulsion(position, bounds, threshold):
    """
    Sum of the four edge repulsion vectors for a particle at position.

    Each edge contributes a unit vector scaled by 1 / max(0.1, distance), where the
    distance is offset by threshold. The floor keeps the force finite when a particle
    reaches or crosses the threshold, it does not keep the particle inside.
    """
    x, y = position
    width, height = bounds
    floor = config.MIN_EDGE_DISTANCE

    up = UP / max(floor, height - (y + threshold))
    down = DOWN / max(floor, y - threshold)
    left = LEFT / max(floor, width - (x + threshold))
    right = RIGHT / max(floor, x - threshold)

    return up + down + left + right


class Particle:
    """
    A dot in the field with position, velocity and a speed cap.
    Color and radius are only used for drawing.
    """
    def __init__(self, position, velocity, max_speed, radius=None, color=None):
        self.position = np.array(position, dtype=np.float64)
        self.velocity = np.array(velocity, dtype=np.float64)
        self.max_speed = max_speed
        self.radius = radius if radius is not None else config.DOT_SIZE
        self.color = color if color is not None else config.DOT_COLOR

    @classmethod
    def initialize(cls, color, radius, min_speed, max_speed, bounds, rng=None):
        """
        Create a particle with a random direction, a speed in [min_speed, max_speed]
        and a random position inside bounds.
        """
        rng = rng if rng is not None else random.Random()

        # Random direction in (-1, 1) x (-1, 1)
        dx = (-1.0 if rng.random() < 0.5 else 1.0) * rng.random()
        dy = (-1.0 if rng.random() < 0.5 else 1.0) * rng.random()
        direction = np.array([dx, dy])

        speed = min_speed + (max_speed - min_speed) * rng.random()
        length = np.linalg.norm(direction)
        if length > 0:
            velocity = direction / length * speed
        else:
            # A zero draw stays at rest instead of normalizing to NaN
            velocity = np.zeros(2)

        particle = cls((0.0, 0.0), velocity, max_speed, radius=radius, color=color)
        particle.place_in(bounds, rng)
        return particle

    def place_in(self, bounds, rng=None):
        """Move the particle to a random position inside bounds."""
        rng = rng if rng is not None else random.Random()
        width, height = bounds
        self.position[0] = rng.random() * width
        self.position[1] = rng.random() * height

    @property
    def speed(self):
        """Current speed magnitude."""
        return float(np.linalg.norm(self.velocity))

    def advance(self, dt):
        """Advance by one time step without any external force."""
        speed = self.speed
        if speed > self.max_speed:
            self.velocity = self.velocity / speed * self.max_speed
        self.position = self.position + self.velocity * dt

    def advance_with_force(self, dt, force):
        """Advance by one time step with force applied to a unit mass."""
        acceleration = np.asarray(force, dtype=np.float64) * config.FORCE_FACTOR
        self.velocity = self.velocity + acceleration * dt
        self.advance(dt)

    def advance_constrained(self, dt, bounds, threshold, strength):
        """Advance by one time step while being pushed away from the edges of bounds."""
        force = edge_repulsion(self.position, bounds, threshold) * strength
        self.advance_with_force(dt, force)

    def __repr__(self):
        x, y = self.position
        vx, vy = self.velocity
        return f"Particle(pos=({x:.1f}, {y:.1f}), vel=({vx:.2f}, {vy:.2f}))"
