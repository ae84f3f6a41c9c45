# Particle field
# Owns the particles and the shared configuration, advanced once per tick by the host

import math
import random

import config
import renderer
from particles import Bounds, Particle


def particle_count(width, height, density):
    """Number of particles for a viewport: round(0.00001 * area) * density."""
    area_units = config.DENSITY_AREA_FACTOR * width * height
    # Round half away from zero, area is never negative here
    return int(math.floor(area_units + 0.5)) * density


class ParticleField:
    """
    A field of particles bouncing softly away from the edges of the viewport.

    The host calls step() once per frame and then render() with its drawing surface.
    Particles are created once for the initial viewport, resizing only moves the edges.
    """
    def __init__(self, width, height, density=None, min_speed=None, max_speed=None,
                 dot_size=None, dot_color=None, line_color=None, threshold=None,
                 side_strength=None, max_line_length=None, line_width=None,
                 time_step=None, rng=None):
        self.density = density if density is not None else config.DENSITY
        self.min_speed = min_speed if min_speed is not None else config.MIN_SPEED
        self.max_speed = max_speed if max_speed is not None else config.MAX_SPEED
        self.dot_size = dot_size if dot_size is not None else config.DOT_SIZE
        self.dot_color = dot_color if dot_color is not None else config.DOT_COLOR
        self.line_color = line_color if line_color is not None else config.LINE_COLOR
        self.threshold = threshold if threshold is not None else config.THRESHOLD
        self.side_strength = side_strength if side_strength is not None else config.SIDE_STRENGTH
        self.max_line_length = max_line_length if max_line_length is not None else config.MAX_LINE_LENGTH
        self.line_width = line_width if line_width is not None else config.LINE_WIDTH
        self.time_step = time_step if time_step is not None else config.TIME_STEP

        # Injectable random source so runs can be replayed
        self.rng = rng if rng is not None else random.Random()

        self._validate_settings()
        self.bounds = self._make_bounds(width, height)

        self.particles = []
        self.populate()

    def _validate_settings(self):
        if self.min_speed < 0 or self.max_speed < 0:
            raise ValueError(f"Speeds must not be negative (min={self.min_speed}, max={self.max_speed})")
        if self.min_speed > self.max_speed:
            raise ValueError(f"min_speed ({self.min_speed}) is larger than max_speed ({self.max_speed})")
        self.density = self._check_density(self.density)
        if self.max_line_length < 0:
            raise ValueError(f"max_line_length must not be negative, got {self.max_line_length}")

    @staticmethod
    def _check_density(density):
        if density < 0 or density != int(density):
            raise ValueError(f"Density must be a whole number of at least 0, got {density}")
        return int(density)

    @staticmethod
    def _make_bounds(width, height):
        if not (width > 0 and height > 0):
            raise ValueError(f"Viewport must have a positive size, got {width}x{height}")
        return Bounds(float(width), float(height))

    def populate(self, bounds=None, density=None):
        """Replace the particles with a fresh random set sized for bounds."""
        bounds = self._make_bounds(*bounds) if bounds is not None else self.bounds
        density = self._check_density(density) if density is not None else self.density

        count = particle_count(bounds.width, bounds.height, density)
        self.particles = [
            Particle.initialize(
                color=self.dot_color,
                radius=self.dot_size,
                min_speed=self.min_speed,
                max_speed=self.max_speed,
                bounds=bounds,
                rng=self.rng
            )
            for _ in range(count)
        ]
        return self.particles

    def resize(self, width, height):
        """Update the viewport used by the edge repulsion. Does not re-seed particles."""
        self.bounds = self._make_bounds(width, height)

    def step(self, dt=None):
        """Advance every particle by one tick."""
        dt = dt if dt is not None else self.time_step
        for particle in self.particles:
            particle.advance_constrained(dt, self.bounds, self.threshold, self.side_strength)

    def render(self, surface):
        """Issue the drawing commands for the current frame."""
        renderer.render(self, self.particles, surface)

    def __len__(self):
        return len(self.particles)
