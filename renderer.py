# Field renderer
# Draws every particle as a dot and connects neighbours closer than the max line length

import math

import numpy as np
import pygame


class PygameSurface:
    """
    Drawing surface backed by a pygame.Surface.
    Implements fill_circle(center, radius, color) and draw_line(p0, p1, color, width).
    """
    def __init__(self, surface):
        self.surface = surface

    def fill_circle(self, center, radius, color):
        try:
            x, y = center
            if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(radius)):
                return
            pygame.draw.circle(self.surface, color, (float(x), float(y)), float(radius))
        except (TypeError, ValueError, OverflowError):
            # Particles can drift far outside the window, skip what pygame can't draw
            return

    def draw_line(self, p0, p1, color, width):
        try:
            start = (float(p0[0]), float(p0[1]))
            end = (float(p1[0]), float(p1[1]))
            if not all(math.isfinite(coord) for coord in start + end):
                return

            if width < 1:
                # Sub-pixel widths become an anti-aliased hairline
                pygame.draw.aaline(self.surface, color, start, end)
            else:
                pygame.draw.line(self.surface, color, start, end, int(round(width)))
        except (TypeError, ValueError, OverflowError):
            return


def pairwise_distances(particles):
    """Euclidean distance matrix between all particle positions."""
    positions = np.array([particle.position for particle in particles], dtype=np.float64)
    deltas = positions[:, np.newaxis, :] - positions[np.newaxis, :, :]
    return np.sqrt(np.sum(deltas * deltas, axis=-1))


def render(field, particles, surface):
    """Render particles with the field's colors and sizes onto surface."""
    if not particles:
        return

    if field.max_line_length == 0:
        render_without_lines(field, particles, surface)
    else:
        render_with_lines(field, particles, surface)


def render_with_lines(field, particles, surface):
    """
    Draw each particle and a line to every other particle closer than max_line_length.

    Every qualifying pair is visited as (i, j) and again as (j, i), so each line
    is drawn twice.
    """
    distances = pairwise_distances(particles)
    count = len(particles)

    for i in range(count):
        particle = particles[i]

        for j in range(count):
            if i == j:
                continue

            if distances[i, j] < field.max_line_length:
                surface.draw_line(
                    particle.position,
                    particles[j].position,
                    field.line_color,
                    field.line_width
                )

        surface.fill_circle(particle.position, particle.radius, field.dot_color)


def render_without_lines(field, particles, surface):
    for particle in particles:
        surface.fill_circle(particle.position, particle.radius, field.dot_color)
