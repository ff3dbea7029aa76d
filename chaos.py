import math
import random
from dataclasses import dataclass, field

import numpy as np

import config


@dataclass(frozen=True)
class WorldConfig:
    """
    Fixed parameters of the drawing surface, created once at startup.
    The circle center and radius are derived from the window size and margin.
    """
    width: float = config.WINDOW_WIDTH
    height: float = config.WINDOW_HEIGHT
    margin: float = config.CIRCLE_MARGIN
    thickness: float = config.LINE_THICKNESS
    points_per_flush: int = config.POINTS_PER_FLUSH

    @classmethod
    def from_config(cls, **overrides):
        """Build from config.py values, with keyword overrides for any field."""
        return cls(**overrides)

    @property
    def center(self):
        return self.width / 2, self.height / 2

    @property
    def radius(self):
        return (min(self.width, self.height) - self.margin) / 2


@dataclass(frozen=True)
class Triangle:
    """Inscribed triangle. Top = a, Right = b, Left = c."""
    a: tuple
    b: tuple
    c: tuple

    @property
    def vertices(self):
        return self.a, self.b, self.c

    @property
    def centroid(self):
        return (
            (self.a[0] + self.b[0] + self.c[0]) / 3,
            (self.a[1] + self.b[1] + self.c[1]) / 3,
        )

    # Validation helpers for checking where orbit points land

    def midpoints(self):
        """Corners of the central inverted sub-triangle (edge midpoints), which the fractal never enters."""
        return midpoint(self.a, self.b), midpoint(self.b, self.c), midpoint(self.c, self.a)

    def barycentric(self, point):
        """Barycentric weights of point relative to (a, b, c)."""
        (ax, ay), (bx, by), (cx, cy) = self.vertices
        px, py = point
        det = (by - cy) * (ax - cx) + (cx - bx) * (ay - cy)
        w_a = ((by - cy) * (px - cx) + (cx - bx) * (py - cy)) / det
        w_b = ((cy - ay) * (px - cx) + (ax - cx) * (py - cy)) / det
        return w_a, w_b, 1.0 - w_a - w_b

    def contains(self, point, tolerance=1e-9):
        """True if point lies inside the triangle or within tolerance of its edges."""
        return all(w >= -tolerance for w in self.barycentric(point))


def compute_triangle(center, radius):
    """
    Compute the equilateral triangle inscribed in the circle at center with
    the given radius. One vertex points straight up; the other two sit at
    the same height below the center, mirrored about cx.

    Coordinates are y-up. The renderer flips them for the screen.
    """
    cx, cy = center
    sin_val = math.sin(config.TRIANGLE_ANGLE)
    cos_val = math.cos(config.TRIANGLE_ANGLE)

    a = (cx, cy + radius)
    b = (cx + radius * cos_val, cy - radius * sin_val)
    c = (cx - radius * cos_val, b[1])
    return Triangle(a, b, c)


def circle_parameters(world):
    """Return (center, radius, thickness) for drawing the outer circle."""
    return world.center, world.radius, world.thickness


@dataclass
class OrbitState:
    """
    Current point of the orbit. point is None until the orbit is seeded.
    last_vertex is diagnostic only (0 = top, 1 = right, 2 = left).
    """
    point: tuple | None = None
    last_vertex: int | None = None
    iterations: int = 0

    @property
    def is_seeded(self):
        return self.point is not None


@dataclass
class SimulationState:
    """Everything the render loop needs to advance the chaos game."""
    world: WorldConfig
    triangle: Triangle
    orbit: OrbitState = field(default_factory=OrbitState)


def create_state(world=None):
    """Set up geometry once for the given world and return a fresh, unseeded state."""
    if world is None:
        world = WorldConfig.from_config()
    triangle = compute_triangle(world.center, world.radius)
    return SimulationState(world=world, triangle=triangle)


def make_rng(seed=config.RANDOM_SEED):
    """
    Random source for the orbit. Anything with randrange(stop) and
    uniform(a, b) can be passed in its place.
    """
    return random.Random(seed)


def seed_point(center, rng, jitter=config.SEED_JITTER):
    """
    Pick a starting point within jitter of center on each axis. The point is
    not checked against the triangle, so the first few points may land outside
    the fractal.
    """
    cx, cy = center
    return (cx + rng.uniform(-jitter, jitter), cy + rng.uniform(-jitter, jitter))


def midpoint(point, vertex):
    """Point halfway between point and vertex."""
    px, py = point
    vx, vy = vertex
    return px + (vx - px) / 2, py + (vy - py) / 2


def next_point(triangle, orbit, rng, first_call=False):
    """
    Advance the orbit by one step and return the new current point.

    An unseeded orbit is seeded near the triangle centroid instead, which is
    also the circle and screen center (the seed is returned and no vertex is
    drawn). Once seeded, first_call is ignored and every call jumps
    halfway towards a uniformly chosen vertex.
    """
    if not orbit.is_seeded:
        orbit.point = seed_point(triangle.centroid, rng)
        return orbit.point

    vertex_index = rng.randrange(3)
    orbit.point = midpoint(orbit.point, triangle.vertices[vertex_index])
    orbit.last_vertex = vertex_index
    orbit.iterations += 1
    return orbit.point


def generate_points(state, rng, count):
    """
    Advance the orbit count times and return the visited points as an
    array of shape (count, 2). The seed counts as one point if the orbit
    starts unseeded.
    """
    points = np.empty((count, 2), dtype=np.float64)
    for i in range(count):
        points[i] = next_point(state.triangle, state.orbit, rng)
    return points
