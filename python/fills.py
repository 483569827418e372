"""
Fill geometry for chain rectangles: point lattices and subdivided triangles.

All functions are pure apart from the random draws, which come from the
rng argument so callers can seed them.
"""

from __future__ import annotations

import logging
import math
import random

from cell_types import Point, Rect, Triangle

logger = logging.getLogger(__name__)

LATTICE_SPAN = 100.0


class InvalidParameterError(ValueError):
    """A density or subdivision level that cannot produce geometry."""


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def lattice(rect: Rect, density: float) -> list[Point]:
    """
    Regular grid of points spaced 100 / density apart, anchored at the bottom-left.

    Points are emitted x-major: every y for the first column, then the next
    column, and so on. A 10x10 rect at density 10 yields its four corners.

    Raises:
        InvalidParameterError: If density is not positive
    """
    if density <= 0:
        raise InvalidParameterError(f"density must be positive, got {density}")
    interval = LATTICE_SPAN / density
    x_count = _round_half_away(rect.w / interval)
    y_count = _round_half_away(rect.h / interval)
    left, bottom = rect.left, rect.bottom
    return [
        (left + i * interval, bottom + j * interval)
        for i in range(x_count + 1)
        for j in range(y_count + 1)
    ]


def jitter(point: Point, scale: float, rng: random.Random | None = None) -> Point:
    """Offset each coordinate by an independent U(-1, 1) * scale. No clamping."""
    rng = rng if rng is not None else random.Random()
    x, y = point
    return (x + rng.uniform(-1.0, 1.0) * scale, y + rng.uniform(-1.0, 1.0) * scale)


def jittered_lattice(
    rect: Rect, density: float, scale: float, rng: random.Random | None = None
) -> list[Point]:
    """Lattice points jittered by scale; points pushed outside rect are dropped."""
    rng = rng if rng is not None else random.Random()
    jittered = (jitter(p, scale, rng) for p in lattice(rect, density))
    return [p for p in jittered if rect.contains(p)]


def shuffled_lattice(rect: Rect, density: float, rng: random.Random | None = None) -> list[Point]:
    """Same points as lattice(), in a uniformly random order."""
    rng = rng if rng is not None else random.Random()
    points = lattice(rect, density)
    rng.shuffle(points)
    return points


def subtriangles(rect: Rect, levels: int) -> list[Triangle]:
    """
    Quad-subdivide rect levels + 1 times and split every leaf into two triangles.

    Yields 2 * 4 ** (levels + 1) triangles, so levels=0 gives 8 and levels=1
    gives 32.

    Raises:
        InvalidParameterError: If levels is negative
    """
    if levels < 0:
        raise InvalidParameterError(f"levels must be >= 0, got {levels}")
    leaves: list[Rect] = list(rect.subdivisions())
    for _ in range(levels):
        leaves = [sub for leaf in leaves for sub in leaf.subdivisions()]
    triangles = [tri for leaf in leaves for tri in leaf.triangles()]
    logger.debug("subtriangles: levels=%d -> %d triangles", levels, len(triangles))
    return triangles
