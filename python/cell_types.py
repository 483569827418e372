"""
Shared type definitions for the cell-chain system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Cell = tuple[int, int]
Point = tuple[float, float]
Triangle = tuple[Point, Point, Point]


class Direction(Enum):
    """Cardinal direction a chain is carved in."""

    UP = "up"  # Increasing y
    DOWN = "down"  # Decreasing y
    LEFT = "left"  # Decreasing x
    RIGHT = "right"  # Increasing x

    @property
    def delta(self) -> Cell:
        return _DELTAS[self]


_DELTAS: dict[Direction, Cell] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class FillType(Enum):
    """How a chain's rectangle gets filled. Interpreted by the layout layer."""

    DOTS = "dots"
    TRIANGLES = "triangles"
    SOLID = "solid"
    MESH = "mesh"
    EMPTY = "empty"


@dataclass(frozen=True)
class Color:
    """An 8-bit sRGB color."""

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: int) -> Color:
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


# =============================================================================
# Geometry
# =============================================================================


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle stored as center + size.

    Width and height are kept as given; a negative size flips the edges,
    and containment checks use the absolute extents.
    """

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_corners(cls, left: float, bottom: float, right: float, top: float) -> Rect:
        return cls((left + right) / 2, (bottom + top) / 2, right - left, top - bottom)

    @property
    def left(self) -> float:
        return self.x - self.w / 2

    @property
    def right(self) -> float:
        return self.x + self.w / 2

    @property
    def bottom(self) -> float:
        return self.y - self.h / 2

    @property
    def top(self) -> float:
        return self.y + self.h / 2

    def contains(self, point: Point) -> bool:
        px, py = point
        x0, x1 = sorted((self.left, self.right))
        y0, y1 = sorted((self.bottom, self.top))
        return x0 <= px <= x1 and y0 <= py <= y1

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Return (bottom-left, bottom-right, top-right, top-left)."""
        return (
            (self.left, self.bottom),
            (self.right, self.bottom),
            (self.right, self.top),
            (self.left, self.top),
        )

    def subdivisions(self) -> tuple[Rect, Rect, Rect, Rect]:
        """Split into four equal quarters: bottom-left, bottom-right, top-left, top-right."""
        qw, qh = self.w / 4, self.h / 4
        hw, hh = self.w / 2, self.h / 2
        return (
            Rect(self.x - qw, self.y - qh, hw, hh),
            Rect(self.x + qw, self.y - qh, hw, hh),
            Rect(self.x - qw, self.y + qh, hw, hh),
            Rect(self.x + qw, self.y + qh, hw, hh),
        )

    def triangles(self) -> tuple[Triangle, Triangle]:
        """Split along the bottom-left to top-right diagonal."""
        bl, br, tr, tl = self.corners()
        return ((bl, br, tr), (bl, tr, tl))


# =============================================================================
# Chains
# =============================================================================


@dataclass(frozen=True)
class Chain:
    """A carved run of cells tagged with a color and fill type."""

    cells: tuple[Cell, ...]
    color: Color
    fill_type: FillType

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def first(self) -> Cell:
        return self.cells[0]

    @property
    def direction(self) -> Direction | None:
        """Carve direction, or None for a single-cell chain."""
        if len(self.cells) < 2:
            return None
        (x0, y0), (x1, y1) = self.cells[0], self.cells[1]
        delta = (x1 - x0, y1 - y0)
        for direction in Direction:
            if direction.delta == delta:
                return direction
        return None
