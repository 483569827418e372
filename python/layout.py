"""
Map carved chains onto a canvas and turn their fill types into drawable primitives.

The primitives here are plain data; whatever draws them (window, plotter,
terminal) lives outside this module.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence, Union

from cell_types import Cell, Chain, Color, FillType, Point, Rect
from cells_config import CellsConfig
from fills import jittered_lattice, shuffled_lattice, subtriangles

logger = logging.getLogger(__name__)


# =============================================================================
# Primitives
# =============================================================================


@dataclass(frozen=True)
class Dots:
    points: tuple[Point, ...]
    color: Color
    radius: float = 1.0


@dataclass(frozen=True)
class Polyline:
    points: tuple[Point, ...]
    color: Color
    weight: float = 1.0


@dataclass(frozen=True)
class FilledRect:
    rect: Rect
    color: Color


@dataclass(frozen=True)
class Outline:
    rect: Rect
    color: Color
    weight: float = 2.0


Primitive = Union[Dots, Polyline, FilledRect, Outline]


# =============================================================================
# Canvas mapping
# =============================================================================


def grid_dimensions(canvas_w: int, canvas_h: int, pixels_per_cell: int) -> tuple[int, int]:
    """Columns and rows that fit on the canvas at the given cell size."""
    if pixels_per_cell <= 0:
        raise ValueError(f"pixels_per_cell must be positive, got {pixels_per_cell}")
    return (canvas_w // pixels_per_cell, canvas_h // pixels_per_cell)


def random_grid_dimensions(
    config: CellsConfig, rng: random.Random | None = None
) -> tuple[int, int]:
    """Grid size for config's canvas with a cell size drawn from config.pixels_per_cell."""
    rng = rng if rng is not None else random.Random()
    pixels_per_cell = rng.randrange(*config.pixels_per_cell)
    cols, rows = grid_dimensions(config.canvas[0], config.canvas[1], pixels_per_cell)
    logger.info("random_grid_dimensions: %dpx cells -> %dx%d", pixels_per_cell, cols, rows)
    return (cols, rows)


def canvas_rect(canvas: tuple[int, int]) -> Rect:
    """Canvas rectangle centered on the origin."""
    return Rect(0.0, 0.0, float(canvas[0]), float(canvas[1]))


def chain_rect(
    cells: Sequence[Cell],
    cols: int,
    rows: int,
    canvas: Rect,
    margin: float,
    padding: float,
) -> Rect:
    """
    Rectangle wrapping a chain's cells on the canvas.

    The grid occupies the canvas minus margin on every side. Each rect is
    shrunk by padding and shifted by the same amount, leaving a gutter
    between neighboring chains.

    Args:
        cells: The chain's cells; only the first and last are read
        cols: Grid width in cells
        rows: Grid height in cells
        canvas: Drawing area
        margin: Space between canvas edge and grid
        padding: Gap between chains

    Returns:
        The chain's rectangle in canvas coordinates
    """
    if not cells:
        raise ValueError("chain_rect needs at least one cell")
    if cols <= 0 or rows <= 0:
        raise ValueError(f"Grid must be non-empty, got {cols}x{rows}")
    (x0, y0), (x1, y1) = cells[0], cells[-1]
    cell_w = (canvas.w - margin * 2) / cols
    cell_h = (canvas.h - margin * 2) / rows

    rect_w = (abs(x1 - x0) + 1) * cell_w - padding
    rect_h = (abs(y1 - y0) + 1) * cell_h - padding
    left = canvas.left + margin + min(x0, x1) * cell_w + padding
    bottom = canvas.bottom + margin + min(y0, y1) * cell_h + padding
    return Rect.from_corners(left, bottom, left + rect_w, bottom + rect_h)


# =============================================================================
# Fill composition
# =============================================================================


def compose_fill(
    chain: Chain, rect: Rect, config: CellsConfig, rng: random.Random | None = None
) -> list[Primitive]:
    """Primitives for one chain's fill type, followed by its outline."""
    rng = rng if rng is not None else random.Random()
    primitives: list[Primitive] = []
    fill_type = chain.fill_type

    if fill_type is FillType.DOTS:
        density = rng.uniform(*config.dot_density)
        points = jittered_lattice(rect, density, config.dot_offset, rng)
        primitives.append(Dots(tuple(points), chain.color))
    elif fill_type is FillType.SOLID:
        primitives.append(FilledRect(rect, chain.color))
    elif fill_type is FillType.MESH:
        density = rng.uniform(*config.mesh_density)
        points = shuffled_lattice(rect, density, rng)
        primitives.append(Polyline(tuple(points), chain.color))
    elif fill_type is FillType.TRIANGLES:
        levels = rng.randrange(*config.triangle_levels)
        primitives.extend(Polyline(tri, chain.color) for tri in subtriangles(rect, levels))
    # FillType.EMPTY: outline only

    primitives.append(Outline(rect, chain.color))
    return primitives


def compose_artwork(
    chains: Sequence[Chain],
    cols: int,
    rows: int,
    config: CellsConfig,
    rng: random.Random | None = None,
) -> list[Primitive]:
    """Background fill, then every chain's primitives in chain order, on config's canvas."""
    rng = rng if rng is not None else random.Random()
    canvas = canvas_rect(config.canvas)
    primitives: list[Primitive] = [FilledRect(canvas, config.background)]
    for chain in chains:
        if not chain.cells:
            continue
        rect = chain_rect(chain.cells, cols, rows, canvas, config.margin, config.padding)
        primitives.extend(compose_fill(chain, rect, config, rng))
    logger.info(
        "compose_artwork: %d chains -> %d primitives on %dx%d canvas",
        len(chains),
        len(primitives),
        config.canvas[0],
        config.canvas[1],
    )
    return primitives
