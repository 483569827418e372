"""Tests for canvas mapping and fill composition."""

import random
from dataclasses import replace

import pytest

from attribution import WeightedTable, generate_chains
from cell_types import Chain, Color, FillType, Rect
from cells_config import BACKGROUND, CellsConfig
from layout import (
    Dots,
    FilledRect,
    Outline,
    Polyline,
    chain_rect,
    compose_artwork,
    compose_fill,
    grid_dimensions,
    random_grid_dimensions,
)

INK = Color(0x45, 0x86, 0x8F)
CANVAS = Rect(0.0, 0.0, 1000.0, 1000.0)


def make_chain(fill_type: FillType) -> Chain:
    return Chain(((0, 0), (1, 0)), INK, fill_type)


class TestGridDimensions:
    """Tests for choosing the grid size."""

    def test_integer_division(self) -> None:
        """Columns and rows are whole cells that fit the canvas."""
        assert grid_dimensions(1440, 2560, 100) == (14, 25)
        assert grid_dimensions(1440, 2560, 299) == (4, 8)

    def test_invalid_cell_size(self) -> None:
        """Cell size must be positive."""
        with pytest.raises(ValueError):
            grid_dimensions(100, 100, 0)

    def test_random_dimensions_in_range(self) -> None:
        """Random cell sizes come from the configured range."""
        config = CellsConfig()
        cols, rows = random_grid_dimensions(config, random.Random(0))
        assert 1440 // 299 <= cols <= 1440 // 5
        assert 2560 // 299 <= rows <= 2560 // 5

    def test_random_dimensions_without_rng(self) -> None:
        """Omitting the random source falls back to a fresh one."""
        cols, rows = random_grid_dimensions(CellsConfig(), None)
        assert cols >= 1440 // 299
        assert rows >= 2560 // 299


class TestChainRect:
    """Tests for mapping chains onto the canvas."""

    def test_single_cell(self) -> None:
        """One cell maps to one cell-sized rect inside the margin."""
        rect = chain_rect([(0, 0)], 8, 8, CANVAS, margin=100.0, padding=0.0)
        assert rect == Rect(-350.0, -350.0, 100.0, 100.0)

    def test_vertical_chain(self) -> None:
        """A vertical chain spans its rows."""
        rect = chain_rect([(2, 3), (2, 4), (2, 5)], 8, 8, CANVAS, margin=100.0, padding=0.0)
        assert rect == Rect(-150.0, 50.0, 100.0, 300.0)

    def test_carve_order_does_not_matter(self) -> None:
        """A chain carved downwards maps to the same rect."""
        up = chain_rect([(2, 3), (2, 4), (2, 5)], 8, 8, CANVAS, 100.0, 15.0)
        down = chain_rect([(2, 5), (2, 4), (2, 3)], 8, 8, CANVAS, 100.0, 15.0)
        assert up == down

    def test_padding(self) -> None:
        """Padding shrinks the rect and shifts it up and right."""
        rect = chain_rect([(0, 0)], 8, 8, CANVAS, margin=100.0, padding=10.0)
        assert rect == Rect(-345.0, -345.0, 90.0, 90.0)

    def test_invalid_input(self) -> None:
        """Empty chains and empty grids are rejected."""
        with pytest.raises(ValueError):
            chain_rect([], 8, 8, CANVAS, 100.0, 0.0)
        with pytest.raises(ValueError):
            chain_rect([(0, 0)], 0, 8, CANVAS, 100.0, 0.0)


class TestComposeFill:
    """Tests for turning fill types into primitives."""

    config = replace(
        CellsConfig(),
        dot_density=(10.0, 10.0),
        dot_offset=0.0,
        mesh_density=(10.0, 10.0),
        triangle_levels=(0, 1),
    )
    rect = Rect(0.0, 0.0, 100.0, 100.0)

    def test_empty_is_outline_only(self) -> None:
        """Empty chains are only outlined."""
        prims = compose_fill(make_chain(FillType.EMPTY), self.rect, self.config, random.Random(0))
        assert prims == [Outline(self.rect, INK)]

    def test_solid(self) -> None:
        """Solid chains get a filled rect then the outline."""
        prims = compose_fill(make_chain(FillType.SOLID), self.rect, self.config, random.Random(0))
        assert prims == [FilledRect(self.rect, INK), Outline(self.rect, INK)]

    def test_dots(self) -> None:
        """Unjittered dots land on every lattice point."""
        prims = compose_fill(make_chain(FillType.DOTS), self.rect, self.config, random.Random(0))
        assert isinstance(prims[0], Dots)
        assert len(prims[0].points) == 121
        assert prims[0].radius == 1.0
        assert isinstance(prims[-1], Outline)

    def test_mesh(self) -> None:
        """Mesh chains get one polyline through the shuffled lattice."""
        prims = compose_fill(make_chain(FillType.MESH), self.rect, self.config, random.Random(0))
        assert len(prims) == 2
        assert isinstance(prims[0], Polyline)
        assert len(prims[0].points) == 121

    def test_triangles(self) -> None:
        """Triangle chains get one three-point polyline per subtriangle."""
        prims = compose_fill(make_chain(FillType.TRIANGLES), self.rect, self.config, random.Random(0))
        polylines = [p for p in prims if isinstance(p, Polyline)]
        assert len(polylines) == 8
        assert all(len(p.points) == 3 for p in polylines)
        assert prims[-1] == Outline(self.rect, INK)

    def test_without_rng(self) -> None:
        """Omitting the random source falls back to a fresh one."""
        prims = compose_fill(make_chain(FillType.MESH), self.rect, self.config, None)
        assert len(prims[0].points) == 121
        assert prims[-1] == Outline(self.rect, INK)


class TestComposeArtwork:
    """Tests for composing a whole grid."""

    def test_one_outline_per_chain(self) -> None:
        """Every chain contributes exactly one outline."""
        config = CellsConfig()
        chains = generate_chains(6, 4, config, random.Random(5))
        prims = compose_artwork(chains, 6, 4, config, random.Random(5))
        assert sum(isinstance(p, Outline) for p in prims) == len(chains)

    def test_solid_only_table(self) -> None:
        """A solid-only fill table yields rect + outline pairs."""
        config = replace(CellsConfig(), fill_types=WeightedTable(((FillType.SOLID, 1.0),)))
        chains = generate_chains(5, 5, config, random.Random(1))
        prims = compose_artwork(chains, 5, 5, config, random.Random(1))
        assert len(prims) == 1 + 2 * len(chains)
        assert all(isinstance(p, FilledRect) for p in prims[1::2])
        assert all(isinstance(p, Outline) for p in prims[2::2])

    def test_background_first(self) -> None:
        """The canvas is filled with the background color before any chain."""
        config = CellsConfig()
        chains = generate_chains(3, 3, config, random.Random(0))
        prims = compose_artwork(chains, 3, 3, config, None)
        assert prims[0] == FilledRect(Rect(0.0, 0.0, 1440.0, 2560.0), BACKGROUND)
