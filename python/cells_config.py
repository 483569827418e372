"""
Constants and palettes for chain generation and layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from attribution import WeightedTable
from cell_types import Color, FillType
from cellgrid import CHAIN_MAX, CHAIN_MIN

PADDING = 15.0
MARGIN = 100.0
CANVAS = (1440, 2560)
PIXELS_PER_CELL = (5, 300)  # [low, high)
DOT_DENSITY = (5.0, 20.0)
DOT_OFFSET = 5.0
MESH_DENSITY = (5.0, 20.0)
TRIANGLE_LEVELS = (2, 7)  # [low, high)
BACKGROUND = Color(0xFD, 0xF9, 0xF5)


def _palette(*entries: tuple[int, float]) -> WeightedTable[Color]:
    return WeightedTable(tuple((Color.from_hex(rgb), weight) for rgb, weight in entries))


PALETTES: dict[str, WeightedTable[Color]] = {
    "default": _palette(
        (0x97BDC2, 0.05),
        (0x45868F, 0.4),
        (0xD7F5E8, 0.15),
        (0xFA7A7A, 0.2),
        (0xC297AC, 0.10),
        (0x000000, 0.10),
    ),
    "pastel": _palette(
        (0x4CBFC7, 0.2),
        (0x829394, 0.2),
        (0x78FABA, 0.2),
        (0xFBB7BF, 0.2),
        (0xC74C98, 0.2),
    ),
    "slate": _palette(
        (0x4CBFC7, 0.05),
        (0x829394, 0.6),
        (0x78FABA, 0.15),
        (0xC74C98, 0.2),
        (0xFFFFFF, 0.00),
    ),
    "sepia": _palette(
        (0x9E7D43, 0.05),
        (0x5C4827, 0.6),
        (0xDBAD5C, 0.15),
        (0xC29951, 0.2),
    ),
}

CUSTOM_PALETTE = "custom"

WEIGHTED_FILL_TYPES: WeightedTable[FillType] = WeightedTable(
    tuple((fill_type, 0.2) for fill_type in FillType)
)


@dataclass(frozen=True)
class CellsConfig:
    """Everything the generator and layout read, bundled for substitution in tests."""

    palette: WeightedTable[Color] = field(default_factory=lambda: PALETTES["default"])
    fill_types: WeightedTable[FillType] = WEIGHTED_FILL_TYPES
    chain_min: int = CHAIN_MIN
    chain_max: int = CHAIN_MAX
    padding: float = PADDING
    margin: float = MARGIN
    canvas: tuple[int, int] = CANVAS
    pixels_per_cell: tuple[int, int] = PIXELS_PER_CELL
    dot_density: tuple[float, float] = DOT_DENSITY
    dot_offset: float = DOT_OFFSET
    mesh_density: tuple[float, float] = MESH_DENSITY
    triangle_levels: tuple[int, int] = TRIANGLE_LEVELS
    background: Color = BACKGROUND

    def with_palette(self, name: str) -> CellsConfig:
        if name not in PALETTES:
            raise ValueError(f"Unknown palette '{name}', expected one of {sorted(PALETTES)}")
        return replace(self, palette=PALETTES[name])

    @property
    def palette_name(self) -> str:
        """Name of the built-in palette matching self.palette, or CUSTOM_PALETTE."""
        for name, table in PALETTES.items():
            if table == self.palette:
                return name
        return CUSTOM_PALETTE
