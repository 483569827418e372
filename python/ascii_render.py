"""
Terminal previews for carved chain grids.

Provides two rendering approaches:
1. Chalk map - one palette color per chain (cycled by index), plain string output
2. Rich text - each chain drawn with its own attributed color as a background
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Sequence

import simple_chalk as chalk  # type: ignore[import-untyped]
from rich.text import Text

from cell_types import Cell, Chain, Color, Direction, FillType

logger = logging.getLogger(__name__)

FILL_GLYPHS: dict[FillType, str] = {
    FillType.DOTS: "d",
    FillType.TRIANGLES: "t",
    FillType.SOLID: "s",
    FillType.MESH: "m",
    FillType.EMPTY: ".",
}
UNCOVERED = "?"

CHAIN_COLORS: list[Callable[[str], str]] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


def _plain(s: str) -> str:
    return s


def cell_owners(chains: Sequence[Chain]) -> dict[Cell, int]:
    """Map every cell to the index of the chain that holds it."""
    owners: dict[Cell, int] = {}
    for idx, chain in enumerate(chains):
        for cell in chain.cells:
            owners[cell] = idx
    return owners


def cell_glyph(chain: Chain, cell: Cell) -> str:
    """Fill-type glyph; the chain's start cell is upper-cased."""
    glyph = FILL_GLYPHS[chain.fill_type]
    return glyph.upper() if cell == chain.first else glyph


def render_chain_map(
    chains: Sequence[Chain],
    w: int,
    h: int,
    cell_width: int = 2,
    color: bool = True,
) -> str:
    """
    Render the carved grid as a boxed character map, y=0 on the bottom row.

    Args:
        chains: Attributed chains covering the grid
        w: Grid width in cells
        h: Grid height in cells
        cell_width: Characters per cell (default 2)
        color: Colorize chains with the chalk palette

    Returns:
        Rendered string, with ANSI codes when color is True
    """
    owners = cell_owners(chains)
    border = chalk.white if color else _plain
    lines: list[str] = [border("┌" + "─" * (w * cell_width) + "┐")]

    for y in range(h - 1, -1, -1):
        parts = [border("│")]
        for x in range(w):
            idx = owners.get((x, y))
            if idx is None:
                parts.append(UNCOVERED.center(cell_width))
                continue
            content = cell_glyph(chains[idx], (x, y)).center(cell_width)
            colorize = CHAIN_COLORS[idx % len(CHAIN_COLORS)] if color else _plain
            parts.append(colorize(content))
        parts.append(border("│"))
        lines.append("".join(parts))

    lines.append(border("└" + "─" * (w * cell_width) + "┘"))

    uncovered = w * h - sum(1 for (x, y) in owners if 0 <= x < w and 0 <= y < h)
    if uncovered:
        logger.warning("render_chain_map: %d cells not covered by any chain", uncovered)
    return "\n".join(lines)


def _text_style(color: Color) -> str:
    luminance = 0.299 * color.r + 0.587 * color.g + 0.114 * color.b
    fg = "black" if luminance >= 128 else "white"
    return f"{fg} on {color.hex}"


def render_chain_text(chains: Sequence[Chain], w: int, h: int, cell_width: int = 2) -> Text:
    """Rich Text version of the map using each chain's own color."""
    owners = cell_owners(chains)
    text = Text()
    for y in range(h - 1, -1, -1):
        for x in range(w):
            idx = owners.get((x, y))
            if idx is None:
                text.append(UNCOVERED.center(cell_width))
                continue
            chain = chains[idx]
            text.append(cell_glyph(chain, (x, y)).center(cell_width), style=_text_style(chain.color))
        if y > 0:
            text.append("\n")
    return text


def chain_summary(chains: Sequence[Chain]) -> str:
    """Counts per fill type and carve direction, plus a chain-length histogram."""
    total_cells = sum(len(chain) for chain in chains)
    fills = Counter(chain.fill_type for chain in chains)
    lengths = Counter(len(chain) for chain in chains)
    directions = Counter(chain.direction for chain in chains)

    fill_part = "  ".join(f"{ft.value}={fills.get(ft, 0)}" for ft in FillType)
    length_part = "  ".join(f"{n}:{lengths[n]}" for n in sorted(lengths))
    direction_part = "  ".join(f"{d.value}={directions.get(d, 0)}" for d in Direction)
    return "\n".join(
        [
            f"chains: {len(chains)}  cells: {total_cells}",
            f"fill types: {fill_part}",
            f"directions: {direction_part}  single={directions.get(None, 0)}",
            f"lengths: {length_part}" if lengths else "lengths: -",
        ]
    )
