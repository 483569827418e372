"""
Demonstration script for chain carving and fill composition.

Usage:
  python demo.py [cols rows [seed]]
"""

import logging
import random
import sys
from collections import Counter

from ascii_render import chain_summary, render_chain_map
from attribution import generate_chains
from cell_types import Rect
from cells_config import CellsConfig
from fills import lattice, subtriangles
from layout import compose_artwork, random_grid_dimensions

USAGE = "usage: python demo.py [cols rows [seed]]"
DEFAULT_COLS = 24
DEFAULT_ROWS = 16


def parse_args(args: list[str]) -> tuple[int, int, int | None]:
    """Read [cols rows [seed]]; any other argument count is a usage error."""
    if len(args) not in (0, 2, 3):
        raise SystemExit(USAGE)
    if not args:
        return (DEFAULT_COLS, DEFAULT_ROWS, None)
    cols, rows = int(args[0]), int(args[1])
    seed = int(args[2]) if len(args) == 3 else None
    return (cols, rows, seed)


def carve_demo(cols: int, rows: int, seed: int | None) -> None:
    """Carve a small grid and print it with a summary."""
    config = CellsConfig()
    rng = random.Random(seed)
    chains = generate_chains(cols, rows, config, rng)

    print("=" * 40)
    print(f"Carved {cols}x{rows} grid (seed={seed}):")
    print("=" * 40)
    print(render_chain_map(chains, cols, rows))
    print(chain_summary(chains))
    print()


def fill_demo() -> None:
    """Show the raw fill geometry for a small rectangle."""
    rect = Rect(0.0, 0.0, 10.0, 10.0)

    print("=" * 40)
    print("Lattice of a 10x10 rect at density 10:")
    print("=" * 40)
    for point in lattice(rect, 10):
        print(f"  {point}")
    print()

    print("=" * 40)
    print("Subtriangles of a 10x10 rect:")
    print("=" * 40)
    for levels in range(3):
        print(f"  levels={levels}: {len(subtriangles(rect, levels))} triangles")
    print()


def artwork_demo(seed: int | None) -> None:
    """Compose a full canvas and report the primitive mix."""
    config = CellsConfig()
    rng = random.Random(seed)
    cols, rows = random_grid_dimensions(config, rng)
    chains = generate_chains(cols, rows, config, rng)
    primitives = compose_artwork(chains, cols, rows, config, rng)

    print("=" * 40)
    print(f"Artwork on {config.canvas[0]}x{config.canvas[1]} canvas ({cols}x{rows} cells):")
    print("=" * 40)
    counts = Counter(type(p).__name__ for p in primitives)
    for name in sorted(counts):
        print(f"  {name}: {counts[name]}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    cols, rows, seed = parse_args(sys.argv[1:])

    carve_demo(cols, rows, seed)
    fill_demo()
    artwork_demo(seed)
