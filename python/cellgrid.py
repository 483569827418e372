"""
Grid partitioning into directional chains.

A CellGrid tracks which cells are still unclaimed. carve_chains repeatedly
claims a random cell and walks one cardinal direction from it, claiming as
it goes, until every cell belongs to exactly one chain.
"""

from __future__ import annotations

import logging
import random

from cell_types import Cell, Direction

logger = logging.getLogger(__name__)

CHAIN_MIN = 4
CHAIN_MAX = 13


class CellGrid:
    """The unclaimed cells of a w x h integer grid."""

    def __init__(self, w: int, h: int) -> None:
        if w < 0 or h < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {w}x{h}")
        self.w = w
        self.h = h
        # Cells are kept in a list for O(1) random picks; _index maps each
        # unclaimed cell to its slot in that list.
        self._cells: list[Cell] = [(x, y) for x in range(w) for y in range(h)]
        self._index: dict[Cell, int] = {cell: i for i, cell in enumerate(self._cells)}

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"CellGrid({self.w}x{self.h}, unclaimed={len(self._cells)})"

    def remaining(self) -> int:
        return len(self._cells)

    def has_unclaimed(self) -> bool:
        return bool(self._cells)

    def is_claimed(self, cell: Cell) -> bool:
        """True unless the cell is currently unclaimed (out-of-bounds counts as claimed)."""
        return cell not in self._index

    def peek_random(self, rng: random.Random | None = None) -> Cell | None:
        """Return a uniformly random unclaimed cell without removing it."""
        if not self._cells:
            return None
        rng = rng if rng is not None else random.Random()
        return self._cells[rng.randrange(len(self._cells))]

    def claim(self, cell: Cell) -> Cell | None:
        """Remove and return the cell if it is unclaimed, otherwise None."""
        slot = self._index.pop(cell, None)
        if slot is None:
            return None
        last = self._cells.pop()
        if last != cell:
            self._cells[slot] = last
            self._index[last] = slot
        return cell

    def claim_random(self, rng: random.Random | None = None) -> Cell | None:
        """Pick a uniformly random unclaimed cell and claim it in one step."""
        cell = self.peek_random(rng)
        if cell is None:
            return None
        return self.claim(cell)

    def neighbor(self, cell: Cell, direction: Direction) -> Cell | None:
        """The adjacent cell in direction, or None past the grid edge. Ignores occupancy."""
        dx, dy = direction.delta
        x, y = cell[0] + dx, cell[1] + dy
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return None
        return (x, y)


def carve_chain(grid: CellGrid, start: Cell, direction: Direction, cap: int) -> tuple[Cell, ...]:
    """
    Carve a single chain from an already-claimed start cell.

    Extends in direction while the neighbor exists and can be claimed. The
    cap is checked after each growth step, so the chain holds at most cap + 1
    cells.

    Args:
        grid: Grid to claim cells from
        start: First cell of the chain; the caller must have claimed it
        direction: Direction to walk
        cap: Soft length ceiling

    Returns:
        The chain's cells in carve order
    """
    chain = [start]
    current = start
    while True:
        candidate = grid.neighbor(current, direction)
        if candidate is None:
            break
        taken = grid.claim(candidate)
        if taken is None:
            break
        logger.debug("Took cell %s", taken)
        chain.append(taken)
        current = taken
        if len(chain) > cap:
            break
    logger.debug("ending chain %d", len(chain))
    return tuple(chain)


def carve_chains(
    grid: CellGrid,
    rng: random.Random | None = None,
    min_len: int = CHAIN_MIN,
    max_len: int = CHAIN_MAX,
) -> list[tuple[Cell, ...]]:
    """
    Partition every unclaimed cell of grid into directional chains.

    Each pass draws a length cap from [min_len, max_len), a direction, and a
    random start cell, then carves until the edge, an already-claimed cell,
    or the cap stops it. Runs until the grid is exhausted.

    Args:
        grid: Grid to exhaust; mutated in place
        rng: Random source (fresh unseeded one if None)
        min_len: Inclusive lower bound of the length cap
        max_len: Exclusive upper bound of the length cap

    Returns:
        Chains in carve order; together they cover each original cell once
    """
    if min_len < 0 or min_len >= max_len:
        raise ValueError(f"Invalid chain length range [{min_len}, {max_len})")
    rng = rng if rng is not None else random.Random()
    directions = list(Direction)
    chains: list[tuple[Cell, ...]] = []

    total = grid.remaining()
    while grid.has_unclaimed():
        cap = rng.randrange(min_len, max_len)
        direction = rng.choice(directions)
        start = grid.claim_random(rng)
        if start is None:
            continue
        logger.debug("Took cell %s START (%s, cap %d)", start, direction.value, cap)
        chains.append(carve_chain(grid, start, direction, cap))

    logger.info("carve_chains: %d cells -> %d chains", total, len(chains))
    return chains
