"""
Weighted color / fill-type assignment for carved chains.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Sequence, TypeVar

from cell_types import Cell, Chain, Color, FillType
from cellgrid import CellGrid, carve_chains

if TYPE_CHECKING:
    from cells_config import CellsConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class WeightedTable(Generic[T]):
    """A discrete distribution over values; weights are relative."""

    entries: tuple[tuple[T, float], ...]

    def __post_init__(self) -> None:
        if not self.entries:
            raise ValueError("WeightedTable needs at least one entry")
        for value, weight in self.entries:
            if weight < 0:
                raise ValueError(f"Negative weight {weight} for {value!r}")
        if self.total <= 0:
            raise ValueError("WeightedTable weights must not all be zero")

    @property
    def total(self) -> float:
        return sum(weight for _, weight in self.entries)

    @property
    def values(self) -> list[T]:
        return [value for value, _ in self.entries]

    def probability(self, value: T) -> float:
        return sum(w for v, w in self.entries if v == value) / self.total

    def choose(self, rng: random.Random) -> T:
        return rng.choices(self.values, weights=[w for _, w in self.entries])[0]


class ChainAttributer:
    """Tags raw cell runs with a color and a fill type."""

    def __init__(
        self,
        colors: WeightedTable[Color],
        fill_types: WeightedTable[FillType],
        rng: random.Random | None = None,
    ) -> None:
        self.colors = colors
        self.fill_types = fill_types
        self.rng = rng if rng is not None else random.Random()

    def attribute(self, cells: Sequence[Cell]) -> Chain:
        if not cells:
            raise ValueError("Cannot attribute an empty chain")
        color = self.colors.choose(self.rng)
        fill_type = self.fill_types.choose(self.rng)
        return Chain(tuple(cells), color, fill_type)


def generate_chains(
    w: int,
    h: int,
    config: CellsConfig,
    rng: random.Random | None = None,
) -> list[Chain]:
    """Carve a fresh w x h grid and attribute every chain from config's tables."""
    rng = rng if rng is not None else random.Random()
    grid = CellGrid(w, h)
    runs = carve_chains(grid, rng, config.chain_min, config.chain_max)
    attributer = ChainAttributer(config.palette, config.fill_types, rng)
    chains = [attributer.attribute(run) for run in runs]
    logger.info("generate_chains: %dx%d grid, %d chains", w, h, len(chains))
    return chains
