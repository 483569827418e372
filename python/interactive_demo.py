"""
Interactive demo for chain carving.
Display a carved grid and re-carve, resize, or swap palettes with keyboard commands.
"""

import logging
import random
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import chain_summary, render_chain_map, render_chain_text
from attribution import generate_chains
from cell_types import Chain
from cells_config import PALETTES, CellsConfig

MIN_SIZE = 1
MAX_SIZE = 40


class InteractiveDemo:
    """Interactive viewer that re-carves a grid on demand."""

    def __init__(self, w: int, h: int, config: CellsConfig, seed: int | None = None) -> None:
        self.w = w
        self.h = h
        self.config = config
        self.rng = random.Random(seed)
        self.console = Console()
        self.status_message = "Ready"
        self.chains: list[Chain] = []
        self.recarve()

    def recarve(self) -> None:
        """Carve a fresh partition of the current grid."""
        self.chains = generate_chains(self.w, self.h, self.config, self.rng)
        self.status_message = f"Carved {len(self.chains)} chains on {self.w}x{self.h}"

    def resize(self, step: int) -> None:
        """Grow or shrink both grid dimensions by step and re-carve."""
        w = min(MAX_SIZE, max(MIN_SIZE, self.w + step))
        h = min(MAX_SIZE, max(MIN_SIZE, self.h + step))
        if (w, h) == (self.w, self.h):
            self.status_message = f"Grid already at limit ({self.w}x{self.h})"
            return
        self.w, self.h = w, h
        self.recarve()

    def next_palette(self) -> None:
        """Switch to the next named palette and re-carve."""
        names = sorted(PALETTES)
        name = self.config.palette_name
        current = names.index(name) if name in names else -1
        self.config = self.config.with_palette(names[(current + 1) % len(names)])
        self.recarve()
        self.status_message += f" (palette: {self.config.palette_name})"

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        status = Text()
        status.append("Grid: ", style="bold")
        status.append(f"{self.w}x{self.h}  ")
        status.append("Palette: ", style="bold")
        status.append(f"{self.config.palette_name}\n\n")

        status.append(render_chain_text(self.chains, self.w, self.h))
        status.append("\n\n")
        status.append(chain_summary(self.chains))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  R - Re-carve\n")
        status.append("  + - Grow grid\n")
        status.append("  - - Shrink grid\n")
        status.append("  P - Next palette\n")
        status.append("  Q - Quit\n\n")

        # Status line at the bottom
        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Cell Chains", border_style="green", width=max(60, self.w * 2 + 6))

    def run(self) -> None:
        """Run the interactive demo."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == 'r':
                        self.recarve()
                    elif key in ('+', '='):
                        self.resize(1)
                    elif key == '-':
                        self.resize(-1)
                    elif key.lower() == 'p':
                        self.next_palette()
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'sublime':
        # Running from IDE - just render once, no key handling
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

        print('Running from IDE - rendering a single carve')
        print()

        config = CellsConfig()
        chains = generate_chains(16, 12, config, random.Random(0))
        print(render_chain_map(chains, 16, 12))
        print(chain_summary(chains))
    else:
        InteractiveDemo(12, 12, CellsConfig()).run()
