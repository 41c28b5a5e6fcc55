from logging import getLogger
from typing import Final, Protocol

from .draw import PixelCanvas
from .grid import PixelGrid

logger = getLogger(__name__)


class Display(Protocol):
    surface: PixelCanvas

    def present(self, surface: PixelCanvas) -> None: ...


def rasterize(grid: PixelGrid, surface: PixelCanvas) -> PixelCanvas:
    """Draw every cell of `grid` as a filled rectangle into `surface`.

    `surface` must be exactly grid size times cell size; it is fully
    overwritten.
    """
    cw, ch = grid.cell_width, grid.cell_height
    for col, row, color in grid.cells():
        surface.filled_rect(col * cw, row * ch, cw, ch, color)
    return surface


class Renderer:
    def __init__(self, grid: PixelGrid):
        self.grid: Final = grid
        self.frames: int = 0

    def render(self, display: Display):
        """Repaint the whole grid and present it on `display`."""
        surface = rasterize(self.grid, display.surface)
        display.present(surface)
        self.frames += 1
        logger.debug(f"Presented frame {self.frames}")
