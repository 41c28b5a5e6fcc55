from collections.abc import Iterator
from logging import getLogger
from typing import Final

from .config import PixelArtConfig
from .draw import PixelCanvas

logger = getLogger(__name__)


class PixelGrid:
    """The drawing: one RGBA color per cell, stored row-major.

    Cells are addressed by pixel position; `paint()` is the only way to
    change a cell.
    """

    def __init__(self, config: PixelArtConfig):
        self.grid_width, self.grid_height = config.grid_size()
        self.cell_width: Final = config.cell_width
        self.cell_height: Final = config.cell_height
        self.canvas: Final = PixelCanvas(
            self.grid_width, self.grid_height, config.background_color
        )
        logger.info(
            f"Grid {self.grid_width}x{self.grid_height}, cell size {self.cell_width}x{self.cell_height}"
        )

    def paint(self, x: int, y: int, color: int):
        # Floor division so that negative pixels map to negative cells
        col = x // self.cell_width
        row = y // self.cell_height
        self.canvas.set_pixel(col, row, color)

    def cell(self, col: int, row: int) -> int:
        return self.canvas.get_pixel(col, row)

    def cells(self) -> Iterator[tuple[int, int, int]]:
        data = self.canvas.array
        i = 0
        for row in range(self.grid_height):
            for col in range(self.grid_width):
                yield col, row, data[i]
                i += 1
