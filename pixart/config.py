from dataclasses import dataclass
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class HexInt(int):
    def __repr__(self) -> str:  # used in help default printing
        return f"{int(self):08x}"

    __str__ = __repr__


@dataclass
class PixelArtConfig:
    title: str = "PixelArtGenerator"
    """Window title"""

    window_width: int = 800
    window_height: int = 600

    cell_width: int = 20
    """Width of one grid cell in pixels, must divide window_width"""
    cell_height: int = 20
    """Height of one grid cell in pixels, must divide window_height"""

    brush_color: int = HexInt(0x33CCBBFF)
    """RGBA color painted with the left mouse button"""
    background_color: int = HexInt(0xCCCCCCFF)
    """RGBA color of the empty canvas, painted with the right mouse button"""

    log_level: LogLevel = "INFO"

    def grid_size(self) -> tuple[int, int]:
        """Number of cells horizontally and vertically."""
        assert self.cell_width > 0 and self.cell_height > 0
        assert self.window_width % self.cell_width == 0
        assert self.window_height % self.cell_height == 0
        return (
            self.window_width // self.cell_width,
            self.window_height // self.cell_height,
        )
