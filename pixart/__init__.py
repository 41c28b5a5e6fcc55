from .config import PixelArtConfig
from .grid import PixelGrid

__all__ = ["PixelArtConfig", "PixelGrid"]
