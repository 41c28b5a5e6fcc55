from collections.abc import Iterable
from dataclasses import dataclass
from logging import getLogger
from typing import Final

from .events import Button, Move, Press, Quit, Release
from .grid import PixelGrid

logger = getLogger(__name__)


@dataclass
class InteractionState:
    running: bool = True
    primary_down: bool = False
    secondary_down: bool = False
    dirty: bool = True
    """Grid has changes that are not on screen yet"""


class InputTranslator:
    """Applies pointer events to the grid.

    Left button paints with the brush color, right button paints with the
    background color. Dragging keeps painting while a button is held; if
    both are held the brush wins.
    """

    def __init__(
        self,
        grid: PixelGrid,
        state: InteractionState,
        brush_color: int,
        erase_color: int,
    ):
        self.grid: Final = grid
        self.state: Final = state
        self.brush_color: Final = brush_color
        self.erase_color: Final = erase_color

    def apply(self, events: Iterable[object]):
        for e in events:
            self.handle(e)

    def handle(self, e: object):
        state = self.state
        match e:
            case Quit():
                logger.info("Quit requested")
                state.running = False
            case Press(button=Button.PRIMARY, x=x, y=y):
                state.primary_down = True
                self._paint(x, y, self.brush_color)
            case Press(button=Button.SECONDARY, x=x, y=y):
                state.secondary_down = True
                self._paint(x, y, self.erase_color)
            case Release(button=Button.PRIMARY):
                state.primary_down = False
            case Release(button=Button.SECONDARY):
                state.secondary_down = False
            case Move(x=x, y=y) if state.primary_down or state.secondary_down:
                color = self.brush_color if state.primary_down else self.erase_color
                self._paint(x, y, color)
            case _:
                pass

    def _paint(self, x: int, y: int, color: int):
        self.grid.paint(x, y, color)
        self.state.dirty = True
