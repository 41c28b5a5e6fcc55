from logging import getLogger
from typing import Final, Protocol

from .config import PixelArtConfig
from .events import AnyEvent
from .grid import PixelGrid
from .input import InputTranslator, InteractionState
from .render import Display, Renderer

logger = getLogger(__name__)


class Window(Display, Protocol):
    def poll_events(self) -> list[AnyEvent]: ...


class PixelArtApp:
    """The drawing program: a grid, the input state and the render loop.

    Each step first presents the grid if it changed, then applies all
    pending input. Input handled in one step is therefore shown by the
    next one.
    """

    def __init__(self, config: PixelArtConfig, window: Window):
        self.window: Final = window
        self.grid: Final = PixelGrid(config)
        self.state: Final = InteractionState()
        self.translator: Final = InputTranslator(
            self.grid, self.state, config.brush_color, config.background_color
        )
        self.renderer: Final = Renderer(self.grid)

    @property
    def running(self) -> bool:
        return self.state.running

    def step(self) -> bool:
        if self.state.dirty:
            self.renderer.render(self.window)
            self.state.dirty = False

        self.translator.apply(self.window.poll_events())
        return self.state.running

    def run(self):
        logger.info("Entering main loop")
        while self.step():
            pass
        logger.info(f"Main loop done after {self.renderer.frames} frames")
