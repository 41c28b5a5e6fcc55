"""
pixpy backed window, offscreen surface and texture.

`PixDisplay` owns every window system resource of the program. It is
acquired with `with PixDisplay(config) as display:` and released when the
block exits.
"""

import math
from collections.abc import Callable
from logging import getLogger
from typing import Final, TypeVar

import pixpy as pix

from .config import PixelArtConfig
from .draw import PixelCanvas
from .events import AnyEvent, Button, Move, Press, Quit, Release

logger = getLogger(__name__)

T = TypeVar("T")

# GLFW mouse button index carried by pix.event.Click
CLICK_BUTTONS: Final = {0: Button.PRIMARY, 1: Button.SECONDARY}


class InitError(Exception):
    """A window system resource could not be created."""

    def __init__(self, step: str, detail: str):
        super().__init__(f"Error during {step}: {detail}")
        self.step = step
        self.detail = detail


def check(create: Callable[[], T | None], step: str) -> T:
    try:
        result = create()
    except Exception as e:
        raise InitError(step, str(e) or type(e).__name__) from e
    if result is None:
        raise InitError(step, "no object returned")
    return result


class PixDisplay:
    def __init__(self, config: PixelArtConfig):
        self.config: Final = config
        self.screen: pix.Screen | None = None
        self.surface: PixelCanvas
        self.texture: pix.Image | None = None
        self.left_down: bool = False

    def open(self):
        w, h = self.config.window_width, self.config.window_height
        # pixpy sets up the window system together with the first display
        self.screen = check(
            lambda: pix.open_display(size=(w, h), full_screen=False),
            "Window creation",
        )
        self.surface = check(lambda: PixelCanvas(w, h), "Surface creation")
        logger.info(f"Opened {w}x{h} display '{self.config.title}'")

    def close(self):
        """Drop the texture and screen."""
        self.texture = None
        self.screen = None
        logger.info("Display closed")

    def __enter__(self):
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ):
        self.close()
        return False

    def present(self, surface: PixelCanvas):
        """Upload `surface` as a texture and show it over the whole window."""
        assert self.screen is not None
        screen = self.screen
        self.texture = check(
            lambda: pix.Image(surface.width, surface.pixels()), "Texture creation"
        )
        screen.draw(self.texture, top_left=(0, 0), size=screen.size)
        screen.swap()

    def poll_events(self) -> list[AnyEvent]:
        """Return all input that arrived since the last call. Never blocks."""
        events: list[AnyEvent] = []
        if not pix.run_loop():
            events.append(Quit())

        for e in pix.all_events():
            if isinstance(e, pix.event.Quit):
                events.append(Quit())
            elif isinstance(e, pix.event.Click):
                button = CLICK_BUTTONS.get(e.buttons, Button.OTHER)
                if button == Button.PRIMARY:
                    self.left_down = True
                events.append(Press(button, math.floor(e.pos.x), math.floor(e.pos.y)))
            elif isinstance(e, pix.event.Move):
                # Move.buttons is the left button state when the move happened
                if self.left_down and not e.buttons & 1:
                    self.left_down = False
                    events.append(Release(Button.PRIMARY))
                events.append(Move(math.floor(e.pos.x), math.floor(e.pos.y)))

        # There is no release event; the right button is only known per frame
        if pix.was_released(pix.key.RIGHT_MOUSE):
            events.append(Release(Button.SECONDARY))
        return events
