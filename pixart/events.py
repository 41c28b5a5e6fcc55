"""
Pointer and window events consumed by the input translator.

These are decoupled from pixpy so that the drawing logic can be driven by
anything that produces them; `PixDisplay.poll_events()` converts the pixpy
event stream into this form.
"""

from dataclasses import dataclass
from enum import Enum


class Button(Enum):
    PRIMARY = 1
    SECONDARY = 2
    OTHER = 3


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Press:
    button: Button
    x: int
    y: int


@dataclass(frozen=True)
class Release:
    button: Button


@dataclass(frozen=True)
class Move:
    x: int
    y: int


AnyEvent = Quit | Press | Release | Move
