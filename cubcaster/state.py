"""Game state: key bindings, held directions, the player and the game."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from cubcaster.framebuffer import Image

PIE = 3.14
DOF = 50
SCREEN_SIZE = 800


class Key(IntEnum):
    """Key symbols the game reacts to."""

    ESC = 65307
    W = 119
    A = 97
    S = 115
    D = 100
    LEFT = 65361
    RIGHT = 65363
    SHIFT = 65505


_KEY_FIELDS = {
    Key.W: "w",
    Key.A: "a",
    Key.S: "s",
    Key.D: "d",
    Key.LEFT: "left",
    Key.RIGHT: "right",
    Key.SHIFT: "shift",
}


def deg2rad(degrees: float) -> float:
    """Convert degrees to radians using the game's value of pi (3.14)."""
    return degrees * (PIE / 180.0)


@dataclass
class Direction:
    """Which movement keys are currently held."""

    w: bool = False
    s: bool = False
    a: bool = False
    d: bool = False
    left: bool = False
    right: bool = False
    shift: bool = False

    def press(self, keycode: int) -> None:
        """Mark a key as held."""
        name = _KEY_FIELDS.get(keycode)
        if name is not None:
            setattr(self, name, True)

    def release(self, keycode: int) -> bool:
        """Mark a key as released; return True when the key asks to quit."""
        if keycode == Key.ESC:
            return True
        name = _KEY_FIELDS.get(keycode)
        if name is not None:
            setattr(self, name, False)
        return False


@dataclass
class Player:
    """Player position in map units, facing angle in degrees and step vector."""

    angle: float = 0.0
    dy: float = 0.0
    dx: float = 0.0
    y: float = 0.0
    x: float = 0.0

    def turn(self, direction: Direction) -> None:
        """Rotate one degree per held turn key, wrapping to [0, 360]."""
        if direction.left:
            self.angle += 1
        if direction.right:
            self.angle -= 1
        if self.angle < 0:
            self.angle = 360
        elif self.angle >= 360:
            self.angle = 0

    def update_step(self, direction: Direction) -> None:
        """Recompute the step vector; shift triples the speed."""
        speed = 3 if direction.shift else 1
        radians = deg2rad(self.angle)
        self.dx = -math.cos(radians) * speed
        self.dy = math.sin(radians) * speed


@dataclass
class Game:
    """Everything a running game needs: map, colours, textures and input."""

    points: list[str]
    floor: int
    ceiling: int
    textures: dict[str, Image] = field(default_factory=dict)
    player: Player = field(default_factory=Player)
    direction: Direction = field(default_factory=Direction)
    minimap: bool = False
    width: int = SCREEN_SIZE
    height: int = SCREEN_SIZE

    @property
    def map_width(self) -> int:
        """Length of the longest map row."""
        return max((len(row) for row in self.points), default=0)

    @property
    def map_height(self) -> int:
        """Number of map rows."""
        return len(self.points)