"""Keyboard input turned into a movement direction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from gatherquest.types import Vec2


class Key(str, Enum):
    """Movement keys."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"


KeyLike = Union[Key, str]


def read_movement(pressed: Iterable[KeyLike]) -> Vec2:
    """Return the normalised WASD direction for the set of pressed keys.

    Keys that are not movement keys are ignored.
    """
    keys = set()
    for key in pressed:
        try:
            keys.add(Key(key))
        except ValueError:
            continue
    if not keys:
        return Vec2.ZERO
    x = 0.0
    y = 0.0
    if Key.W in keys:
        y += 1.0
    if Key.S in keys:
        y -= 1.0
    if Key.A in keys:
        x -= 1.0
    if Key.D in keys:
        x += 1.0
    return Vec2(x, y).normalize_or_zero()


@dataclass
class MovementInput:
    """The current movement direction from input."""

    value: Vec2 = Vec2.ZERO

    def update(self, pressed: Iterable[KeyLike]) -> Vec2:
        self.value = read_movement(pressed)
        return self.value