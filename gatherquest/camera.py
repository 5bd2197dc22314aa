"""Third-person camera that orbits and follows the player."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from gatherquest.types import Transform, Vec2, Vec3


class MouseButton(str, Enum):
    """Mouse buttons."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class MainCamera:
    """Orbit parameters of the main camera."""

    distance: float = 5.0
    angle: float = 0.0
    height: float = 2.5

    def follow(
        self, camera_transform: Transform, player_translation: Vec3, delta_seconds: float
    ) -> None:
        """Move the camera toward its orbit position and face the player."""
        sin, cos = math.sin(self.angle), math.cos(self.angle)
        offset = Vec3(self.distance * sin, self.height, self.distance * cos)
        desired = player_translation + offset
        lerp_speed = 8.0 * delta_seconds
        camera_transform.translation = camera_transform.translation.lerp(desired, lerp_speed)
        camera_transform.look_at(player_translation, Vec3.Y)

    def control(
        self,
        buttons_pressed: Iterable[Union[MouseButton, str]],
        motion_deltas: Iterable[Vec2],
        scroll_deltas: Iterable[float],
    ) -> None:
        """Rotate while a mouse button is held, and zoom with the scroll wheel."""
        buttons = {MouseButton(b) for b in buttons_pressed}
        if MouseButton.RIGHT in buttons or MouseButton.LEFT in buttons:
            for delta in motion_deltas:
                self.angle -= delta.x * 0.01
        total_scroll = sum(scroll_deltas, 0.0)
        if total_scroll != 0.0:
            self.distance = _clamp(self.distance - total_scroll * 0.5, 2.0, 10.0)
            self.height = _clamp(self.height - total_scroll * 0.2, 1.0, 5.0)