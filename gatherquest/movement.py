"""Camera-relative player movement."""

from __future__ import annotations

import math
from typing import Optional

from gatherquest.entities import PlayerEntity
from gatherquest.input import MovementInput
from gatherquest.types import Quat, Transform, Vec2, Vec3


def player_movement(
    movement: MovementInput,
    camera_transform: Optional[Transform],
    player: PlayerEntity,
) -> None:
    """Set the player's velocity from input relative to the camera and turn to face it."""
    direction = movement.value
    if direction == Vec2.ZERO:
        player.velocity = Vec3.ZERO
        return
    if camera_transform is None:
        return

    forward = camera_transform.forward().xz().normalize_or_zero()
    right = camera_transform.right().xz().normalize_or_zero()
    move_dir = (right * direction.x + forward * direction.y).normalize_or_zero()
    move_vec = Vec3(move_dir.x, 0.0, move_dir.y) * player.player.speed

    player.velocity = move_vec

    if move_vec.length_squared() > 0.01:
        target = Quat.from_rotation_y(math.atan2(move_vec.x, move_vec.z))
        player.transform.rotation = player.transform.rotation.slerp(target, 0.2)

    player.position = player.transform.translation