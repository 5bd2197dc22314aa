import math

import pytest

from gatherquest.entities import PlayerEntity
from gatherquest.input import MovementInput
from gatherquest.movement import player_movement
from gatherquest.types import Quat, Transform, Vec2, Vec3


def test_zero_input_stops_player():
    player = PlayerEntity(velocity=Vec3(1.0, 0.0, 1.0))
    player_movement(MovementInput(Vec2.ZERO), Transform(), player)
    assert player.velocity == Vec3.ZERO
    assert player.position == Vec3.ZERO


def test_no_camera_leaves_velocity():
    player = PlayerEntity(velocity=Vec3(1.0, 0.0, 0.0))
    player_movement(MovementInput(Vec2(0.0, 1.0)), None, player)
    assert player.velocity == Vec3(1.0, 0.0, 0.0)


def test_forward_with_identity_camera():
    player = PlayerEntity()
    player_movement(MovementInput(Vec2(0.0, 1.0)), Transform(), player)
    assert player.velocity.x == pytest.approx(0.0)
    assert player.velocity.z == pytest.approx(-player.player.speed)
    assert player.position == player.transform.translation


def test_right_with_identity_camera():
    player = PlayerEntity()
    player_movement(MovementInput(Vec2(1.0, 0.0)), Transform(), player)
    assert player.velocity.x == pytest.approx(player.player.speed)
    assert player.velocity.z == pytest.approx(0.0)


def test_velocity_magnitude_is_speed_for_diagonal():
    player = PlayerEntity()
    camera = Transform(Vec3(0.0, 5.0, 10.0))
    camera.look_at(Vec3.ZERO, Vec3.Y)
    player_movement(MovementInput(Vec2(1.0, 1.0).normalize_or_zero()), camera, player)
    assert player.velocity.length() == pytest.approx(player.player.speed)
    assert player.velocity.y == 0.0


def test_rotation_turns_toward_movement():
    player = PlayerEntity()
    start = player.transform.rotation
    player_movement(MovementInput(Vec2(1.0, 0.0)), Transform(), player)
    target = Quat.from_rotation_y(math.atan2(player.velocity.x, player.velocity.z))
    assert abs(player.transform.rotation.dot(target)) > abs(start.dot(target))
    assert player.transform.rotation.length() == pytest.approx(1.0)


def test_camera_rotation_changes_direction():
    player = PlayerEntity()
    camera = Transform(rotation=Quat.from_rotation_y(math.pi / 2))
    player_movement(MovementInput(Vec2(0.0, 1.0)), camera, player)
    expected = camera.forward().xz().normalize_or_zero()
    direction = player.velocity.xz().normalize_or_zero()
    assert direction.dot(expected) == pytest.approx(1.0)