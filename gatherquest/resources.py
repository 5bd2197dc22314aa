"""Gathering resource nodes into the player's inventory."""

from __future__ import annotations

import math
from typing import Optional, Tuple

from gatherquest.entities import ResourceEntity, World
from gatherquest.types import PlayerInventory, ResourceType

Gathered = Tuple[ResourceType, int]


def gather_resources(
    world: World,
    inventory: PlayerInventory,
    delta: float,
    e_just_pressed: bool,
) -> Optional[Gathered]:
    """Gather the closest node in range that the player faces when E is pressed.

    While the gathering cooldown runs it only advances. Returns the gathered
    type and its new total, or None when nothing was gathered.
    """
    entity = world.player
    player = entity.player
    if not player.gathering_cooldown.finished:
        player.gathering_cooldown.tick(delta)
        return None
    if not e_just_pressed:
        return None

    player_pos = entity.position
    player_forward = entity.transform.forward().normalize_or_zero()
    range_sq = player.gathering_range * player.gathering_range

    closest: Optional[ResourceEntity] = None
    closest_distance = math.inf
    for node in world.resources:
        distance_sq = player_pos.distance_squared(node.position)
        if distance_sq > range_sq:
            continue
        to_resource = (node.transform.translation - player_pos).normalize_or_zero()
        if player_forward.dot(to_resource) <= 0.7:
            continue
        if distance_sq < closest_distance:
            closest_distance = distance_sq
            closest = node

    if closest is None:
        return None
    resource_type = closest.gatherable.resource_type
    new_amount = inventory.add(resource_type)
    if new_amount is None:
        return None
    world.despawn(closest)
    player.gathering_cooldown.reset()
    print(f"Gathered {resource_type.get_name()}! Total: {new_amount}")
    return resource_type, new_amount


def handle_resource_click(
    world: World,
    inventory: PlayerInventory,
    clicked: bool,
) -> Optional[Gathered]:
    """On a left click, gather the closest node within the player's range."""
    if not clicked:
        return None
    player_pos = world.player.transform.translation
    gathering_range = world.player.player.gathering_range
    range_sq = gathering_range * gathering_range

    closest: Optional[ResourceEntity] = None
    closest_distance = math.inf
    for node in world.resources:
        distance_sq = node.transform.translation.distance_squared(player_pos)
        if distance_sq <= range_sq and distance_sq < closest_distance:
            closest_distance = distance_sq
            closest = node

    if closest is None:
        return None
    resource_type = closest.gatherable.resource_type
    new_amount = inventory.add(resource_type)
    if new_amount is None:
        return None
    world.despawn(closest)
    return resource_type, new_amount