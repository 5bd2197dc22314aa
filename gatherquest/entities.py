"""World entities and the initial world set-up."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, List

from gatherquest.camera import MainCamera
from gatherquest.types import (
    GameAssets,
    Gatherable,
    Player,
    ResourceType,
    Timer,
    Transform,
    Vec3,
)

PLAYER_MODEL = "models/CharWalk.glb#Scene0"
TREE_MODELS = ("models/tree1.glb#Scene0", "models/tree2.glb#Scene0")
ROCK_MODEL = "models/rock1.glb#Scene0"

TREE_COUNT = 20
ROCK_COUNT = 10
SPAWN_EXTENT = 20.0
GROUND_SIZE = 100.0


def _camera_transform() -> Transform:
    transform = Transform(Vec3(0.0, 5.0, 10.0))
    transform.look_at(Vec3.ZERO, Vec3.Y)
    return transform


@dataclass
class PlayerEntity:
    """The player with its transform and physical properties."""

    player: Player = field(default_factory=lambda: Player(5.0, 2.0, Timer(1.0)))
    transform: Transform = field(default_factory=lambda: Transform(Vec3(0.0, 0.5, 0.0)))
    position: Vec3 = Vec3.ZERO
    velocity: Vec3 = Vec3.ZERO
    half_extents: Vec3 = Vec3(0.5, 0.5, 0.5)
    friction: float = 0.7
    restitution: float = 0.3
    linear_damping: float = 0.5
    angular_damping: float = 0.5
    gravity_scale: float = 1.0


@dataclass(eq=False)
class ResourceEntity:
    """A gatherable resource node placed in the world."""

    gatherable: Gatherable
    position: Vec3
    transform: Transform
    scene: str = ""
    collider_half_height: float = 0.5
    collider_radius: float = 0.5


@dataclass
class World:
    """Everything that lives in the game world."""

    player: PlayerEntity = field(default_factory=PlayerEntity)
    resources: List[ResourceEntity] = field(default_factory=list)
    camera: MainCamera = field(default_factory=MainCamera)
    camera_transform: Transform = field(default_factory=_camera_transform)
    assets: GameAssets = field(default_factory=GameAssets)
    ground_size: float = GROUND_SIZE

    def despawn(self, entity: ResourceEntity) -> None:
        """Remove a resource node from the world."""
        for index, candidate in enumerate(self.resources):
            if candidate is entity:
                del self.resources[index]
                return
        raise LookupError("entity is not in the world")


def _spawn_node(
    rng: random.Random,
    resource_type: ResourceType,
    scene: str,
    half_height: float,
    radius: float,
) -> ResourceEntity:
    x = rng.random() * 2 * SPAWN_EXTENT - SPAWN_EXTENT
    z = rng.random() * 2 * SPAWN_EXTENT - SPAWN_EXTENT
    location = Vec3(x, 0.0, z)
    return ResourceEntity(
        gatherable=Gatherable(resource_type, 100, None),
        position=location,
        transform=Transform(location),
        scene=scene,
        collider_half_height=half_height,
        collider_radius=radius,
    )


def spawn_world(rng: random.Random | None = None) -> World:
    """Build the starting world: camera, assets, player, trees and rocks."""
    rng = rng if rng is not None else random.Random()
    assets = GameAssets(
        player_model=PLAYER_MODEL,
        tree_models=list(TREE_MODELS),
        rock_model=ROCK_MODEL,
    )
    trees = [
        _spawn_node(rng, ResourceType.WOOD, TREE_MODELS[0], 1.0, 0.5)
        for _ in range(TREE_COUNT)
    ]
    rocks = [
        _spawn_node(rng, ResourceType.STONE, ROCK_MODEL, 0.5, 0.5)
        for _ in range(ROCK_COUNT)
    ]
    return World(
        player=PlayerEntity(),
        resources=trees + rocks,
        camera=MainCamera(distance=5.0, angle=0.0, height=2.5),
        camera_transform=_camera_transform(),
        assets=assets,
    )


def assets_ready(assets: GameAssets, is_loaded: Callable[[str], bool]) -> bool:
    """Return True once the tree and rock models have all finished loading."""
    if not assets.tree_models:
        return False
    if not all(is_loaded(path) for path in assets.tree_models):
        return False
    return is_loaded(assets.rock_model)