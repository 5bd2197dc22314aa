"""The game loop: wires the systems together and draws a top-down view."""

from __future__ import annotations

import argparse
import random
from typing import Iterable, List, Optional, Sequence, Set, Tuple

import pygame

from gatherquest.camera import MouseButton
from gatherquest.entities import World, spawn_world
from gatherquest.input import MovementInput
from gatherquest.movement import player_movement
from gatherquest.resources import Gathered, gather_resources, handle_resource_click
from gatherquest.types import PlayerInventory, ResourceType, Vec2, Vec3
from gatherquest.ui import DEFAULT_FPS_LOG, Hud

FIXED_TIMESTEP = 1.0 / 64.0
WINDOW_SIZE = (1280, 720)
PIXELS_PER_UNIT = 12.0
MAX_STACK_SIZE = 10

_BACKGROUND = (20, 24, 20)
_GROUND = (76, 127, 76)
_PLAYER = (204, 51, 51)
_NODE_COLOURS = {
    ResourceType.WOOD: (34, 100, 34),
    ResourceType.STONE: (128, 128, 128),
    ResourceType.ORE: (150, 110, 60),
}
_TEXT = (255, 255, 255)

_MOVE_KEYS = (
    ("w", pygame.K_w),
    ("a", pygame.K_a),
    ("s", pygame.K_s),
    ("d", pygame.K_d),
)


class Game:
    """The game state and the per-step systems that act on it."""

    def __init__(
        self, rng: Optional[random.Random] = None, log_path: Optional[str] = DEFAULT_FPS_LOG
    ) -> None:
        self.world: World = spawn_world(rng)
        self.inventory = PlayerInventory(resources={}, max_stack_size=MAX_STACK_SIZE)
        self.movement = MovementInput()
        self.hud = Hud()
        self.log_path = log_path

    def fixed_update(
        self, keys: Iterable[str], just_pressed: Iterable[str], dt: float
    ) -> Optional[Gathered]:
        """Run one fixed step: input, camera follow, gathering, movement, physics."""
        world = self.world
        self.movement.update(keys)
        world.camera.follow(world.camera_transform, world.player.transform.translation, dt)
        gathered = gather_resources(
            world, self.inventory, dt, "e" in {str(key).lower() for key in just_pressed}
        )
        player_movement(self.movement, world.camera_transform, world.player)
        self._integrate(dt)
        return gathered

    def update(
        self,
        mouse_buttons: Iterable[MouseButton | str],
        motion: Iterable[Vec2],
        scroll: Iterable[float],
        left_clicked: bool,
        fps: Optional[float],
    ) -> Optional[Gathered]:
        """Run one frame: camera control, click gathering and the HUD."""
        self.world.camera.control(mouse_buttons, motion, scroll)
        gathered = handle_resource_click(self.world, self.inventory, left_clicked)
        self.hud.update_inventory(self.inventory)
        self.hud.update_fps(fps, self.log_path)
        return gathered

    def _integrate(self, dt: float) -> None:
        player = self.world.player
        player.transform.translation = player.transform.translation + player.velocity * dt


def _view_axes(game: Game) -> Tuple[Vec2, Vec2]:
    transform = game.world.camera_transform
    forward = transform.forward().xz().normalize_or_zero()
    right = transform.right().xz().normalize_or_zero()
    if forward == Vec2.ZERO or right == Vec2.ZERO:
        return Vec2(1.0, 0.0), Vec2(0.0, -1.0)
    return right, forward


def _project(point: Vec3, centre: Vec3, axes: Tuple[Vec2, Vec2], scale: float,
             screen_centre: Tuple[int, int]) -> Tuple[int, int]:
    right, forward = axes
    relative = Vec2(point.x - centre.x, point.z - centre.z)
    return (
        int(screen_centre[0] + relative.dot(right) * scale),
        int(screen_centre[1] - relative.dot(forward) * scale),
    )


def _draw(screen: "pygame.Surface", font: "pygame.font.Font", game: Game) -> None:
    world = game.world
    screen.fill(_BACKGROUND)
    centre = world.player.transform.translation
    axes = _view_axes(game)
    scale = PIXELS_PER_UNIT * 5.0 / world.camera.distance
    screen_centre = (screen.get_width() // 2, screen.get_height() // 2)

    half = world.ground_size / 2.0
    corners = [Vec3(-half, 0.0, -half), Vec3(half, 0.0, -half),
               Vec3(half, 0.0, half), Vec3(-half, 0.0, half)]
    pygame.draw.polygon(
        screen, _GROUND, [_project(c, centre, axes, scale, screen_centre) for c in corners]
    )

    for node in world.resources:
        position = _project(node.transform.translation, centre, axes, scale, screen_centre)
        radius = max(2, int(node.collider_radius * scale))
        pygame.draw.circle(screen, _NODE_COLOURS[node.gatherable.resource_type], position, radius)

    player = world.player
    player_pos = _project(player.transform.translation, centre, axes, scale, screen_centre)
    size = max(2, int(2 * player.half_extents.x * scale))
    rect = pygame.Rect(0, 0, size, size)
    rect.center = player_pos
    pygame.draw.rect(screen, _PLAYER, rect)
    facing = player.transform.translation + player.transform.forward() * player.player.gathering_range
    pygame.draw.line(
        screen, _TEXT, player_pos, _project(facing, centre, axes, scale, screen_centre), 2
    )

    screen.blit(font.render(game.hud.inventory_label, True, _TEXT), (10, 10))
    screen.blit(font.render(game.hud.fps_label, True, _TEXT), (10, 40))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gatherquest", description="Walk around and gather wood and stone."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for resource placement")
    parser.add_argument("--frames", type=int, default=None, help="quit after this many frames")
    parser.add_argument("--fps-log", default=DEFAULT_FPS_LOG, help="file the frame rate is appended to")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    args = _parse_args(argv)
    game = Game(random.Random(args.seed), args.fps_log)

    pygame.display.init()
    pygame.font.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Gather Quest")
        font = pygame.font.Font(None, 26)
        clock = pygame.time.Clock()
        accumulator = 0.0
        pending_just: Set[str] = set()
        frame = 0
        running = True
        while running and (args.frames is None or frame < args.frames):
            dt = clock.tick(240) / 1000.0
            motion: List[Vec2] = []
            scroll: List[float] = []
            clicked = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    pending_just.add(pygame.key.name(event.key))
                elif event.type == pygame.MOUSEMOTION:
                    motion.append(Vec2(float(event.rel[0]), float(event.rel[1])))
                elif event.type == pygame.MOUSEWHEEL:
                    scroll.append(float(event.y))
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = True

            pressed = pygame.key.get_pressed()
            keys = {name for name, code in _MOVE_KEYS if pressed[code]}
            left, _middle, right = pygame.mouse.get_pressed()[:3]
            buttons = [b for b, down in ((MouseButton.LEFT, left), (MouseButton.RIGHT, right)) if down]

            accumulator += dt
            while accumulator >= FIXED_TIMESTEP:
                game.fixed_update(keys, pending_just, FIXED_TIMESTEP)
                pending_just = set()
                accumulator -= FIXED_TIMESTEP

            fps = clock.get_fps()
            game.update(buttons, motion, scroll, clicked, fps if fps > 0.0 else None)
            _draw(screen, font, game)
            pygame.display.flip()
            frame += 1
    finally:
        pygame.quit()
    return 0