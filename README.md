# gatherquest

A small resource gathering game. You control a player on a grassy field that
is scattered with 20 trees and 10 rocks placed at random. Walk up to one, face
it and gather it to fill your inventory.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
gatherquest
```

Options:

- `--seed N`: seed for the random placement of trees and rocks.
- `--frames N`: quit after this many frames.
- `--fps-log PATH`: file the frame rate is appended to (default `fps_log.txt`).

Controls:

- **W / A / S / D**: move. Movement is relative to the way the camera faces,
  and the player turns toward the direction it is going.
- **E**: gather the nearest tree or rock that is within reach (2 units) and in
  front of the player. The one second gathering cooldown must run out first,
  and it starts again after each gather.
- **Left click**: gather the nearest resource within reach, whichever way the
  player faces.
- **Hold the left or right mouse button and drag sideways**: orbit the camera
  around the player.
- **Mouse wheel**: zoom the camera in and out.
- **Escape** or closing the window: quit.

Trees give Wood and rocks give Stone; each resource type (Wood, Stone, Ore)
stacks up to 10. A gathered node disappears from the field. The inventory and
the current frame rate are shown in the top-left corner, and each frame rate
reading is appended to the FPS log file.

## What it does not do

The window shows a flat, top-down map seen from the camera's direction:
the ground as a square, trees and rocks as coloured circles and the player as
a square with a line showing which way it faces. The model files named in
`GameAssets` are only recorded by path; no models are loaded or rendered.
There is no physics beyond moving the player by its velocity each fixed step:
no gravity and no collisions, so the player walks through trees and rocks.
Gathered nodes do not respawn, and nothing in the world yields Ore.

## Using it as a library

The game logic runs without a window. `gatherquest.app.Game` holds a world
built by `gatherquest.entities.spawn_world`, a `PlayerInventory`, the movement
input and the HUD. `Game.fixed_update` runs one fixed step (input, camera
follow, E-key gathering, movement); `Game.update` runs one frame (camera
control, click gathering, HUD). Both return the gathered `(ResourceType, total)`
pair, or `None`.

```python
import random

from gatherquest.app import Game

game = Game(random.Random(1), log_path=None)
for _ in range(64):
    game.fixed_update({"w"}, set(), 1 / 64)
print(game.world.player.transform.translation)

print(game.update([], [], [], True, None))
print(game.hud.inventory_label)
```

The systems can also be called on their own: `gather_resources` and
`handle_resource_click` in `gatherquest.resources`, `player_movement` in
`gatherquest.movement`, `read_movement` and `MovementInput` in
`gatherquest.input`, `MainCamera` in `gatherquest.camera`, and `Hud`,
`inventory_text` and `fps_text` in `gatherquest.ui`.

`gatherquest.types` holds the small `Vec2`, `Vec3`, `Quat`, `Transform` and
`Timer` types the systems share, along with `ResourceType`, `Player`,
`Gatherable`, `PlayerInventory` and `GameAssets`.