"""Heads-up display: the inventory line and the frame-rate line."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from gatherquest.types import PlayerInventory, ResourceType

INITIAL_INVENTORY_TEXT = "Inventory: Wood: 0, Stone: 0, Ore: 0"
INITIAL_FPS_TEXT = "FPS: 0"
DEFAULT_FPS_LOG = "fps_log.txt"

PathLike = Union[str, "os.PathLike[str]"]


def inventory_text(inventory: PlayerInventory) -> str:
    """Return the HUD line that shows the inventory counts."""
    return "Inventory: Wood: {}, Stone: {}, Ore: {}".format(
        inventory.count(ResourceType.WOOD),
        inventory.count(ResourceType.STONE),
        inventory.count(ResourceType.ORE),
    )


def fps_text(fps: float) -> str:
    """Return the HUD line that shows the frame rate, rounded to a whole number."""
    return f"FPS: {fps:.0f}"


def _display_float(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


@dataclass
class Hud:
    """The text shown in the top-left corner of the screen."""

    inventory_label: str = INITIAL_INVENTORY_TEXT
    fps_label: str = INITIAL_FPS_TEXT

    def update_inventory(self, inventory: PlayerInventory) -> bool:
        """Refresh the inventory line; return True if its text changed."""
        new_text = inventory_text(inventory)
        if new_text == self.inventory_label:
            return False
        self.inventory_label = new_text
        return True

    def update_fps(
        self, fps: Optional[float], log_path: Optional[PathLike] = DEFAULT_FPS_LOG
    ) -> None:
        """Show the smoothed frame rate and append it to ``log_path``.

        Nothing changes while no frame rate is known. Failures to write the
        log are ignored.
        """
        if fps is None:
            return
        self.fps_label = fps_text(fps)
        if log_path is None:
            return
        try:
            with open(log_path, "a", encoding="utf-8") as log:
                log.write(f"{_display_float(fps)}\n")
        except OSError:
            pass