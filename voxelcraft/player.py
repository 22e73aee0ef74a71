"""The player: an entity with a camera, an inventory and keyboard control."""

from __future__ import annotations

import math
from collections.abc import Callable, Collection
from dataclasses import replace
from enum import Enum

from voxelcraft.block import Blocks
from voxelcraft.camera import Camera
from voxelcraft.entity import BlockSource, Entity
from voxelcraft.geometry import Vec3
from voxelcraft.items import Inventory, ItemStack

PLAYER_DIMENSIONS = Vec3(0.6, 1.8, 0.6)
EYE_HEIGHT = 1.62
INVENTORY_SIZE = 36
WALK_SPEED = 4.317
SPRINT_FACTOR = 1.3
JUMP_SPEED = 8.0
STEP_INTERVAL = 0.35
STEP_THRESHOLD = 0.1

_STEP_SOUNDS = {Blocks.GRASS: "step_grass", Blocks.DIRT: "step_dirt"}


class Key(Enum):
    """Keys the player reacts to."""

    NUM_1 = "1"
    NUM_2 = "2"
    NUM_3 = "3"
    NUM_4 = "4"
    NUM_5 = "5"
    NUM_6 = "6"
    NUM_7 = "7"
    NUM_8 = "8"
    NUM_9 = "9"
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    SPACE = "space"
    LEFT_CONTROL = "left_control"


HOTBAR_KEYS = (
    Key.NUM_1, Key.NUM_2, Key.NUM_3, Key.NUM_4, Key.NUM_5,
    Key.NUM_6, Key.NUM_7, Key.NUM_8, Key.NUM_9,
)


def _silent(name: str) -> None:
    return None


class Player(Entity):
    """The controllable character."""

    def __init__(self, start_pos: Vec3, play_sound: Callable[[str], None] | None = None) -> None:
        super().__init__(start_pos, PLAYER_DIMENSIONS)
        self.camera = Camera(start_pos)
        self.selected_slot = 0
        self.inventory = Inventory(INVENTORY_SIZE)
        self.eye_height = EYE_HEIGHT
        self._play_sound = play_sound if play_sound is not None else _silent
        self._step_timer = 0.0
        self._sync_camera()

    def _sync_camera(self) -> None:
        self.camera.position = self.position + Vec3(0.0, self.eye_height, 0.0)

    def update(self, delta_time: float, world: BlockSource) -> None:
        """Apply physics, move the camera with the body and play footsteps while walking."""
        self._apply_physics(delta_time, world)
        self._sync_camera()

        moving = abs(self.velocity.x) > STEP_THRESHOLD or abs(self.velocity.z) > STEP_THRESHOLD
        if not (self.on_ground and moving):
            return
        self._step_timer += delta_time
        if self._step_timer > STEP_INTERVAL:
            below = world.get_block(
                math.floor(self.position.x),
                math.floor(self.position.y - 0.1),
                math.floor(self.position.z),
            ).id
            self._play_sound(_STEP_SOUNDS.get(below, "step_stone"))
            self._step_timer = 0.0

    def handle_input(self, keys: Collection[Key], delta_time: float) -> None:
        """React to the set of keys currently held down."""
        for slot, key in enumerate(HOTBAR_KEYS):
            if key in keys:
                self.selected_slot = slot

        speed = WALK_SPEED * SPRINT_FACTOR if Key.LEFT_CONTROL in keys else WALK_SPEED

        direction = Vec3()
        if Key.W in keys:
            direction = direction + self.camera.front
        if Key.S in keys:
            direction = direction - self.camera.front
        if Key.A in keys:
            direction = direction - self.camera.right
        if Key.D in keys:
            direction = direction + self.camera.right
        direction = Vec3(direction.x, 0.0, direction.z)

        if direction.length() > 0:
            unit = direction.normalized()
            self.velocity = Vec3(unit.x * speed, self.velocity.y, unit.z * speed)
        else:
            self.velocity = Vec3(0.0, self.velocity.y, 0.0)

        if Key.SPACE in keys and self.on_ground:
            self.velocity = replace(self.velocity, y=JUMP_SPEED)

    def add_to_inventory(self, stack: ItemStack) -> bool:
        """Move ``stack`` into the inventory; True if all of it fit."""
        return self.inventory.add_item(stack)