"""Moving things in the world: the entity base, mobs, dropped items and their manager."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Iterator, Protocol

from voxelcraft.block import Block, Blocks
from voxelcraft.geometry import AABB, Vec3
from voxelcraft.items import ItemStack

GRAVITY = 24.0
DEFAULT_HEALTH = 20.0
MOB_DIMENSIONS = Vec3(0.6, 1.8, 0.6)
ITEM_DIMENSIONS = Vec3(0.25, 0.25, 0.25)
ITEM_POP_SPEED = 2.0
WANDER_INTERVAL = 2.0


class BlockSource(Protocol):
    def get_block(self, x: int, y: int, z: int) -> Block: ...


class Entity(ABC):
    """Something with a position, velocity and a box-shaped body."""

    def __init__(self, position: Vec3, dimensions: Vec3) -> None:
        self.position = position
        self.velocity = Vec3()
        self.dimensions = dimensions
        self.on_ground = False
        self.health = DEFAULT_HEALTH
        self.removed = False

    @abstractmethod
    def update(self, delta_time: float, world: BlockSource) -> None:
        """Advance the entity by ``delta_time`` seconds."""

    def mark_removed(self) -> None:
        """Flag the entity for removal by its manager."""
        self.removed = True

    @property
    def aabb(self) -> AABB:
        """Bounding box centred on the position horizontally, standing on it vertically."""
        half_x = self.dimensions.x / 2
        half_z = self.dimensions.z / 2
        return AABB(
            self.position - Vec3(half_x, 0.0, half_z),
            self.position + Vec3(half_x, self.dimensions.y, half_z),
        )

    def _apply_physics(self, delta_time: float, world: BlockSource) -> None:
        self.velocity = replace(self.velocity, y=self.velocity.y - GRAVITY * delta_time)
        next_pos = self.position + self.velocity * delta_time
        if world.get_block(*next_pos.floor()).id != Blocks.AIR:
            self.velocity = replace(self.velocity, y=0.0)
            self.on_ground = True
        else:
            self.on_ground = False
            self.position = next_pos


class ItemEntity(Entity):
    """A dropped item stack lying in the world."""

    def __init__(self, position: Vec3, stack: ItemStack) -> None:
        super().__init__(position, ITEM_DIMENSIONS)
        self.stack = stack
        self.age_seconds = 0.0
        self.velocity = Vec3(0.0, ITEM_POP_SPEED, 0.0)

    def update(self, delta_time: float, world: BlockSource) -> None:
        """Age the item and let it fall."""
        self.age_seconds += delta_time
        self._apply_physics(delta_time, world)


class Mob(Entity):
    """A creature that falls and wanders in a random direction every couple of seconds."""

    def __init__(self, position: Vec3, mob_type: str, rng: random.Random | None = None) -> None:
        super().__init__(position, MOB_DIMENSIONS)
        self.type = mob_type
        self._rng = rng if rng is not None else random.Random()
        self._wander_timer = 0.0

    def _wander_speed(self) -> float:
        return (self._rng.randrange(100) - 50) / 50.0 * 2.0

    def update(self, delta_time: float, world: BlockSource) -> None:
        """Apply physics, then pick a new horizontal velocity when the wander timer expires."""
        self._apply_physics(delta_time, world)
        self._wander_timer += delta_time
        if self._wander_timer > WANDER_INTERVAL:
            self.velocity = Vec3(self._wander_speed(), self.velocity.y, self._wander_speed())
            self._wander_timer = 0.0


class EntityManager:
    """Owns the live entities and drops removed ones after each update."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []

    def add(self, entity: Entity) -> None:
        """Start tracking an entity."""
        self._entities.append(entity)

    def update(self, delta_time: float, world: BlockSource) -> None:
        """Update every entity, then forget those marked as removed."""
        for entity in list(self._entities):
            entity.update(delta_time, world)
        self._entities = [entity for entity in self._entities if not entity.removed]

    @property
    def entities(self) -> tuple[Entity, ...]:
        """Snapshot of the tracked entities in insertion order."""
        return tuple(self._entities)

    def clear(self) -> None:
        """Forget every entity."""
        self._entities.clear()

    def __iter__(self) -> Iterator[Entity]:
        return iter(tuple(self._entities))

    def __len__(self) -> int:
        return len(self._entities)