"""Game state and the actions a player can take: mining, fighting, building, crafting, saving."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Protocol

from voxelcraft.block import Block, Blocks, BlockState, BlockStateRegistry, Face
from voxelcraft.chunk import Chunk
from voxelcraft.chunk_provider import ChunkProvider
from voxelcraft.entity import EntityManager, ItemEntity, Mob
from voxelcraft.geometry import AABB, Vec3
from voxelcraft.items import ITEM_REGISTRY, Item, ItemRegistry, ItemStack
from voxelcraft.persistence import (
    load_entities,
    load_player_data,
    save_chunk,
    save_entities,
    save_player_data,
)
from voxelcraft.player import Key, Player
from voxelcraft.raycast import raycast
from voxelcraft.texture_atlas import TextureAtlas
from voxelcraft.world import World

START_POSITION = Vec3(0.0, 80.0, 0.0)
FIRST_MOB_POSITION = Vec3(5.0, 80.0, 5.0)
MOB_TYPE = "zombie"
REACH = 5.0
ATTACK_DAMAGE = 4.0
MOB_SPAWN_INTERVAL = 15.0
MAX_MOBS = 5
MOB_SPAWN_OFFSET = Vec3(6.0, 0.0, 6.0)
LIQUID_INTERVAL = 0.2
RENDER_DISTANCE = 4
HOTBAR_SIZE = 9
PLANKS_PER_LOG = 4

_UNIFORM_BLOCKS = {
    Blocks.STONE: ("stone", "stone"),
    Blocks.DIRT: ("dirt", "dirt"),
    Blocks.LEAVES: ("leaves", "leaves"),
}

_DROPS = {
    Blocks.GRASS: Blocks.DIRT,
    Blocks.STONE: Blocks.STONE,
    Blocks.DIRT: Blocks.DIRT,
    Blocks.LOG: Blocks.LOG,
    Blocks.LEAVES: Blocks.LEAVES,
}

_ITEMS = (
    (Blocks.STONE, "stone"),
    (Blocks.DIRT, "dirt"),
    (Blocks.GRASS, "grass"),
    (Blocks.PLANKS, "planks"),
    (Blocks.LOG, "log"),
    (Blocks.LEAVES, "leaves"),
)

_SIDES = (Face.NORTH, Face.SOUTH, Face.WEST, Face.EAST)


class ChunkGenerator(Protocol):
    def generate_chunk(self, chunk: Chunk) -> None: ...


def _column_textures(top: str, bottom: str, side: str) -> dict[Face, str]:
    textures = {Face.UP: top, Face.DOWN: bottom}
    textures.update({face: side for face in _SIDES})
    return textures


def register_blocks(registry: BlockStateRegistry) -> None:
    """Register the block states of stone, dirt, grass, log and leaves."""
    for block_id, (name, texture) in _UNIFORM_BLOCKS.items():
        registry.register(block_id, BlockState(name, face_textures={face: texture for face in Face}))
    registry.register(
        Blocks.GRASS,
        BlockState("grass", face_textures=_column_textures("grass_top", "dirt", "grass_side")),
    )
    registry.register(
        Blocks.LOG,
        BlockState("log", face_textures=_column_textures("log_top", "log_top", "log_side")),
    )


def register_items(registry: ItemRegistry) -> None:
    """Register the item forms of the placeable blocks."""
    for block_id, name in _ITEMS:
        registry.register(Item(int(block_id), name))


def drop_item_for(block_id: int) -> int | None:
    """Item id dropped when a block of this type is broken, or None if it drops nothing."""
    drop = _DROPS.get(block_id)
    return int(drop) if drop is not None else None


def ray_intersects_aabb(origin: Vec3, direction: Vec3, box: AABB, max_distance: float) -> float | None:
    """Distance along the ray to where it enters ``box`` within [0, max_distance], or None."""
    t_min, t_max = 0.0, max_distance
    for o, d, lo, hi in zip(origin, direction, box.minimum, box.maximum):
        if abs(d) < 1e-6:
            if o < lo or o > hi:
                return None
            continue
        t1 = (lo - o) / d
        t2 = (hi - o) / d
        if t1 > t2:
            t1, t2 = t2, t1
        t_min = max(t_min, t1)
        t_max = min(t_max, t2)
        if t_min > t_max:
            return None
    return t_min


def _silent(name: str) -> None:
    return None


class Game:
    """Everything that changes while playing, advanced frame by frame with :meth:`tick`."""

    def __init__(self, world: World, generator: ChunkGenerator) -> None:
        self.world = world
        self.generator = generator
        self.block_states = BlockStateRegistry()
        register_blocks(self.block_states)
        register_items(ITEM_REGISTRY)
        self.atlas = TextureAtlas(16)
        self.chunk_provider = ChunkProvider(world, generator, self.atlas, self.block_states)
        self.on_sound: Callable[[str], None] = _silent
        self.player = Player(START_POSITION, play_sound=lambda name: self.on_sound(name))
        self.entities = EntityManager()
        self.entities.add(Mob(FIRST_MOB_POSITION, MOB_TYPE))
        self.inventory_open = False
        self.held_keys: set[Key] = set()
        self.render_distance = RENDER_DISTANCE
        self.fps = 0
        self._frame_count = 0
        self._fps_timer = 0.0
        self._mob_spawn_timer = 0.0
        self._liquid_timer = 0.0

    def toggle_inventory(self) -> bool:
        """Open or close the inventory screen; returns whether it is now open."""
        self.inventory_open = not self.inventory_open
        return self.inventory_open

    def scroll(self, yoffset: float) -> None:
        """Move the hotbar selection by a mouse-wheel offset, wrapping at either end."""
        if self.inventory_open:
            return
        slot = self.player.selected_slot - int(yoffset)
        if slot < 0:
            slot = HOTBAR_SIZE - 1
        if slot > HOTBAR_SIZE - 1:
            slot = 0
        self.player.selected_slot = slot

    def _target_mob(self) -> Mob | None:
        camera = self.player.camera
        direction = camera.front.normalized()
        closest: Mob | None = None
        closest_t = float("inf")
        for entity in self.entities:
            if entity.removed or not isinstance(entity, Mob):
                continue
            t = ray_intersects_aabb(camera.position, direction, entity.aabb, REACH)
            if t is not None and t < closest_t:
                closest, closest_t = entity, t
        return closest

    def attack(self) -> bool:
        """Hit the mob in view, or else break the block in view; returns whether anything was hit."""
        if self.inventory_open:
            return False
        mob = self._target_mob()
        if mob is not None:
            mob.health -= ATTACK_DAMAGE
            if mob.health <= 0.0:
                mob.mark_removed()
            return True

        camera = self.player.camera
        result = raycast(camera.position, camera.front, REACH, self.world)
        if not result.hit:
            return False
        x, y, z = result.block_pos
        drop = drop_item_for(self.world.get_block(x, y, z).id)
        if drop is not None:
            centre = Vec3(x + 0.5, y + 0.5, z + 0.5)
            self.entities.add(ItemEntity(centre, ItemStack(drop, 1, 0)))
        self.world.set_block(x, y, z, Block(Blocks.AIR))
        self.on_sound("break")
        return True

    def place(self) -> bool:
        """Put a stone block against the face in view unless it would overlap the player."""
        if self.inventory_open:
            return False
        camera = self.player.camera
        result = raycast(camera.position, camera.front, REACH, self.world)
        if not result.hit:
            return False
        x, y, z = (p + n for p, n in zip(result.block_pos, result.face_normal))
        corner = Vec3(float(x), float(y), float(z))
        block_box = AABB(corner, corner + Vec3(1.0, 1.0, 1.0))
        if self.player.aabb.intersects(block_box):
            return False
        self.world.set_block(x, y, z, Block(Blocks.STONE))
        self.on_sound("place")
        return True

    def craft(self) -> bool:
        """With the inventory open, turn one log in the first slot into planks."""
        if not self.inventory_open:
            return False
        inventory = self.player.inventory
        source = inventory.get_stack(0)
        if source.is_empty() or source.item_id != Blocks.LOG or source.count < 1:
            return False
        inventory.remove_stack(0, 1)
        self.player.add_to_inventory(ItemStack(int(Blocks.PLANKS), PLANKS_PER_LOG, 0))
        return True

    def collect_items(self) -> None:
        """Pick up dropped items the player is touching, as far as the inventory has room."""
        player_box = self.player.aabb
        for entity in self.entities:
            if entity.removed or not isinstance(entity, ItemEntity):
                continue
            if player_box.intersects(entity.aabb):
                self.player.add_to_inventory(entity.stack)
                if entity.stack.is_empty():
                    entity.mark_removed()

    def _count_frame(self, delta_time: float) -> None:
        self._fps_timer += delta_time
        self._frame_count += 1
        if self._fps_timer >= 1.0:
            self.fps = self._frame_count
            self._frame_count = 0
            self._fps_timer = 0.0

    def _spawn_mobs(self, delta_time: float) -> None:
        self._mob_spawn_timer += delta_time
        if self._mob_spawn_timer < MOB_SPAWN_INTERVAL:
            return
        mobs = sum(1 for entity in self.entities if isinstance(entity, Mob))
        if mobs < MAX_MOBS:
            self.entities.add(Mob(self.player.position + MOB_SPAWN_OFFSET, MOB_TYPE))
        self._mob_spawn_timer = 0.0

    def tick(self, delta_time: float) -> None:
        """Advance the game by ``delta_time`` seconds."""
        self._count_frame(delta_time)
        if not self.inventory_open:
            self.player.handle_input(self.held_keys, delta_time)
        self.player.update(delta_time, self.world)
        self.entities.update(delta_time, self.world)
        self.collect_items()
        self._spawn_mobs(delta_time)
        self.chunk_provider.update(self.player.position, self.render_distance)

        self._liquid_timer += delta_time
        if self._liquid_timer >= LIQUID_INTERVAL:
            self.world.update_liquids()
            self._liquid_timer = 0.0

    def save(self, world_path: str | os.PathLike[str]) -> None:
        """Write every loaded chunk, the player and the entities under ``world_path``."""
        os.makedirs(world_path, exist_ok=True)
        for chunk in self.world.chunks.values():
            save_chunk(world_path, chunk)
        save_player_data(world_path, self.player)
        save_entities(world_path, self.entities)

    def load(self, world_path: str | os.PathLike[str]) -> None:
        """Restore the player and replace the entities with those saved under ``world_path``."""
        load_player_data(world_path, self.player)
        self.entities.clear()
        load_entities(world_path, self.entities)