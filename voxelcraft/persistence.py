"""Binary save files for chunks, player data and entities (little-endian)."""

from __future__ import annotations

import itertools
import os
import struct
from pathlib import Path

from voxelcraft.block import Block
from voxelcraft.chunk import CHUNK_HEIGHT, CHUNK_SIZE, CHUNK_WIDTH, Chunk
from voxelcraft.entity import EntityManager, ItemEntity, Mob
from voxelcraft.geometry import Vec3
from voxelcraft.items import ItemStack
from voxelcraft.player import Player

MOB_RECORD = 1
ITEM_RECORD = 2

_CHUNK_BYTES = CHUNK_SIZE * 2
_PLAYER_HEADER = "<3fifi"
_SLOT = "<Hii"


def chunk_path(world_path: str | os.PathLike[str], x: int, z: int) -> str:
    """Path of the save file for the chunk at chunk coordinates (x, z)."""
    return f"{os.fspath(world_path)}/chunk_{x}_{z}.dat"


def player_path(world_path: str | os.PathLike[str]) -> str:
    """Path of the player save file."""
    return f"{os.fspath(world_path)}/player.dat"


def entities_path(world_path: str | os.PathLike[str]) -> str:
    """Path of the entity save file."""
    return f"{os.fspath(world_path)}/entities.dat"


class _Reader:
    def __init__(self, data: bytes, what: str) -> None:
        self._data = data
        self._offset = 0
        self._what = what

    def _need(self, size: int) -> None:
        if self._offset + size > len(self._data):
            raise ValueError(f"truncated {self._what} data")

    def read(self, fmt: str) -> tuple:
        size = struct.calcsize(fmt)
        self._need(size)
        values = struct.unpack_from(fmt, self._data, self._offset)
        self._offset += size
        return values

    def read_bytes(self, size: int) -> bytes:
        self._need(size)
        chunk = self._data[self._offset:self._offset + size]
        self._offset += size
        return chunk


def _block_order():
    return itertools.product(range(CHUNK_HEIGHT), range(CHUNK_WIDTH), range(CHUNK_WIDTH))


def save_chunk(world_path: str | os.PathLike[str], chunk: Chunk) -> None:
    """Write id and metadata of every block, in y, x, z order."""
    data = bytearray()
    for y, x, z in _block_order():
        block = chunk.get_block(x, y, z)
        data.append(block.id)
        data.append(block.metadata)
    Path(chunk_path(world_path, *chunk.position)).write_bytes(data)


def load_chunk(world_path: str | os.PathLike[str], chunk: Chunk) -> None:
    """Fill ``chunk`` from its save file; raises ValueError if the file is too short."""
    data = Path(chunk_path(world_path, *chunk.position)).read_bytes()
    if len(data) < _CHUNK_BYTES:
        raise ValueError("truncated chunk data")
    pairs = zip(data[0:_CHUNK_BYTES:2], data[1:_CHUNK_BYTES:2])
    for (y, x, z), (block_id, metadata) in zip(_block_order(), pairs):
        chunk.set_block(x, y, z, Block(block_id, metadata))


def save_player_data(world_path: str | os.PathLike[str], player: Player) -> None:
    """Write position, selected slot, health and every inventory slot."""
    pos = player.position
    out = bytearray(
        struct.pack(
            _PLAYER_HEADER,
            pos.x, pos.y, pos.z,
            player.selected_slot,
            player.health,
            len(player.inventory),
        )
    )
    for slot in range(len(player.inventory)):
        stack = player.inventory.get_stack(slot)
        out += struct.pack(_SLOT, stack.item_id, stack.count, stack.metadata)
    Path(player_path(world_path)).write_bytes(out)


def load_player_data(world_path: str | os.PathLike[str], player: Player) -> None:
    """Restore the player's position, slot, health and inventory from its save file."""
    reader = _Reader(Path(player_path(world_path)).read_bytes(), "player")
    x, y, z, selected, health, slot_count = reader.read(_PLAYER_HEADER)
    player.position = Vec3(x, y, z)
    player.selected_slot = selected
    player.health = health
    for slot in range(min(max(0, slot_count), len(player.inventory))):
        item_id, count, metadata = reader.read(_SLOT)
        player.inventory.set_stack(slot, ItemStack(item_id, count, metadata))


def save_entities(world_path: str | os.PathLike[str], entities: EntityManager) -> None:
    """Write every live mob and dropped item."""
    saved = [e for e in entities if not e.removed and isinstance(e, (Mob, ItemEntity))]
    out = bytearray(struct.pack("<i", len(saved)))
    for entity in saved:
        pos = entity.position
        if isinstance(entity, Mob):
            name = entity.type.encode("utf-8")
            out += struct.pack("<B3ffI", MOB_RECORD, pos.x, pos.y, pos.z, entity.health, len(name))
            out += name
        else:
            stack = entity.stack
            out += struct.pack(
                "<B3fHii", ITEM_RECORD, pos.x, pos.y, pos.z,
                stack.item_id, stack.count, stack.metadata,
            )
    Path(entities_path(world_path)).write_bytes(out)


def load_entities(world_path: str | os.PathLike[str], entities: EntityManager) -> None:
    """Add the saved mobs and dropped items to ``entities``."""
    reader = _Reader(Path(entities_path(world_path)).read_bytes(), "entity")
    (count,) = reader.read("<i")
    for _ in range(max(0, count)):
        (record,) = reader.read("<B")
        if record == MOB_RECORD:
            x, y, z, health, length = reader.read("<3ffI")
            mob = Mob(Vec3(x, y, z), reader.read_bytes(length).decode("utf-8"))
            mob.health = health
            entities.add(mob)
        elif record == ITEM_RECORD:
            x, y, z, item_id, stack_count, metadata = reader.read("<3fHii")
            entities.add(ItemEntity(Vec3(x, y, z), ItemStack(item_id, stack_count, metadata)))