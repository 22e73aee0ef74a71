"""Loads, generates, meshes and unloads chunks around the player."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol

from voxelcraft.block import BlockStateRegistry
from voxelcraft.chunk import CHUNK_HEIGHT, CHUNK_WIDTH, Chunk
from voxelcraft.chunk_mesh import ChunkMesh
from voxelcraft.geometry import Vec3
from voxelcraft.texture_atlas import TextureInfo
from voxelcraft.world import World

ChunkPos = tuple[int, int]

MESH_BUDGET = 1
"""Number of chunk meshes rebuilt per update."""


class ChunkGenerator(Protocol):
    def generate_chunk(self, chunk: Chunk) -> None: ...


class TextureLookup(Protocol):
    def texture_info(self, name: str) -> TextureInfo: ...


class BoxCuller(Protocol):
    def is_box_in_frustum(self, minimum: Vec3, maximum: Vec3) -> bool: ...


def _bounds(pos: ChunkPos) -> tuple[Vec3, Vec3]:
    cx, cz = pos
    minimum = Vec3(float(cx * CHUNK_WIDTH), 0.0, float(cz * CHUNK_WIDTH))
    maximum = Vec3(float((cx + 1) * CHUNK_WIDTH), float(CHUNK_HEIGHT), float((cz + 1) * CHUNK_WIDTH))
    return minimum, maximum


class ChunkProvider:
    """Keeps a square of chunks around the player loaded and meshed."""

    def __init__(
        self,
        world: World,
        generator: ChunkGenerator,
        atlas: TextureLookup,
        states: BlockStateRegistry,
    ) -> None:
        self._world = world
        self._generator = generator
        self._atlas = atlas
        self._states = states
        self._meshes: dict[ChunkPos, ChunkMesh] = {}
        self._queue: deque[ChunkPos] = deque()

    @property
    def meshes(self) -> Mapping[ChunkPos, ChunkMesh]:
        """Read-only view of the meshes keyed by chunk position."""
        return MappingProxyType(self._meshes)

    @property
    def pending(self) -> tuple[ChunkPos, ...]:
        """Chunk positions waiting for their mesh to be rebuilt, in order."""
        return tuple(self._queue)

    def update(self, player_pos: Vec3, render_distance: int) -> None:
        """Load chunks within ``render_distance`` of the player, drop far ones, rebuild one mesh."""
        px = math.floor(player_pos.x / CHUNK_WIDTH)
        pz = math.floor(player_pos.z / CHUNK_WIDTH)
        self._load_around(px, pz, render_distance)
        self._unload_far(px, pz, render_distance)
        self._process_queue(MESH_BUDGET)

    def visible_meshes(self, frustum: BoxCuller) -> list[tuple[Vec3, ChunkMesh]]:
        """Meshes whose chunk box may be visible, with the chunk's world origin, in position order."""
        visible = []
        for pos in sorted(self._meshes):
            minimum, maximum = _bounds(pos)
            if frustum.is_box_in_frustum(minimum, maximum):
                visible.append((minimum, self._meshes[pos]))
        return visible

    def _load_around(self, center_x: int, center_z: int, distance: int) -> None:
        chunks = self._world.chunks
        for x in range(center_x - distance, center_x + distance + 1):
            for z in range(center_z - distance, center_z + distance + 1):
                pos = (x, z)
                if pos not in chunks:
                    chunk = self._world.load_chunk(x, z)
                    self._generator.generate_chunk(chunk)
                    self._enqueue(pos)

                if pos not in self._meshes:
                    self._meshes[pos] = ChunkMesh()
                    self._enqueue(pos)
                elif chunks[pos].dirty:
                    self._enqueue(pos)

    def _unload_far(self, center_x: int, center_z: int, distance: int) -> None:
        limit = distance + 1
        far = [
            pos for pos in self._meshes
            if abs(pos[0] - center_x) > limit or abs(pos[1] - center_z) > limit
        ]
        for pos in far:
            self._world.unload_chunk(*pos)
            del self._meshes[pos]

    def _enqueue(self, pos: ChunkPos) -> None:
        if pos not in self._queue:
            self._queue.append(pos)

    def _process_queue(self, budget: int) -> None:
        chunks = self._world.chunks
        while budget > 0 and self._queue:
            pos = self._queue.popleft()
            chunk = chunks.get(pos)
            mesh = self._meshes.get(pos)
            if chunk is not None and mesh is not None:
                mesh.generate(chunk, self._atlas, self._states)
                chunk.dirty = False
            budget -= 1