"""Builds triangle lists for the visible faces of a chunk's blocks."""

from __future__ import annotations

import itertools
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from voxelcraft.block import BlockStateRegistry, Blocks, Face, get_block_light, get_sky_light
from voxelcraft.chunk import CHUNK_HEIGHT, CHUNK_WIDTH, Chunk
from voxelcraft.texture_atlas import TextureInfo

_MAX_LIGHT = 15.0
_TRANSLUCENT = frozenset({Blocks.WATER, Blocks.LEAVES})

# Per face: six corners as (dx, dy, dz, u index, v index); index 0 is the min UV, 1 the max.
_FACE_CORNERS: dict[Face, tuple[tuple[int, int, int, int, int], ...]] = {
    Face.DOWN: ((0, 0, 0, 0, 0), (1, 0, 0, 1, 0), (1, 0, 1, 1, 1),
                (0, 0, 0, 0, 0), (1, 0, 1, 1, 1), (0, 0, 1, 0, 1)),
    Face.UP: ((0, 1, 0, 0, 0), (0, 1, 1, 0, 1), (1, 1, 1, 1, 1),
              (0, 1, 0, 0, 0), (1, 1, 1, 1, 1), (1, 1, 0, 1, 0)),
    Face.NORTH: ((0, 0, 0, 1, 0), (0, 1, 0, 1, 1), (1, 1, 0, 0, 1),
                 (0, 0, 0, 1, 0), (1, 1, 0, 0, 1), (1, 0, 0, 0, 0)),
    Face.SOUTH: ((0, 0, 1, 0, 0), (1, 0, 1, 1, 0), (1, 1, 1, 1, 1),
                 (0, 0, 1, 0, 0), (1, 1, 1, 1, 1), (0, 1, 1, 0, 1)),
    Face.WEST: ((0, 0, 0, 0, 0), (0, 0, 1, 1, 0), (0, 1, 1, 1, 1),
                (0, 0, 0, 0, 0), (0, 1, 1, 1, 1), (0, 1, 0, 0, 1)),
    Face.EAST: ((1, 0, 0, 1, 0), (1, 1, 0, 1, 1), (1, 1, 1, 0, 1),
                (1, 0, 0, 1, 0), (1, 1, 1, 0, 1), (1, 0, 1, 0, 0)),
}

_NEIGHBOUR = {
    Face.DOWN: (0, -1, 0),
    Face.UP: (0, 1, 0),
    Face.NORTH: (0, 0, -1),
    Face.SOUTH: (0, 0, 1),
    Face.WEST: (-1, 0, 0),
    Face.EAST: (1, 0, 0),
}


class _TextureLookup(Protocol):
    def texture_info(self, name: str) -> TextureInfo: ...


@dataclass(frozen=True)
class ChunkVertex:
    """One mesh vertex: position in chunk space, texture coordinate, ambient occlusion and light."""

    position: tuple[float, float, float]
    tex_coord: tuple[float, float]
    ao: float
    light: float


def face_vertices(pos: Iterable[float], face: Face | int, tex: TextureInfo, light: float) -> list[ChunkVertex]:
    """The two triangles of one face of the unit cube at ``pos``."""
    x, y, z = (float(c) for c in pos)
    us = (tex.uv_min[0], tex.uv_max[0])
    vs = (tex.uv_min[1], tex.uv_max[1])
    return [
        ChunkVertex((x + dx, y + dy, z + dz), (us[u], vs[v]), 1.0, light)
        for dx, dy, dz, u, v in _FACE_CORNERS[Face(face)]
    ]


class ChunkMesh:
    """Opaque and translucent vertex lists for one chunk."""

    def __init__(self) -> None:
        self.vertices: list[ChunkVertex] = []
        self.transparent_vertices: list[ChunkVertex] = []

    @property
    def vertex_count(self) -> int:
        """Number of opaque vertices."""
        return len(self.vertices)

    @property
    def transparent_vertex_count(self) -> int:
        """Number of translucent vertices."""
        return len(self.transparent_vertices)

    def generate(self, chunk: Chunk, atlas: _TextureLookup, states: BlockStateRegistry) -> None:
        """Rebuild both vertex lists; a face is emitted when the neighbour inside the chunk is air
        or lies outside the chunk. Blocks without a registered state are skipped."""
        opaque: list[ChunkVertex] = []
        translucent: list[ChunkVertex] = []

        for y, x, z in itertools.product(range(CHUNK_HEIGHT), range(CHUNK_WIDTH), range(CHUNK_WIDTH)):
            block = chunk.get_block(x, y, z)
            if block.id == Blocks.AIR:
                continue
            state = states.get(block.id)
            if state is None:
                continue
            target = translucent if block.id in _TRANSLUCENT else opaque
            light = max(get_sky_light(block), get_block_light(block)) / _MAX_LIGHT
            for face in Face:
                dx, dy, dz = _NEIGHBOUR[face]
                # Out-of-chunk lookups return air, so chunk borders are always drawn.
                if chunk.get_block(x + dx, y + dy, z + dz).id != Blocks.AIR:
                    continue
                info = atlas.texture_info(state.face_textures[face])
                target.extend(face_vertices((x, y, z), face, info, light))

        self.vertices = opaque
        self.transparent_vertices = translucent