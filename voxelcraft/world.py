"""The loaded world: a set of chunks addressed by world coordinates."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from voxelcraft.block import Block, Blocks
from voxelcraft.chunk import CHUNK_HEIGHT, CHUNK_WIDTH, Chunk
from voxelcraft.lighting import recalculate_all

ChunkPos = tuple[int, int]


def _locate(x: int, z: int) -> tuple[ChunkPos, int, int]:
    return (x // CHUNK_WIDTH, z // CHUNK_WIDTH), x % CHUNK_WIDTH, z % CHUNK_WIDTH


class World:
    """Holds loaded chunks and routes world-coordinate block access to them."""

    def __init__(self) -> None:
        self._chunks: dict[ChunkPos, Chunk] = {}

    @property
    def chunks(self) -> Mapping[ChunkPos, Chunk]:
        """Read-only view of the loaded chunks keyed by chunk position."""
        return MappingProxyType(self._chunks)

    def _place(self, x: int, y: int, z: int, block: Block) -> Chunk | None:
        pos, bx, bz = _locate(x, z)
        chunk = self._chunks.get(pos)
        if chunk is not None:
            chunk.set_block(bx, y, bz, block)
        return chunk

    def set_block(self, x: int, y: int, z: int, block: Block) -> None:
        """Set a block and relight its chunk; ignored if the chunk is not loaded."""
        chunk = self._place(x, y, z, block)
        if chunk is not None:
            recalculate_all(chunk)

    def get_block(self, x: int, y: int, z: int) -> Block:
        """Return the block at world coordinates; air where nothing is loaded."""
        pos, bx, bz = _locate(x, z)
        chunk = self._chunks.get(pos)
        if chunk is None:
            return Block(Blocks.AIR)
        return chunk.get_block(bx, y, bz)

    def load_chunk(self, x: int, z: int) -> Chunk:
        """Create an empty chunk at the position unless one is loaded; return it."""
        pos = (x, z)
        if pos not in self._chunks:
            self._chunks[pos] = Chunk(x, z)
        return self._chunks[pos]

    def unload_chunk(self, x: int, z: int) -> None:
        """Drop the chunk at the position, if loaded."""
        self._chunks.pop((x, z), None)

    def _water_targets(self):
        for (cx, cz), chunk in sorted(self._chunks.items()):
            for y in range(1, CHUNK_HEIGHT):
                for x in range(CHUNK_WIDTH):
                    for z in range(CHUNK_WIDTH):
                        if chunk.get_block(x, y, z).id != Blocks.WATER:
                            continue
                        wx = cx * CHUNK_WIDTH + x
                        wz = cz * CHUNK_WIDTH + z
                        below = self.get_block(wx, y - 1, wz).id
                        if below == Blocks.AIR:
                            yield wx, y - 1, wz
                        elif below != Blocks.WATER:
                            for nx, nz in ((wx + 1, wz), (wx - 1, wz), (wx, wz + 1), (wx, wz - 1)):
                                if self.get_block(nx, y, nz).id == Blocks.AIR:
                                    yield nx, y, nz

    def update_liquids(self) -> None:
        """Advance water by one step: fall into air below, else spread sideways on solid ground."""
        targets = list(self._water_targets())
        touched: dict[ChunkPos, Chunk] = {}
        for x, y, z in targets:
            chunk = self._place(x, y, z, Block(Blocks.WATER))
            if chunk is not None:
                touched[chunk.position] = chunk
        # Lighting depends only on the chunk's contents, so one pass per chunk suffices.
        for chunk in touched.values():
            recalculate_all(chunk)