"""A 16x256x16 column of blocks."""

from __future__ import annotations

from voxelcraft.block import Block, Blocks

CHUNK_WIDTH = 16
CHUNK_HEIGHT = 256
CHUNK_SIZE = CHUNK_WIDTH * CHUNK_WIDTH * CHUNK_HEIGHT


def _in_bounds(x: int, y: int, z: int) -> bool:
    return 0 <= x < CHUNK_WIDTH and 0 <= y < CHUNK_HEIGHT and 0 <= z < CHUNK_WIDTH


def _index(x: int, y: int, z: int) -> int:
    return x + y * CHUNK_WIDTH + z * CHUNK_WIDTH * CHUNK_HEIGHT


class Chunk:
    """Block storage for one chunk, addressed by local coordinates."""

    def __init__(self, x: int, z: int) -> None:
        self._position = (x, z)
        self._ids = bytearray(CHUNK_SIZE)
        self._metadata = bytearray(CHUNK_SIZE)
        self._light = bytearray(CHUNK_SIZE)
        self.dirty = True

    @property
    def position(self) -> tuple[int, int]:
        """Chunk coordinates (not world coordinates)."""
        return self._position

    def set_block(self, x: int, y: int, z: int, block: Block) -> None:
        """Store a block; coordinates outside the chunk are ignored."""
        if not _in_bounds(x, y, z):
            return
        i = _index(x, y, z)
        self._ids[i] = block.id
        self._metadata[i] = block.metadata
        self._light[i] = block.light
        self.dirty = True

    def get_block(self, x: int, y: int, z: int) -> Block:
        """Return a copy of the block; air outside the chunk."""
        if not _in_bounds(x, y, z):
            return Block(Blocks.AIR)
        i = _index(x, y, z)
        return Block(self._ids[i], self._metadata[i], self._light[i])

    def set_light(self, x: int, y: int, z: int, sky: int, block: int) -> None:
        """Set both light nibbles of a block without touching its type."""
        if not _in_bounds(x, y, z):
            return
        self._light[_index(x, y, z)] = ((sky & 0x0F) << 4) | (block & 0x0F)