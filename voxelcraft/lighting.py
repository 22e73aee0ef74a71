"""Per-chunk sky and block light computation."""

from __future__ import annotations

from voxelcraft.block import Blocks, get_block_light, get_sky_light, is_block_opaque
from voxelcraft.chunk import CHUNK_HEIGHT, CHUNK_WIDTH, Chunk

_MAX_LIGHT = 15


def recalculate_skylight(chunk: Chunk) -> None:
    """Light every column from the top down until the first opaque block."""
    for x in range(CHUNK_WIDTH):
        for z in range(CHUNK_WIDTH):
            sky = _MAX_LIGHT
            for y in reversed(range(CHUNK_HEIGHT)):
                block = chunk.get_block(x, y, z)
                if sky > 0 and is_block_opaque(block.id):
                    sky = 0
                chunk.set_light(x, y, z, sky, get_block_light(block))


def recalculate_blocklight(chunk: Chunk) -> None:
    """Give lava full block light and every other block none."""
    for x in range(CHUNK_WIDTH):
        for z in range(CHUNK_WIDTH):
            for y in range(CHUNK_HEIGHT):
                block = chunk.get_block(x, y, z)
                emitted = _MAX_LIGHT if block.id == Blocks.LAVA else 0
                chunk.set_light(x, y, z, get_sky_light(block), emitted)


def recalculate_all(chunk: Chunk) -> None:
    """Recompute block light, then sky light."""
    recalculate_blocklight(chunk)
    recalculate_skylight(chunk)