import pytest

from voxelcraft.block import Block, Blocks, get_block_light, get_sky_light, set_sky_light
from voxelcraft.chunk import CHUNK_HEIGHT, CHUNK_WIDTH, Chunk


def test_new_chunk_is_air_and_dirty():
    chunk = Chunk(3, -2)
    assert chunk.position == (3, -2)
    assert chunk.dirty is True
    assert chunk.get_block(0, 0, 0).id == Blocks.AIR


def test_set_get_round_trip_at_far_corner():
    chunk = Chunk(0, 0)
    top = CHUNK_HEIGHT - 1
    edge = CHUNK_WIDTH - 1
    chunk.set_block(edge, top, edge, Block(Blocks.STONE, 4))
    block = chunk.get_block(edge, top, edge)
    assert block.id == Blocks.STONE
    assert block.metadata == 4
    assert chunk.get_block(edge, top - 1, edge).id == Blocks.AIR


def test_get_block_returns_a_copy():
    chunk = Chunk(0, 0)
    block = chunk.get_block(1, 1, 1)
    block.id = Blocks.STONE
    assert chunk.get_block(1, 1, 1).id == Blocks.AIR


@pytest.mark.parametrize(
    "pos",
    [(-1, 0, 0), (CHUNK_WIDTH, 0, 0), (0, CHUNK_HEIGHT, 0), (0, -1, 0), (0, 0, CHUNK_WIDTH)],
)
def test_out_of_bounds_is_ignored(pos):
    chunk = Chunk(0, 0)
    chunk.dirty = False
    chunk.set_block(*pos, Block(Blocks.STONE))
    assert chunk.get_block(*pos).id == Blocks.AIR
    assert chunk.dirty is False


def test_set_block_marks_dirty():
    chunk = Chunk(0, 0)
    chunk.dirty = False
    chunk.set_block(2, 3, 4, Block(Blocks.DIRT))
    assert chunk.dirty is True


def test_set_light_keeps_block_type():
    chunk = Chunk(0, 0)
    chunk.set_block(1, 2, 3, Block(Blocks.LOG))
    chunk.dirty = False
    chunk.set_light(1, 2, 3, 14, 7)
    block = chunk.get_block(1, 2, 3)
    assert block.id == Blocks.LOG
    assert get_sky_light(block) == 14
    assert get_block_light(block) == 7
    assert chunk.dirty is False


def test_set_block_stores_light_of_given_block():
    chunk = Chunk(0, 0)
    block = Block(Blocks.STONE)
    set_sky_light(block, 9)
    chunk.set_block(5, 5, 5, block)
    assert get_sky_light(chunk.get_block(5, 5, 5)) == 9