from voxelcraft.block import Block, Blocks, get_block_light, get_sky_light
from voxelcraft.chunk import Chunk
from voxelcraft.lighting import recalculate_all, recalculate_blocklight, recalculate_skylight


def test_skylight_stops_at_first_opaque_block():
    chunk = Chunk(0, 0)
    chunk.set_block(0, 10, 0, Block(Blocks.STONE))
    recalculate_skylight(chunk)
    assert get_sky_light(chunk.get_block(0, 11, 0)) == 15
    assert get_sky_light(chunk.get_block(0, 10, 0)) == 0
    assert get_sky_light(chunk.get_block(0, 5, 0)) == 0
    assert get_sky_light(chunk.get_block(1, 5, 1)) == 15


def test_transparent_blocks_let_skylight_through():
    chunk = Chunk(0, 0)
    chunk.set_block(2, 20, 2, Block(Blocks.WATER))
    chunk.set_block(2, 19, 2, Block(Blocks.LEAVES))
    recalculate_skylight(chunk)
    assert get_sky_light(chunk.get_block(2, 0, 2)) == 15
    assert get_sky_light(chunk.get_block(2, 20, 2)) == 15


def test_lava_emits_block_light():
    chunk = Chunk(0, 0)
    chunk.set_block(4, 4, 4, Block(Blocks.LAVA))
    recalculate_blocklight(chunk)
    assert get_block_light(chunk.get_block(4, 4, 4)) == 15
    assert get_block_light(chunk.get_block(4, 5, 4)) == 0


def test_blocklight_keeps_sky_light():
    chunk = Chunk(0, 0)
    chunk.set_light(3, 3, 3, 7, 12)
    recalculate_blocklight(chunk)
    block = chunk.get_block(3, 3, 3)
    assert get_sky_light(block) == 7
    assert get_block_light(block) == 0


def test_recalculate_all_combines_both():
    chunk = Chunk(0, 0)
    chunk.set_block(0, 50, 0, Block(Blocks.STONE))
    chunk.set_block(0, 10, 0, Block(Blocks.LAVA))
    recalculate_all(chunk)
    lava = chunk.get_block(0, 10, 0)
    assert get_block_light(lava) == 15
    assert get_sky_light(lava) == 0
    assert get_sky_light(chunk.get_block(0, 51, 0)) == 15