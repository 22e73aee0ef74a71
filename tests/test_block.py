import pytest

from voxelcraft.block import (
    Block,
    Blocks,
    BlockState,
    BlockStateRegistry,
    Face,
    get_block_light,
    get_sky_light,
    is_block_opaque,
    is_block_transparent,
    set_block_light,
    set_sky_light,
)


def test_sky_and_block_light_are_independent():
    block = Block(Blocks.STONE)
    set_sky_light(block, 12)
    set_block_light(block, 3)
    assert get_sky_light(block) == 12
    assert get_block_light(block) == 3
    set_block_light(block, 9)
    assert get_sky_light(block) == 12
    assert get_block_light(block) == 9


def test_light_values_are_masked_to_four_bits():
    block = Block(Blocks.DIRT)
    set_sky_light(block, 0x1F)
    assert get_sky_light(block) == 15
    assert get_block_light(block) == 0


def test_new_block_has_no_light():
    block = Block(Blocks.GRASS, 2)
    assert block.light == 0
    assert block.metadata == 2
    assert block.id == Blocks.GRASS


def test_default_block_is_air():
    assert Block().id == Blocks.AIR


@pytest.mark.parametrize("block_id", [Blocks.AIR, Blocks.WATER, Blocks.LEAVES])
def test_transparent_blocks(block_id):
    assert is_block_transparent(block_id)
    assert not is_block_opaque(block_id)


@pytest.mark.parametrize("block_id", [Blocks.STONE, Blocks.LOG, Blocks.LAVA, Blocks.SAND])
def test_opaque_blocks(block_id):
    assert is_block_opaque(block_id)
    assert not is_block_transparent(block_id)


def test_registry_lookup():
    registry = BlockStateRegistry()
    state = BlockState("grass", face_textures={Face.UP: "grass_top", Face.DOWN: "dirt"})
    registry.register(Blocks.GRASS, state)
    assert registry.get(Blocks.GRASS) is state
    assert registry.get(Blocks.GRASS).face_textures[Face.UP] == "grass_top"
    assert registry.get(Blocks.STONE) is None


def test_registry_replaces_state():
    registry = BlockStateRegistry()
    registry.register(Blocks.LOG, BlockState("log"))
    registry.register(Blocks.LOG, BlockState("oak"))
    assert registry.get(Blocks.LOG).name == "oak"