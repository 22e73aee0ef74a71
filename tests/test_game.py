import os

import pytest

from voxelcraft.block import Block, Blocks, BlockStateRegistry, Face
from voxelcraft.entity import ItemEntity, Mob
from voxelcraft.game import (
    Game,
    drop_item_for,
    ray_intersects_aabb,
    register_blocks,
    register_items,
)
from voxelcraft.geometry import AABB, Vec3
from voxelcraft.items import ItemRegistry, ItemStack
from voxelcraft.persistence import chunk_path
from voxelcraft.player import Key
from voxelcraft.world import World


class _Recorder:
    def __init__(self):
        self.generated = []

    def generate_chunk(self, chunk):
        self.generated.append(chunk.position)


def _game():
    return Game(World(), _Recorder())


def _mobs(game):
    return [e for e in game.entities if isinstance(e, Mob)]


def test_register_blocks_textures():
    registry = BlockStateRegistry()
    register_blocks(registry)
    grass = registry.get(Blocks.GRASS)
    assert grass.name == "grass"
    assert grass.face_textures[Face.UP] == "grass_top"
    assert grass.face_textures[Face.DOWN] == "dirt"
    assert grass.face_textures[Face.EAST] == "grass_side"
    log = registry.get(Blocks.LOG)
    assert log.face_textures[Face.DOWN] == "log_top"
    assert set(registry.get(Blocks.STONE).face_textures.values()) == {"stone"}
    assert registry.get(Blocks.PLANKS) is None


def test_register_items():
    registry = ItemRegistry()
    register_items(registry)
    planks = registry.get(Blocks.PLANKS)
    assert planks.unlocalized_name == "planks"
    assert planks.max_stack_size == 64
    assert registry.get(Blocks.WATER) is None


@pytest.mark.parametrize(
    "block_id, expected",
    [
        (Blocks.GRASS, Blocks.DIRT),
        (Blocks.STONE, Blocks.STONE),
        (Blocks.DIRT, Blocks.DIRT),
        (Blocks.LOG, Blocks.LOG),
        (Blocks.LEAVES, Blocks.LEAVES),
        (Blocks.BEDROCK, None),
        (Blocks.AIR, None),
    ],
)
def test_drop_item_for(block_id, expected):
    assert drop_item_for(block_id) == expected


def test_ray_hits_box_ahead():
    box = AABB(Vec3(2.0, -1.0, -1.0), Vec3(3.0, 1.0, 1.0))
    assert ray_intersects_aabb(Vec3(), Vec3(1.0, 0.0, 0.0), box, 5.0) == 2.0


def test_ray_misses_box_behind_and_beyond_reach():
    box = AABB(Vec3(-3.0, -1.0, -1.0), Vec3(-2.0, 1.0, 1.0))
    assert ray_intersects_aabb(Vec3(), Vec3(1.0, 0.0, 0.0), box, 5.0) is None
    far = AABB(Vec3(8.0, -1.0, -1.0), Vec3(9.0, 1.0, 1.0))
    assert ray_intersects_aabb(Vec3(), Vec3(1.0, 0.0, 0.0), far, 5.0) is None


def test_ray_parallel_outside_slab_misses():
    box = AABB(Vec3(2.0, 3.0, -1.0), Vec3(3.0, 4.0, 1.0))
    assert ray_intersects_aabb(Vec3(), Vec3(1.0, 0.0, 0.0), box, 5.0) is None


def test_initial_state():
    game = _game()
    assert game.player.position == Vec3(0.0, 80.0, 0.0)
    mobs = _mobs(game)
    assert len(mobs) == 1
    assert mobs[0].type == "zombie"
    assert mobs[0].position == Vec3(5.0, 80.0, 5.0)
    assert game.inventory_open is False


def test_toggle_inventory():
    game = _game()
    assert game.toggle_inventory() is True
    assert game.toggle_inventory() is False


def test_scroll_wraps():
    game = _game()
    game.scroll(1.0)
    assert game.player.selected_slot == 8
    game.scroll(-1.0)
    assert game.player.selected_slot == 0


def test_scroll_ignored_while_inventory_open():
    game = _game()
    game.toggle_inventory()
    game.scroll(1.0)
    assert game.player.selected_slot == 0


def test_craft_log_into_planks():
    game = _game()
    game.player.inventory.set_stack(0, ItemStack(Blocks.LOG, 2, 0))
    game.toggle_inventory()
    assert game.craft() is True
    assert game.player.inventory.get_stack(0).count == 1
    assert game.player.inventory.get_stack(1) == ItemStack(Blocks.PLANKS, 4, 0)


def test_craft_needs_open_inventory_and_log():
    game = _game()
    game.player.inventory.set_stack(0, ItemStack(Blocks.LOG, 2, 0))
    assert game.craft() is False
    assert game.player.inventory.get_stack(0).count == 2
    game.player.inventory.set_stack(0, ItemStack(Blocks.DIRT, 2, 0))
    game.toggle_inventory()
    assert game.craft() is False
    assert game.player.inventory.get_stack(1).is_empty()


def test_place_against_block():
    game = _game()
    sounds = []
    game.on_sound = sounds.append
    game.world.load_chunk(0, -1).set_block(0, 81, 13, Block(Blocks.DIRT))
    assert game.place() is True
    assert game.world.get_block(0, 81, -2).id == Blocks.STONE
    assert sounds == ["place"]


def test_place_refused_inside_player():
    game = _game()
    sounds = []
    game.on_sound = sounds.append
    game.world.load_chunk(0, -1).set_block(0, 81, 15, Block(Blocks.DIRT))
    assert game.place() is False
    assert sounds == []


def test_attack_breaks_block_and_drops_item():
    game = _game()
    sounds = []
    game.on_sound = sounds.append
    game.world.load_chunk(0, -1).set_block(0, 81, 13, Block(Blocks.GRASS))
    assert game.attack() is True
    assert game.world.get_block(0, 81, -3).id == Blocks.AIR
    drops = [e for e in game.entities if isinstance(e, ItemEntity)]
    assert len(drops) == 1
    assert drops[0].stack == ItemStack(Blocks.DIRT, 1, 0)
    assert drops[0].position == Vec3(0.5, 81.5, -2.5)
    assert sounds == ["break"]


def test_attack_ignored_with_inventory_open():
    game = _game()
    game.world.load_chunk(0, -1).set_block(0, 81, 13, Block(Blocks.DIRT))
    game.toggle_inventory()
    assert game.attack() is False
    assert game.world.get_block(0, 81, -3).id == Blocks.DIRT


def test_attack_hurts_and_kills_mob():
    game = _game()
    mob = _mobs(game)[0]
    mob.position = Vec3(0.0, 80.0, -2.0)
    start = mob.health
    assert game.attack() is True
    assert mob.health < start
    assert mob.removed is False
    for _ in range(4):
        game.attack()
    assert mob.removed is True


def test_collect_items():
    game = _game()
    item = ItemEntity(Vec3(0.0, 80.5, 0.0), ItemStack(Blocks.DIRT, 3, 0))
    game.entities.add(item)
    game.collect_items()
    assert game.player.inventory.get_stack(0) == ItemStack(Blocks.DIRT, 3, 0)
    assert item.removed is True


def test_collect_ignores_distant_items():
    game = _game()
    item = ItemEntity(Vec3(20.0, 80.0, 20.0), ItemStack(Blocks.DIRT, 1, 0))
    game.entities.add(item)
    game.collect_items()
    assert game.player.inventory.get_stack(0).is_empty()
    assert item.removed is False


def test_save_and_load_round_trip(tmp_path):
    game = _game()
    game.world.load_chunk(0, 0)
    game.player.position = Vec3(1.5, 70.0, -2.25)
    game.player.selected_slot = 3
    game.player.inventory.set_stack(0, ItemStack(Blocks.DIRT, 5, 0))
    world_path = tmp_path / "world1"
    game.save(world_path)
    assert os.path.exists(chunk_path(world_path, 0, 0))

    game.player.position = Vec3(9.0, 9.0, 9.0)
    game.player.selected_slot = 0
    game.player.inventory.set_stack(0, ItemStack(0, 0, 0))
    game.entities.add(Mob(Vec3(1.0, 1.0, 1.0), "zombie"))

    game.load(world_path)
    assert game.player.position == Vec3(1.5, 70.0, -2.25)
    assert game.player.selected_slot == 3
    assert game.player.inventory.get_stack(0) == ItemStack(Blocks.DIRT, 5, 0)
    mobs = _mobs(game)
    assert len(game.entities) == 1
    assert mobs[0].position == Vec3(5.0, 80.0, 5.0)


def test_load_missing_world_raises(tmp_path):
    game = _game()
    with pytest.raises(FileNotFoundError):
        game.load(tmp_path / "missing")


def test_tick_loads_and_meshes_chunks():
    game = _game()
    game.render_distance = 0
    game.tick(0.01)
    assert game.generator.generated == [(0, 0)]
    assert set(game.chunk_provider.meshes) == {(0, 0)}
    assert game.chunk_provider.pending == ()


def test_tick_applies_held_keys():
    game = _game()
    game.render_distance = 0
    game.held_keys = {Key.W}
    game.tick(0.01)
    assert game.player.velocity.z < 0


def test_tick_spawns_mob_after_interval():
    game = _game()
    game.render_distance = 0
    game.tick(15.0)
    mobs = _mobs(game)
    assert len(mobs) == 2
    assert mobs[1].position == game.player.position + Vec3(6.0, 0.0, 6.0)
    assert game.fps == 1