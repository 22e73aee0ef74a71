# voxelcraft

The simulation core of a block-building sandbox world. It has no window and
no graphics code. Meshes and HUD layouts come out as plain data that any
renderer can draw.

## Modules

- `voxelcraft.block` has block ids (`Blocks`), cube faces (`Face`) and
  `Block` with packed sky and block light (`get_sky_light`,
  `set_sky_light`, `get_block_light`, `set_block_light`). It also has the
  transparency tests and `BlockState` / `BlockStateRegistry`.
- `voxelcraft.chunk` has `Chunk`, a 16 × 256 × 16 column of blocks. Reads
  outside the chunk return air. Writes outside it are ignored.
- `voxelcraft.lighting` has `recalculate_skylight`, `recalculate_blocklight`
  and `recalculate_all`. Sky light falls straight down until it reaches the
  first opaque block. Lava gives full block light.
- `voxelcraft.world` has `World`, a set of chunks addressed by world
  coordinates, which may be negative. It also does simple liquid flow.
- `voxelcraft.geometry` has `Vec3` and `AABB`.
- `voxelcraft.raycast` has `raycast` and `RaycastResult`. It walks the grid
  to the first non-air block and reports that block, the face normal the
  ray entered through and the distance.
- `voxelcraft.items` has `Item`, `ItemRegistry`, the shared `ITEM_REGISTRY`,
  `ItemStack` and `Inventory`.
- `voxelcraft.entity` has `Entity`, `Mob`, `ItemEntity` and `EntityManager`.
  Each entity has gravity and a simple ground check. Mobs pick a new random
  walking direction every two seconds.
- `voxelcraft.camera` has `Camera` with yaw and pitch, `CameraMovement`,
  `look_at` and `perspective`. Both functions return row-major 4 × 4 tuples.
- `voxelcraft.player` has `Player`, which has a camera, a 36-slot inventory,
  input driven by a set of held `Key` values, and footstep sounds passed to
  a callback.
- `voxelcraft.persistence` saves and loads chunks, player data and entities
  as little-endian binary files.
- `voxelcraft.frustum` has `Plane` and `Frustum`. It extracts the frustum
  planes from a view-projection matrix and culls boxes against them.
- `voxelcraft.block_model` reads JSON block models into `BlockModel`,
  `ModelElement` and `ModelFace`.
- `voxelcraft.texture_atlas` has `TextureAtlas`. It packs texture files into
  one RGBA Pillow image and records each texture's UV rectangle.
- `voxelcraft.chunk_mesh` has `ChunkMesh` and `face_vertices`. It builds
  opaque and translucent triangle lists for the visible faces of a chunk.
- `voxelcraft.chunk_provider` has `ChunkProvider`. It keeps a square of
  chunks around the player loaded, generated and meshed. Only one mesh is
  rebuilt per update, and chunks that are far away are unloaded.
- `voxelcraft.hud` lays out the crosshair, the hotbar, the debug lines and
  the inventory screen as `Rect` and `TextItem` values on an 800 × 600
  screen.
- `voxelcraft.game` has `Game`, which ties these together. Its methods
  break blocks and hit mobs (`attack`), place stone (`place`), turn a log
  into four planks (`craft`), pick up dropped items (`collect_items`),
  advance time (`tick`), and save and load (`save`, `load`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short tour

```python
from voxelcraft.block import Block, Blocks
from voxelcraft.geometry import Vec3
from voxelcraft.raycast import raycast
from voxelcraft.world import World

world = World()
world.load_chunk(0, 0)
world.set_block(3, 64, 3, Block(Blocks.STONE))

hit = raycast(Vec3(3.5, 70.0, 3.5), Vec3(0.0, -1.0, 0.0), 10.0, world)
# hit.hit is True and hit.block_pos == (3, 64, 3)
```

A block is only stored when its chunk is loaded. Reads from unloaded chunks
return air, and writes to unloaded chunks are ignored. Each
`World.set_block` recalculates the lighting of the chunk it touches.
`World.update_liquids` moves water one step. Water falls into air below
it. If it rests on something that is not water, it spreads sideways into
air.

An inventory first merges a stack into matching slots, up to the item's
maximum stack size, and then puts what is left into the first empty slot:

```python
from voxelcraft.items import Inventory, ItemStack

inventory = Inventory(36)
inventory.add_item(ItemStack(17, 3))
inventory.get_stack(0)   # three logs in the first slot
inventory.remove_stack(0, 3)
```

Merging looks up the item in `ITEM_REGISTRY` and raises `LookupError` if
the item is not registered. `voxelcraft.game.register_items` registers the
block items.

Save files live in a world directory. They are `chunk_<x>_<z>.dat`,
`player.dat` and `entities.dat`. A missing file raises `OSError`, and a
truncated one raises `ValueError`. `Game.save` creates the directory and
writes every loaded chunk, the player and the entities. `Game.load` restores
the player and replaces the entities. It does not read chunks back. Use
`persistence.load_chunk` for that.

## What this package does not do

- It has no window, rendering, audio or input device handling.
  `Game.held_keys` and `Game.on_sound` are the hooks through which a
  front end supplies keys and plays sounds.
- It has no terrain generator. `Game` and `ChunkProvider` take any object
  with a `generate_chunk(chunk)` method.
- It has no command-line program.