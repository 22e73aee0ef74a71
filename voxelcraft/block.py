"""Block identifiers, per-block data and the block-state registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Blocks(IntEnum):
    """Numeric identifiers of the known block types."""

    AIR = 0
    STONE = 1
    GRASS = 2
    DIRT = 3
    COBBLESTONE = 4
    PLANKS = 5
    BEDROCK = 7
    WATER = 8
    LAVA = 10
    SAND = 12
    GRAVEL = 13
    LOG = 17
    LEAVES = 18


class Face(IntEnum):
    """The six faces of a cube."""

    DOWN = 0
    UP = 1
    NORTH = 2
    SOUTH = 3
    WEST = 4
    EAST = 5


@dataclass
class Block:
    """A single block: type id, metadata and packed light (sky high nibble, block low nibble)."""

    id: int = Blocks.AIR
    metadata: int = 0
    light: int = 0

    def __post_init__(self) -> None:
        self.id = int(self.id) & 0xFF
        self.metadata = int(self.metadata) & 0xFF
        self.light = int(self.light) & 0xFF


def get_sky_light(block: Block) -> int:
    """Return the sky light level (0-15) of a block."""
    return (block.light >> 4) & 0x0F


def get_block_light(block: Block) -> int:
    """Return the block light level (0-15) of a block."""
    return block.light & 0x0F


def set_sky_light(block: Block, sky: int) -> None:
    """Set the sky light nibble of ``block`` in place."""
    block.light = (block.light & 0x0F) | ((sky & 0x0F) << 4)


def set_block_light(block: Block, value: int) -> None:
    """Set the block light nibble of ``block`` in place."""
    block.light = (block.light & 0xF0) | (value & 0x0F)


_TRANSPARENT = frozenset({Blocks.AIR, Blocks.WATER, Blocks.LEAVES})


def is_block_transparent(block_id: int) -> bool:
    """Whether light and vision pass through blocks of this type."""
    return block_id in _TRANSPARENT


def is_block_opaque(block_id: int) -> bool:
    """Whether blocks of this type stop light."""
    return not is_block_transparent(block_id)


@dataclass
class BlockState:
    """Rendering description of a block type."""

    name: str
    model_path: str = ""
    face_textures: dict[Face, str] = field(default_factory=dict)


class BlockStateRegistry:
    """Maps block ids to their block states."""

    def __init__(self) -> None:
        self._states: dict[int, BlockState] = {}

    def register(self, block_id: int, state: BlockState) -> None:
        """Register (or replace) the state of a block id."""
        self._states[int(block_id)] = state

    def get(self, block_id: int) -> BlockState | None:
        """Return the state of a block id, or None if none is registered."""
        return self._states.get(int(block_id))