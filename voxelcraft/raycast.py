"""Voxel traversal to find the first solid block along a ray."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from voxelcraft.block import Block, Blocks
from voxelcraft.geometry import Vec3

BlockPos = tuple[int, int, int]


class _BlockSource(Protocol):
    def get_block(self, x: int, y: int, z: int) -> Block: ...


@dataclass(frozen=True)
class RaycastResult:
    """Outcome of a ray cast: the block hit, the face it was entered through, and the distance."""

    hit: bool = False
    block_pos: BlockPos = (0, 0, 0)
    face_normal: BlockPos = (0, 0, 0)
    distance: float = 0.0


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _next_axis(side: list[float]) -> int:
    if side[0] < side[1]:
        return 0 if side[0] < side[2] else 2
    return 1 if side[1] < side[2] else 2


def raycast(origin: Vec3, direction: Vec3, max_distance: float, world: _BlockSource) -> RaycastResult:
    """Walk the grid from ``origin`` along ``direction`` until a non-air block or ``max_distance``."""
    d = direction.normalized()
    block = list(origin.floor())
    step = [_sign(c) for c in d]
    delta = [abs(1.0 / c) if c != 0 else math.inf for c in d]
    side = [
        (b + 1.0 - o) * dl if c > 0 else (o - b) * dl
        for o, b, c, dl in zip(origin, block, d, delta)
    ]

    dist = 0.0
    normal: BlockPos = (0, 0, 0)
    while dist < max_distance:
        if world.get_block(*block).id != Blocks.AIR:
            return RaycastResult(True, (block[0], block[1], block[2]), normal, dist)
        axis = _next_axis(side)
        dist = side[axis]
        side[axis] += delta[axis]
        block[axis] += step[axis]
        n = [0, 0, 0]
        n[axis] = -step[axis]
        normal = (n[0], n[1], n[2])
    return RaycastResult()