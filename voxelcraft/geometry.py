"""Small vector type and axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec3:
    """Immutable three-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, axis: int) -> float:
        return (self.x, self.y, self.z)[axis]

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y, self.z)

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; raises ValueError for the zero vector."""
        size = self.length()
        if size == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / size

    def dot(self, other: Vec3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def floor(self) -> tuple[int, int, int]:
        """Integer coordinates of the block containing this point."""
        return math.floor(self.x), math.floor(self.y), math.floor(self.z)


@dataclass(frozen=True)
class AABB:
    """Axis-aligned box given by its minimum and maximum corners."""

    minimum: Vec3
    maximum: Vec3

    def intersects(self, other: AABB) -> bool:
        """Whether the boxes overlap; touching faces count as overlap."""
        return all(
            lo <= other_hi and hi >= other_lo
            for lo, hi, other_lo, other_hi in zip(
                self.minimum, self.maximum, other.minimum, other.maximum
            )
        )