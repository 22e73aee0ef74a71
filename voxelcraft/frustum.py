"""View-frustum planes extracted from a view-projection matrix, for box culling."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from voxelcraft.geometry import Vec3

Matrix4 = Sequence[Sequence[float]]


@dataclass(frozen=True)
class Plane:
    """A plane given by a unit normal and its distance from the origin along it."""

    normal: Vec3 = Vec3(0.0, 1.0, 0.0)
    distance: float = 0.0

    @classmethod
    def from_point_normal(cls, point: Vec3, normal: Vec3) -> Plane:
        """The plane through ``point`` facing along ``normal``."""
        unit = normal.normalized()
        return cls(unit, unit.dot(point))

    def signed_distance(self, point: Vec3) -> float:
        """Distance of ``point`` from the plane; positive on the side the normal faces."""
        return self.normal.dot(point) - self.distance

    def normalized(self) -> Plane:
        """The same plane with a unit-length normal; raises ValueError for a degenerate plane."""
        length = self.normal.length()
        if length == 0:
            raise ValueError("plane has a zero-length normal")
        return Plane(self.normal / length, self.distance / length)


def _rows(matrix: Matrix4) -> list[tuple[float, float, float, float]]:
    rows = [tuple(float(value) for value in row) for row in matrix]
    if len(rows) != 4 or any(len(row) != 4 for row in rows):
        raise ValueError("view-projection matrix must be 4x4")
    return rows  # type: ignore[return-value]


class Frustum:
    """Six planes bounding what a camera can see; normals point inwards."""

    def __init__(self) -> None:
        self.left = Plane()
        self.right = Plane()
        self.bottom = Plane()
        self.top = Plane()
        self.near = Plane()
        self.far = Plane()

    @property
    def planes(self) -> tuple[Plane, ...]:
        """The planes in the order they are tested."""
        return (self.left, self.right, self.top, self.bottom, self.near, self.far)

    def update(self, view_projection: Matrix4) -> None:
        """Recompute the planes from a row-major view-projection matrix."""
        r0, r1, r2, r3 = _rows(view_projection)

        def combine(row: tuple[float, ...], sign: float) -> Plane:
            normal = Vec3(r3[0] + sign * row[0], r3[1] + sign * row[1], r3[2] + sign * row[2])
            return Plane(normal, -(r3[3] + sign * row[3])).normalized()

        planes = (
            combine(r0, 1.0), combine(r0, -1.0),
            combine(r1, 1.0), combine(r1, -1.0),
            combine(r2, 1.0), combine(r2, -1.0),
        )
        self.left, self.right, self.bottom, self.top, self.near, self.far = planes

    def is_box_in_frustum(self, minimum: Vec3, maximum: Vec3) -> bool:
        """Whether the axis-aligned box may be visible (conservative test)."""
        return all(_admits(plane, minimum, maximum) for plane in self.planes)


def _admits(plane: Plane, minimum: Vec3, maximum: Vec3) -> bool:
    n = plane.normal
    corner = Vec3(
        maximum.x if n.x >= 0 else minimum.x,
        maximum.y if n.y >= 0 else minimum.y,
        maximum.z if n.z >= 0 else minimum.z,
    )
    return plane.signed_distance(corner) >= 0