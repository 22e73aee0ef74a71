"""First-person camera and the view and projection matrices it needs.

Matrices are row-major 4x4 tuples meant to multiply column vectors.
"""

from __future__ import annotations

import math
from enum import Enum

from voxelcraft.geometry import Vec3

Matrix4 = tuple[tuple[float, float, float, float], ...]

YAW = -90.0
PITCH = 0.0
SPEED = 2.5
SENSITIVITY = 0.1
ZOOM = 45.0
MAX_PITCH = 89.0
MIN_ZOOM = 1.0
MAX_ZOOM = 45.0


class CameraMovement(Enum):
    """Directions the camera can be moved in."""

    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


def look_at(eye: Vec3, center: Vec3, up: Vec3) -> Matrix4:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    f = (center - eye).normalized()
    s = f.cross(up).normalized()
    u = s.cross(f)
    return (
        (s.x, s.y, s.z, -s.dot(eye)),
        (u.x, u.y, u.z, -u.dot(eye)),
        (-f.x, -f.y, -f.z, f.dot(eye)),
        (0.0, 0.0, 0.0, 1.0),
    )


def perspective(fovy: float, aspect: float, near: float, far: float) -> Matrix4:
    """Right-handed perspective projection with depth mapped to [-1, 1]; ``fovy`` in radians."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    depth = far - near
    return (
        (1.0 / (aspect * tan_half), 0.0, 0.0, 0.0),
        (0.0, 1.0 / tan_half, 0.0, 0.0),
        (0.0, 0.0, -(far + near) / depth, -(2.0 * far * near) / depth),
        (0.0, 0.0, -1.0, 0.0),
    )


class Camera:
    """A camera oriented by yaw and pitch in degrees."""

    def __init__(
        self,
        position: Vec3 = Vec3(),
        up: Vec3 = Vec3(0.0, 1.0, 0.0),
        yaw: float = YAW,
        pitch: float = PITCH,
    ) -> None:
        self.position = position
        self.world_up = up
        self.yaw = yaw
        self.pitch = pitch
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self.front = Vec3(0.0, 0.0, -1.0)
        self.right = Vec3(1.0, 0.0, 0.0)
        self.up = up
        self._update_vectors()

    def view_matrix(self) -> Matrix4:
        """View matrix for the current position and orientation."""
        return look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction: CameraMovement, delta_time: float) -> None:
        """Move the camera along its own axes."""
        distance = self.movement_speed * delta_time
        if direction is CameraMovement.FORWARD:
            self.position = self.position + self.front * distance
        elif direction is CameraMovement.BACKWARD:
            self.position = self.position - self.front * distance
        elif direction is CameraMovement.LEFT:
            self.position = self.position - self.right * distance
        elif direction is CameraMovement.RIGHT:
            self.position = self.position + self.right * distance

    def process_mouse_movement(
        self, xoffset: float, yoffset: float, constrain_pitch: bool = True
    ) -> None:
        """Turn the camera by mouse offsets, keeping pitch within ±89° unless told otherwise."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = max(-MAX_PITCH, min(MAX_PITCH, self.pitch))
        self._update_vectors()

    def process_mouse_scroll(self, yoffset: float) -> None:
        """Narrow or widen the field of view, within [1, 45] degrees."""
        self.zoom = max(MIN_ZOOM, min(MAX_ZOOM, self.zoom - yoffset))

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = Vec3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )
        self.front = front.normalized()
        self.right = self.front.cross(self.world_up).normalized()
        self.up = self.right.cross(self.front).normalized()