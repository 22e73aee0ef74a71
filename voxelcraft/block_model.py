"""Block models described in JSON: textures and cuboid elements with per-face data."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from voxelcraft.block import Face

DEFAULT_UV = (0.0, 0.0, 16.0, 16.0)

_FACE_NAMES = {
    "down": Face.DOWN,
    "up": Face.UP,
    "north": Face.NORTH,
    "south": Face.SOUTH,
    "west": Face.WEST,
    "east": Face.EAST,
}


def face_from_name(name: str) -> Face:
    """Face for a lowercase direction name; unknown names map to UP."""
    return _FACE_NAMES.get(name, Face.UP)


@dataclass(frozen=True)
class ModelFace:
    """Texture reference, UV rectangle (x1, y1, x2, y2) and rotation of one element face."""

    texture: str
    uv: tuple[float, float, float, float] = DEFAULT_UV
    rotation: int = 0


@dataclass
class ModelElement:
    """A cuboid spanning ``start`` to ``end`` with its textured faces."""

    start: tuple[float, float, float]
    end: tuple[float, float, float]
    faces: dict[Face, ModelFace] = field(default_factory=dict)


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _floats(values: Any, size: int) -> tuple[float, ...]:
    return tuple(float(values[i]) for i in range(size))


def _parse_face(data: Mapping[str, Any]) -> ModelFace:
    uv = _floats(data["uv"], 4) if "uv" in data else DEFAULT_UV
    return ModelFace(
        texture=_string(data["texture"]),
        uv=uv,  # type: ignore[arg-type]
        rotation=int(data.get("rotation", 0)),
    )


def _parse_element(data: Mapping[str, Any]) -> ModelElement:
    element = ModelElement(
        start=_floats(data["from"], 3),  # type: ignore[arg-type]
        end=_floats(data["to"], 3),  # type: ignore[arg-type]
    )
    for name, face in data.get("faces", {}).items():
        element.faces[face_from_name(name)] = _parse_face(face)
    return element


class BlockModel:
    """A block model; parsing adds textures and elements to what is already held."""

    def __init__(self) -> None:
        self.parent = ""
        self.textures: dict[str, str] = {}
        self.elements: list[ModelElement] = []

    def load_from_file(self, path: str | os.PathLike[str]) -> None:
        """Read and parse a JSON model file; raises OSError or ValueError."""
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        self.parse(data)

    def parse(self, data: Any) -> None:
        """Take parent, textures and elements from decoded JSON; raises ValueError if malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("block model must be a JSON object")
        try:
            parent = _string(data["parent"]) if "parent" in data else None
            textures = {str(key): _string(value) for key, value in data.get("textures", {}).items()}
            elements = [_parse_element(element) for element in data.get("elements", [])]
        except (KeyError, IndexError, TypeError, AttributeError) as exc:
            raise ValueError(f"malformed block model: {exc}") from exc
        if parent is not None:
            self.parent = parent
        self.textures.update(textures)
        self.elements.extend(elements)