"""Packs square block textures into one RGBA image and records their UV rectangles."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class TextureInfo:
    """UV rectangle of a texture inside the atlas, in 0..1 coordinates."""

    uv_min: tuple[float, float] = (0.0, 0.0)
    uv_max: tuple[float, float] = (0.0, 0.0)


class TextureAtlas:
    """Collects named texture files and lays them out on a square grid of tiles."""

    def __init__(self, tile_size: int = 16) -> None:
        self.tile_size = tile_size
        self._paths: dict[str, str] = {}
        self._infos: dict[str, TextureInfo] = {}
        self.width = 0
        self.height = 0
        self.image: Image.Image | None = None

    def add_texture(self, name: str, path: str | os.PathLike[str]) -> None:
        """Register (or replace) the file for a texture name."""
        self._paths[name] = os.fspath(path)

    def generate(self) -> None:
        """Build the atlas image; textures are placed in name order. Raises OSError on unreadable files."""
        if not self._paths:
            return

        images: list[tuple[str, Image.Image]] = []
        for name in sorted(self._paths):
            with Image.open(self._paths[name]) as source:
                images.append((name, source.convert("RGBA")))

        tile = self.tile_size
        grid_side = math.ceil(math.sqrt(len(images)))
        self.width = self.height = grid_side * tile
        atlas = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
        infos: dict[str, TextureInfo] = {}

        for index, (name, picture) in enumerate(images):
            grid_x, grid_y = index % grid_side, index // grid_side
            atlas.paste(picture, (grid_x * tile, grid_y * tile))
            infos[name] = TextureInfo(
                (grid_x * tile / self.width, grid_y * tile / self.height),
                ((grid_x + 1) * tile / self.width, (grid_y + 1) * tile / self.height),
            )

        self._infos = infos
        self.image = atlas

    def texture_info(self, name: str) -> TextureInfo:
        """UV rectangle of a texture; an all-zero rectangle if it is not in the atlas."""
        return self._infos.get(name, TextureInfo())