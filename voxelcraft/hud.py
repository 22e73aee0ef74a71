"""Layout of the on-screen overlay: crosshair, hotbar, debug text and inventory screen."""

from __future__ import annotations

import math
from dataclasses import dataclass

from voxelcraft.geometry import Vec3
from voxelcraft.items import Inventory

Color = tuple[float, float, float]

SCREEN_WIDTH = 800.0
SCREEN_HEIGHT = 600.0
GLYPH_SIZE = 8
TITLE = "Minecraft 1.8.9 Clone"
CRAFT_HINT = "Press C to craft: 1 log -> 4 planks"

WHITE: Color = (1.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0)

_GUI_SCALE = 2.0
_DEBUG_SCALE = 2.0
_HOTBAR_SLOTS = 9
_INVENTORY_ROWS = 4


@dataclass(frozen=True)
class Rect:
    """A filled rectangle in screen pixels, origin at the top-left."""

    x: float
    y: float
    width: float
    height: float
    color: Color = WHITE
    alpha: float = 1.0


@dataclass(frozen=True)
class TextItem:
    """A string drawn at a screen position with the bitmap font."""

    text: str
    x: float
    y: float
    scale: float
    color: Color = WHITE


class _HasPosition:
    position: Vec3


def string_width(text: str, scale: float) -> float:
    """Width in pixels of ``text`` drawn at ``scale``; every glyph is 8 units wide."""
    return len(text) * GLYPH_SIZE * scale


def debug_lines(player: _HasPosition, fps: int) -> list[TextItem]:
    """The debug text in the top-left corner: title, fps, position, block and chunk."""
    pos = player.position
    bx, by, bz = math.floor(pos.x), math.floor(pos.y), math.floor(pos.z)
    texts = [
        TITLE,
        f"{fps} fps",
        f"XYZ: {pos.x:.3f} / {pos.y:.3f} / {pos.z:.3f}",
        f"Block: {bx} {by} {bz}",
        f"Chunk: {bx & 15} {by & 15} {bz & 15} in {bx // 16} {bz // 16}",
    ]
    return [TextItem(text, 5.0, 5.0 + 20.0 * row, _DEBUG_SCALE) for row, text in enumerate(texts)]


def crosshair_rects() -> list[Rect]:
    """A horizontal and a vertical bar crossing at the screen centre."""
    cx, cy = SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 2.0
    size, thickness = 10.0, 2.0
    return [
        Rect(cx - size, cy - thickness / 2.0, size * 2, thickness),
        Rect(cx - thickness / 2.0, cy - size, thickness, size * 2),
    ]


def hotbar_rects(selected_slot: int) -> list[Rect]:
    """The hotbar background centred at the bottom, then the highlight on the selected slot."""
    bar_width = 182 * _GUI_SCALE
    bar_height = 22 * _GUI_SCALE
    x = (SCREEN_WIDTH - bar_width) / 2.0
    y = SCREEN_HEIGHT - bar_height - 2.0
    slot_size = 20 * _GUI_SCALE
    slot_x = x + selected_slot * slot_size + 2.0
    return [
        Rect(x, y, bar_width, bar_height, (0.5, 0.5, 0.5), 0.5),
        Rect(slot_x - 2.0, y - 2.0, bar_height + 4.0, bar_height + 4.0, WHITE, 0.5),
    ]


def inventory_layout(inventory: Inventory) -> tuple[list[Rect], list[TextItem]]:
    """Rectangles and text of the inventory screen: dimmed backdrop, panel, 4x9 slot grid."""
    inv_w, inv_h = 352.0, 332.0
    start_x = (SCREEN_WIDTH - inv_w) / 2.0
    start_y = (SCREEN_HEIGHT - inv_h) / 2.0
    slot_size, pad = 32.0, 6.0
    grid_x, grid_y = start_x + 16.0, start_y + 64.0

    rects = [
        Rect(0.0, 0.0, SCREEN_WIDTH, SCREEN_HEIGHT, BLACK, 0.5),
        Rect(start_x, start_y, inv_w, inv_h, (0.2, 0.2, 0.2), 0.85),
    ]
    texts: list[TextItem] = []

    for row in range(_INVENTORY_ROWS):
        for col in range(_HOTBAR_SLOTS):
            x = grid_x + col * (slot_size + pad)
            y = grid_y + row * (slot_size + pad)
            rects.append(Rect(x, y, slot_size, slot_size, (0.1, 0.1, 0.1), 0.9))
            stack = inventory.get_stack(row * _HOTBAR_SLOTS + col)
            if not stack.is_empty():
                texts.append(TextItem(str(stack.count), x + 18.0, y + 18.0, 1.5))

    texts.append(TextItem("Inventory", start_x + 16.0, start_y + 16.0, 2.0))
    texts.append(TextItem(CRAFT_HINT, start_x + 16.0, start_y + inv_h - 32.0, 1.5))
    return rects, texts