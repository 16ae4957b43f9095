# src/dungeongen/render/palette.py
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..tiles import CORRIDOR

RGBA = Tuple[int, int, int, int]

def hex_rgba(s: str, alpha: int = 255) -> RGBA:
    s = s.lstrip("#")
    return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16), alpha)

WALL = hex_rgba("#1a1a3e")
CORRIDOR_COLOR = hex_rgba("#e6f2ff")
GRID_LINE = hex_rgba("#4a4a6e")
PLAYER = hex_rgba("#ff0000")
EXIT = hex_rgba("#00ff00")
POLE = hex_rgba("#000000")

def hsl_to_hex(h: float, s: float, l: float) -> str:
    """h in degrees, s and l in percent. Channels round half up."""
    s /= 100
    l /= 100
    a = s * min(l, 1 - l)

    def channel(n: int) -> str:
        k = (n + h / 30) % 12
        c = l - a * max(min(k - 3, 9 - k, 1), -1)
        return f"{int(math.floor(255 * c + 0.5)):02x}"

    return f"#{channel(0)}{channel(8)}{channel(4)}"

@dataclass(frozen=True)
class DungeonColors:
    """Per-level colour theme, all shades of one hue."""
    hue: float
    border: str
    brick: str
    wall_fill: str
    floor: str

    @property
    def ceiling(self) -> str:
        return self.wall_fill

def dungeon_colors(hue: float) -> DungeonColors:
    return DungeonColors(
        hue=hue,
        border=hsl_to_hex(hue, 100, 50),
        brick=hsl_to_hex(hue, 70, 35),
        wall_fill=hsl_to_hex(hue, 40, 8),
        floor=hsl_to_hex(hue, 50, 15),
    )

def cell_color(cell: int, colors: Optional[DungeonColors] = None) -> RGBA:
    if colors is None:
        return CORRIDOR_COLOR if cell == CORRIDOR else WALL
    return hex_rgba(colors.floor if cell == CORRIDOR else colors.wall_fill)

def line_color(colors: Optional[DungeonColors] = None) -> RGBA:
    return GRID_LINE if colors is None else hex_rgba(colors.brick)

def arrow_points(x: int, y: int, direction: int, tile: int):
    """
    Triangle for the spawn marker in cell (x, y), pointing along direction.
    Built pointing north around the cell center, then rotated by quarter turns.
    """
    cx = x * tile + tile / 2
    cy = y * tile + tile / 2
    size = tile * 0.6
    pts = [(0, -size / 2), (-size / 3, size / 3), (size / 3, size / 3)]
    for _ in range(direction):
        pts = [(-py, px) for px, py in pts]  # 90° clockwise, y down
    return [(cx + px, cy + py) for px, py in pts]

def flag_shapes(x: int, y: int, tile: int):
    """(pole_rect, flag_triangle) for the exit marker in cell (x, y)."""
    x0, y0 = x * tile, y * tile
    pole_w, pole_h = tile * 0.1, tile * 0.8
    flag_w, flag_h = tile * 0.5, tile * 0.35
    left = x0 + tile * 0.25
    top = y0 + tile * 0.1
    pole = (left, top, left + pole_w, top + pole_h)
    flag = [
        (left + pole_w, top),
        (left + pole_w + flag_w, top + flag_h / 2),
        (left + pole_w, top + flag_h),
    ]
    return pole, flag
