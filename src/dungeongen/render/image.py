# src/dungeongen/render/image.py
# Render a maze to a Pillow image: one square per cell, thin grid lines,
# spawn arrow and exit flag on top.

from __future__ import annotations

import os
from typing import Optional

from PIL import Image, ImageDraw

from ..grid import Grid
from ..points import ExitPoint, SpawnPoint
from . import palette

def render_maze(
    grid: Grid,
    spawn: Optional[SpawnPoint] = None,
    exit_point: Optional[ExitPoint] = None,
    tile: int = 16,
    grid_lines: bool = True,
    colors: Optional[palette.DungeonColors] = None,
) -> Image.Image:
    """Draw with the default palette, or with a level theme when colors is given."""
    img = Image.new("RGBA", (grid.width * tile, grid.height * tile), (0, 0, 0, 255))
    draw = ImageDraw.Draw(img)
    for y in range(grid.height):
        for x in range(grid.width):
            box = (x * tile, y * tile, (x + 1) * tile - 1, (y + 1) * tile - 1)
            outline = palette.line_color(colors) if grid_lines else None
            draw.rectangle(box, fill=palette.cell_color(grid.get(x, y), colors), outline=outline)
    if exit_point is not None:
        pole, flag = palette.flag_shapes(exit_point.x, exit_point.y, tile)
        draw.rectangle(pole, fill=palette.POLE)
        draw.polygon(flag, fill=palette.EXIT)
    if spawn is not None:
        draw.polygon(palette.arrow_points(spawn.x, spawn.y, spawn.direction, tile), fill=palette.PLAYER)
    return img

def save_maze_png(grid: Grid, out_png: str, spawn=None, exit_point=None, tile: int = 16, colors=None) -> str:
    img = render_maze(grid, spawn, exit_point, tile=tile, colors=colors)
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
    return out_png
