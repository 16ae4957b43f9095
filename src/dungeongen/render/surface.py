# src/dungeongen/render/surface.py
from __future__ import annotations

from typing import Optional

import pygame

from ..grid import Grid
from ..points import ExitPoint, SpawnPoint
from . import palette

def draw_maze(
    surface: "pygame.Surface",
    grid: Grid,
    spawn: Optional[SpawnPoint] = None,
    exit_point: Optional[ExitPoint] = None,
    tile: int = 16,
    origin_xy: tuple = (0, 0),
    colors: Optional[palette.DungeonColors] = None,
) -> None:
    """
    Draw the grid with the shared palette, or a level theme when given.
    Reads the grid only; the caller owns the surface and the display flip.
    """
    ox, oy = origin_xy
    for y in range(grid.height):
        for x in range(grid.width):
            r = pygame.Rect(ox + x * tile, oy + y * tile, tile, tile)
            pygame.draw.rect(surface, palette.cell_color(grid.get(x, y), colors), r)
            pygame.draw.rect(surface, palette.line_color(colors), r, 1)
    if exit_point is not None:
        pole, flag = palette.flag_shapes(exit_point.x, exit_point.y, tile)
        l, t, rr, b = pole
        pygame.draw.rect(surface, palette.POLE, pygame.Rect(ox + l, oy + t, max(1, rr - l), b - t))
        pygame.draw.polygon(surface, palette.EXIT, [(ox + px, oy + py) for px, py in flag])
    if spawn is not None:
        pts = palette.arrow_points(spawn.x, spawn.y, spawn.direction, tile)
        pygame.draw.polygon(surface, palette.PLAYER, [(ox + px, oy + py) for px, py in pts])
