import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from dungeongen.directions import EAST, NORTH
from dungeongen.grid import Grid
from dungeongen.mapgen.generator import generate_maze
from dungeongen.points import ExitPoint, SpawnPoint
from dungeongen.render import palette
from dungeongen.render.image import render_maze, save_maze_png
from dungeongen.render.surface import draw_maze
from dungeongen.render.text import dump_grid, grid_to_text
from dungeongen.tiles import CORRIDOR

def small_grid():
    g = Grid.filled(5, 5)
    for x, y in ((1, 1), (2, 1), (3, 1), (3, 2), (3, 3)):
        g.set(x, y, CORRIDOR)
    return g

def test_text_dump():
    g = small_grid()
    assert grid_to_text(g).splitlines() == [
        "█████",
        "█   █",
        "███ █",
        "███ █",
        "█████",
    ]
    lines = grid_to_text(g, SpawnPoint(1, 1, EAST), ExitPoint(3, 3)).splitlines()
    assert lines[1] == "█▶  █"
    assert lines[3] == "███E█"

def test_dump_grid_prints(capsys):
    dump_grid(small_grid())
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Generated dungeon:"
    assert len(out) == 6

def test_arrow_points_rotate():
    tip = palette.arrow_points(0, 0, NORTH, 10)[0]
    assert tip == (5, 2)
    tip = palette.arrow_points(0, 0, EAST, 10)[0]
    assert tip == (8, 5)

def test_image_colors():
    g = small_grid()
    img = render_maze(g, tile=8)
    assert img.size == (40, 40)
    assert img.getpixel((4, 4)) == palette.WALL
    assert img.getpixel((2 * 8 + 4, 8 + 4)) == palette.CORRIDOR_COLOR
    assert img.getpixel((0, 0)) == palette.GRID_LINE

def test_image_markers():
    m = generate_maze(42)
    img = render_maze(m.grid, m.spawn, m.exit, tile=16)
    cx, cy = m.spawn.x * 16 + 8, m.spawn.y * 16 + 8
    assert img.getpixel((cx, cy)) == palette.PLAYER

def test_save_png(tmp_path):
    m = generate_maze(1)
    out = save_maze_png(m.grid, str(tmp_path / "png" / "maze.png"), m.spawn, m.exit)
    assert os.path.exists(out)

def test_pygame_surface():
    g = small_grid()
    surf = pygame.Surface((5 * 8, 5 * 8))
    draw_maze(surf, g, tile=8)
    assert tuple(surf.get_at((4, 4))) == palette.WALL
    assert tuple(surf.get_at((2 * 8 + 4, 8 + 4))) == palette.CORRIDOR_COLOR

def test_pygame_surface_themed():
    colors = palette.dungeon_colors(0)
    surf = pygame.Surface((5 * 8, 5 * 8))
    draw_maze(surf, small_grid(), tile=8, colors=colors)
    assert tuple(surf.get_at((4, 4))) == palette.hex_rgba(colors.wall_fill)
    assert tuple(surf.get_at((2 * 8 + 4, 8 + 4))) == palette.hex_rgba(colors.floor)
    assert tuple(surf.get_at((0, 0))) == palette.hex_rgba(colors.brick)

@pytest.mark.parametrize("hue, border, brick, wall_fill, floor", [
    (0, "#ff0000", "#981b1b", "#1d0c0c", "#391313"),
    (120, "#00ff00", "#1b981b", "#0c1d0c", "#133913"),
    (180, "#00ffff", "#1b9898", "#0c1d1d", "#133939"),
    (240, "#0000ff", "#1b1b98", "#0c0c1d", "#131339"),
    (300, "#ff00ff", "#981b98", "#1d0c1d", "#391339"),
])
def test_dungeon_colors(hue, border, brick, wall_fill, floor):
    c = palette.dungeon_colors(hue)
    assert (c.border, c.brick, c.wall_fill, c.floor) == (border, brick, wall_fill, floor), f"hue {hue}"
    assert c.ceiling == c.wall_fill

def test_hsl_extremes():
    assert palette.hsl_to_hex(0, 0, 0) == "#000000"
    assert palette.hsl_to_hex(200, 0, 100) == "#ffffff"
    assert palette.hsl_to_hex(90, 0, 50) == "#808080"

def test_image_themed():
    colors = palette.dungeon_colors(240)
    img = render_maze(small_grid(), tile=8, colors=colors)
    assert img.getpixel((4, 4)) == palette.hex_rgba(colors.wall_fill)
    assert img.getpixel((2 * 8 + 4, 8 + 4)) == palette.hex_rgba(colors.floor)
    assert img.getpixel((0, 0)) == palette.hex_rgba(colors.brick)
