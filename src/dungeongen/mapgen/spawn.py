# src/dungeongen/mapgen/spawn.py
# Choosing where the player starts and which way they face.

from typing import List, Optional

from ..directions import ALL, EAST, NORTH, SOUTH, VECTORS, WEST
from ..grid import Grid
from ..points import SpawnPoint
from ..rng import Mulberry32

def free_spawn_candidates(width: int, height: int) -> List[SpawnPoint]:
    """
    Interior-border cells at 2-cell spacing, each facing inward.
    Order: top edge, bottom edge, left edge, right edge. Corners show up
    once per edge they sit on, so they are twice as likely to be drawn.
    """
    max_x, max_y = width - 2, height - 2
    out = []
    for x in range(1, max_x + 1, 2):
        out.append(SpawnPoint(x, 1, SOUTH))
    for x in range(1, max_x + 1, 2):
        out.append(SpawnPoint(x, max_y, NORTH))
    for y in range(1, max_y + 1, 2):
        out.append(SpawnPoint(1, y, EAST))
    for y in range(1, max_y + 1, 2):
        out.append(SpawnPoint(max_x, y, WEST))
    return out

def choose_free_spawn(grid: Grid, rng: Mulberry32) -> SpawnPoint:
    cands = free_spawn_candidates(grid.width, grid.height)
    return cands[rng.random_int(0, len(cands))]

def inward_directions(grid: Grid, x: int, y: int) -> List[int]:
    """Facings pointing away from each interior border the cell touches."""
    out = []
    if y == 1:
        out.append(SOUTH)
    if y == grid.height - 2:
        out.append(NORTH)
    if x == 1:
        out.append(EAST)
    if x == grid.width - 2:
        out.append(WEST)
    return out

def resolve_forced_spawn(grid: Grid, rng: Mulberry32, forced: SpawnPoint) -> SpawnPoint:
    """
    Keep the requested facing if one step along it stays interior;
    otherwise redraw it among the inward facings of the cell's border(s),
    or among all four when the cell is on no border.
    """
    dx, dy = VECTORS[forced.direction]
    if grid.in_interior(forced.x + dx, forced.y + dy):
        return forced
    eligible = inward_directions(grid, forced.x, forced.y)
    if eligible:
        direction = eligible[rng.random_int(0, len(eligible))]
    else:
        direction = ALL[rng.random_int(0, len(ALL))]
    return SpawnPoint(forced.x, forced.y, direction)

def choose_spawn(grid: Grid, rng: Mulberry32, forced: Optional[SpawnPoint] = None) -> SpawnPoint:
    # A forced spawn off the interior falls back to a free pick.
    if forced is not None and grid.in_interior(forced.x, forced.y):
        return resolve_forced_spawn(grid, rng, forced)
    return choose_free_spawn(grid, rng)
