# src/dungeongen/mapgen/exits.py
# Exit selection: a random dead end other than the spawn cell.

from typing import List, Optional, Tuple

from ..grid import Grid
from ..points import ExitPoint, SpawnPoint
from ..rng import Mulberry32
from ..tiles import CORRIDOR

XY = Tuple[int, int]

def find_dead_ends(grid: Grid, exclude: Optional[XY] = None) -> List[XY]:
    """Corridor cells with exactly one corridor neighbor, row-major."""
    out = []
    for x, y in grid.cells(CORRIDOR):
        if (x, y) == exclude:
            continue
        if grid.corridor_neighbors(x, y) == 1:
            out.append((x, y))
    return out

def fallback_exit(grid: Grid, spawn: SpawnPoint) -> Optional[ExitPoint]:
    # Bottom-right interior corner backward: y descending, then x descending.
    for y in range(grid.height - 2, 0, -1):
        for x in range(grid.width - 2, 0, -1):
            if grid.get(x, y) == CORRIDOR and (x, y) != spawn.xy:
                return ExitPoint(x, y)
    return None

def choose_exit(grid: Grid, rng: Mulberry32, spawn: SpawnPoint) -> ExitPoint:
    dead_ends = find_dead_ends(grid, exclude=spawn.xy)
    if dead_ends:
        x, y = dead_ends[rng.random_int(0, len(dead_ends))]
        return ExitPoint(x, y)
    found = fallback_exit(grid, spawn)
    if found is not None:
        return found
    # Nothing but the spawn is open; park the exit on the far interior corner.
    return ExitPoint(grid.width - 2, grid.height - 2)
