"""
Read-only structural checks on a finished grid. Nothing here mutates the
grid or draws from a PRNG; tests and ``mazetool stats`` lean on these.
"""

from typing import Dict, List, Optional, Tuple

from .grid import Grid
from .mapgen.exits import find_dead_ends
from .tiles import CORRIDOR, WALL

XY = Tuple[int, int]

def corridor_count(grid: Grid) -> int:
    return grid.buf.count(CORRIDOR)

def edge_count(grid: Grid) -> int:
    """Pairs of orthogonally adjacent corridor cells."""
    n = 0
    for x, y in grid.cells(CORRIDOR):
        if grid.is_corridor(x + 1, y):
            n += 1
        if grid.is_corridor(x, y + 1):
            n += 1
    return n

def is_connected(grid: Grid) -> bool:
    cells = list(grid.cells(CORRIDOR))
    if not cells:
        return True
    seen = {cells[0]}
    stack = [cells[0]]
    while stack:
        x, y = stack.pop()
        for nxt in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if nxt not in seen and grid.is_corridor(*nxt):
                seen.add(nxt)
                stack.append(nxt)
    return len(seen) == len(cells)

def is_tree(grid: Grid) -> bool:
    n = corridor_count(grid)
    return n > 0 and is_connected(grid) and edge_count(grid) == n - 1

def border_is_wall(grid: Grid) -> bool:
    for x in range(grid.width):
        if grid.get(x, 0) != WALL or grid.get(x, grid.height - 1) != WALL:
            return False
    for y in range(grid.height):
        if grid.get(0, y) != WALL or grid.get(grid.width - 1, y) != WALL:
            return False
    return True

def has_open_square(grid: Grid) -> bool:
    # Any 2x2 block of corridor cells.
    for y in range(grid.height - 1):
        for x in range(grid.width - 1):
            if all(grid.get(x + dx, y + dy) == CORRIDOR for dx in (0, 1) for dy in (0, 1)):
                return True
    return False

def dead_ends(grid: Grid, exclude: Optional[XY] = None) -> List[XY]:
    return find_dead_ends(grid, exclude=exclude)

def summarize(grid: Grid) -> Dict[str, object]:
    return {
        "width": grid.width,
        "height": grid.height,
        "corridors": corridor_count(grid),
        "edges": edge_count(grid),
        "dead_ends": len(dead_ends(grid)),
        "tree": is_tree(grid),
        "border_wall": border_is_wall(grid),
    }
