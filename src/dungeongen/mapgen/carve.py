# src/dungeongen/mapgen/carve.py
# Recursive-backtracking carve over the interior region, with the
# non-adjacency rules that keep the corridor set a tree.
# The walk is written with an explicit stack; frames are pushed exactly
# where the recursive form would recurse, so PRNG draws happen in the same
# order and a seed reproduces the same maze.

from typing import Iterator, List, Optional, Tuple

from ..directions import ALL, VECTORS, perpendicular
from ..grid import Grid
from ..rng import Mulberry32
from ..tiles import CORRIDOR, WALL

def first_order(rng: Mulberry32, initial_direction: int) -> List[int]:
    """Initial facing first, the other three shuffled behind it."""
    others = [d for d in ALL if d != initial_direction]
    rng.shuffle(others)
    return [initial_direction] + others

def shuffled_order(rng: Mulberry32) -> List[int]:
    return rng.shuffle(list(ALL))

def step_target(grid: Grid, x: int, y: int, dx: int, dy: int) -> Optional[Tuple[int, int, int]]:
    """
    Return (nx, ny, step) for moving from (x, y) along (dx, dy), or None.

    Two cells is the normal stride. When that leaves the interior, a single
    step is allowed only if it lands on the interior border ring, so a cell
    next to the border can still reach it.
    """
    nx, ny = x + 2 * dx, y + 2 * dy
    if grid.in_interior(nx, ny):
        return nx, ny, 2
    nx, ny = x + dx, y + dy
    if grid.in_interior(nx, ny) and grid.on_interior_border(nx, ny):
        return nx, ny, 1
    return None

def can_carve_target(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    # Every neighbor of the target except the one we arrive from must be wall.
    for cx, cy in VECTORS:
        if cx == -dx and cy == -dy:
            continue
        nx, ny = x + cx, y + cy
        if grid.in_interior(nx, ny) and grid.get(nx, ny) == CORRIDOR:
            return False
    return True

def can_carve_connector(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    # Only the two cells beside the connector matter; its ends are the source and target.
    for cx, cy in perpendicular(dx, dy):
        nx, ny = x + cx, y + cy
        if grid.in_interior(nx, ny) and grid.get(nx, ny) == CORRIDOR:
            return False
    return True

def _try_direction(grid: Grid, x: int, y: int, d: int) -> Optional[Tuple[int, int]]:
    """Carve toward d if the rules allow it; return the new cell or None."""
    dx, dy = VECTORS[d]
    hit = step_target(grid, x, y, dx, dy)
    if hit is None:
        return None
    nx, ny, step = hit
    if grid.get(nx, ny) != WALL:
        return None
    if not can_carve_target(grid, nx, ny, dx, dy):
        return None
    if step == 2:
        mx, my = x + dx, y + dy
        if not can_carve_connector(grid, mx, my, dx, dy):
            return None
        grid.set(mx, my, CORRIDOR)
    return nx, ny

def carve_maze(grid: Grid, rng: Mulberry32, x: int, y: int, initial_direction: int) -> int:
    """
    Carve the maze in place starting at (x, y). The first corridor leaves
    the start cell along initial_direction whenever that move is legal.
    Returns the number of cells visited by the walk (connectors excluded).
    """
    grid.set(x, y, CORRIDOR)
    stack: List[Tuple[int, int, Iterator[int]]] = [
        (x, y, iter(first_order(rng, initial_direction)))
    ]
    visited = 1
    while stack:
        cx, cy, pending = stack[-1]
        for d in pending:
            nxt = _try_direction(grid, cx, cy, d)
            if nxt is None:
                continue
            nx, ny = nxt
            grid.set(nx, ny, CORRIDOR)
            visited += 1
            stack.append((nx, ny, iter(shuffled_order(rng))))
            break
        else:
            # All four tried: backtrack to the parent cell.
            stack.pop()
    return visited
