# src/dungeongen/render/text.py
from typing import List, Optional

from ..directions import ARROWS
from ..grid import Grid
from ..points import ExitPoint, SpawnPoint
from ..tiles import CORRIDOR, CORRIDOR_GLYPH, EXIT_GLYPH, WALL_GLYPH

def grid_to_text(
    grid: Grid,
    spawn: Optional[SpawnPoint] = None,
    exit_point: Optional[ExitPoint] = None,
) -> str:
    """One line per row: wall blocks, blank corridors, optional markers."""
    lines: List[str] = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            if spawn is not None and (x, y) == spawn.xy:
                row.append(ARROWS[spawn.direction])
            elif exit_point is not None and (x, y) == exit_point.xy:
                row.append(EXIT_GLYPH)
            elif grid.get(x, y) == CORRIDOR:
                row.append(CORRIDOR_GLYPH)
            else:
                row.append(WALL_GLYPH)
        lines.append("".join(row))
    return "\n".join(lines)

def dump_grid(grid: Grid, spawn=None, exit_point=None, title: str = "Generated dungeon:") -> None:
    print(title)
    print(grid_to_text(grid, spawn, exit_point))
