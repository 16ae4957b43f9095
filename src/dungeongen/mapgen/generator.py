# src/dungeongen/mapgen/generator.py
# Dungeon generator: seed -> all-wall grid -> spawn -> carve -> exit.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from ..config import MazeConfig
from ..directions import NORTH
from ..grid import Grid
from ..points import ExitPoint, SpawnPoint
from ..rng import Mulberry32, seed_from_time
from ..tiles import CORRIDOR, WALL
from .carve import carve_maze
from .exits import choose_exit
from .spawn import choose_spawn

logger = logging.getLogger(__name__)

ForcedSpawn = Union[SpawnPoint, dict]

@dataclass(frozen=True)
class Maze:
    grid: Grid
    spawn: SpawnPoint
    exit: ExitPoint
    seed: int

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def as_matrix(self) -> List[List[int]]:
        return self.grid.as_matrix()

def _coerce_spawn(forced: Optional[ForcedSpawn]) -> Optional[SpawnPoint]:
    if forced is None or isinstance(forced, SpawnPoint):
        return forced
    return SpawnPoint.from_dict(forced)

def generate_maze(
    seed: int,
    width: int = 16,
    height: int = 16,
    forced_spawn: Optional[ForcedSpawn] = None,
) -> Maze:
    """
    Build one maze. The PRNG is seeded once and threaded through the spawn
    draw, the carve shuffles and the exit draw, in that order, so equal
    (seed, size, forced_spawn) always give an identical Maze.
    """
    MazeConfig(width, height).validate()
    rng = Mulberry32(seed)
    grid = Grid.filled(width, height, WALL)

    spawn = choose_spawn(grid, rng, _coerce_spawn(forced_spawn))
    carve_maze(grid, rng, spawn.x, spawn.y, spawn.direction)
    exit_point = choose_exit(grid, rng, spawn)

    logger.debug(
        "maze seed=%d size=%dx%d spawn=%s exit=%s corridors=%d",
        seed, width, height, spawn, exit_point, grid.buf.count(CORRIDOR),
    )
    return Maze(grid=grid, spawn=spawn, exit=exit_point, seed=seed)

class DungeonGenerator:
    """
    Stateful front end used by the game loop and renderers.

    generate() rebuilds everything from the stored seed; the spawn and exit
    of the last build stay readable until the next generate() call.
    """

    def __init__(self, width: int = 16, height: int = 16, config: Optional[MazeConfig] = None):
        cfg = (config or MazeConfig(width, height)).validate()
        self.width = cfg.width
        self.height = cfg.height
        self._seed = seed_from_time()
        self._grid = Grid.filled(self.width, self.height, WALL)
        self._spawn = SpawnPoint(1, 1, NORTH)
        self._exit = ExitPoint(self.width - 2, self.height - 2)

    def set_seed(self, seed: int) -> None:
        self._seed = seed

    def get_seed(self) -> int:
        return self._seed

    def get_spawn_point(self) -> SpawnPoint:
        return self._spawn

    def get_exit_point(self) -> ExitPoint:
        return self._exit

    def get_grid(self) -> List[List[int]]:
        return self._grid.as_matrix()

    def generate(self, seed: Optional[int] = None, forced_spawn: Optional[ForcedSpawn] = None) -> List[List[int]]:
        if seed is not None:
            self._seed = seed
        maze = generate_maze(self._seed, self.width, self.height, forced_spawn)
        self._grid = maze.grid
        self._spawn = maze.spawn
        self._exit = maze.exit
        return maze.as_matrix()

    def last_maze(self) -> Maze:
        # Callers get their own grid; writes to it must not reach get_grid().
        return Maze(grid=self._grid.copy(), spawn=self._spawn, exit=self._exit, seed=self._seed)
