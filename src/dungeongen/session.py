# src/dungeongen/session.py
# Game-level seed chaining: one game PRNG hands out a seed per level, and
# each new level starts where the previous level's exit was. Each level
# also draws a hue for its colour theme.

from __future__ import annotations

import logging
from typing import Optional

from .config import MazeConfig
from .mapgen.generator import DungeonGenerator, Maze
from .points import ExitPoint, SpawnPoint
from .render.palette import DungeonColors, dungeon_colors
from .rng import Mulberry32, seed_from_time

logger = logging.getLogger(__name__)

# Exclusive upper bound of the per-level seed draw.
MAX_LEVEL_SEED = 2147483647

class GameSession:
    def __init__(self, width: int = 16, height: int = 16, config: Optional[MazeConfig] = None):
        self.generator = DungeonGenerator(width, height, config=config)
        self.game_seed: Optional[int] = None
        self.level = 0
        self._rng: Optional[Mulberry32] = None
        self._maze: Optional[Maze] = None
        self.hue: Optional[float] = None
        self.colors: Optional[DungeonColors] = None

    @property
    def maze(self) -> Optional[Maze]:
        return self._maze

    @property
    def spawn(self) -> SpawnPoint:
        return self.generator.get_spawn_point()

    @property
    def exit(self) -> ExitPoint:
        return self.generator.get_exit_point()

    def is_exit(self, x: int, y: int) -> bool:
        return self._maze is not None and self.exit.xy == (x, y)

    def _build(self, forced: Optional[SpawnPoint]) -> Maze:
        level_seed = self._rng.random_int(0, MAX_LEVEL_SEED)
        self.generator.generate(level_seed, forced)
        self._maze = self.generator.last_maze()
        # Theme hue: the game draw right after the level seed.
        self.hue = self._rng.next_float() * 360
        self.colors = dungeon_colors(self.hue)
        return self._maze

    def new_game(self, seed: Optional[int] = None) -> Maze:
        self.game_seed = seed if seed is not None else seed_from_time()
        self._rng = Mulberry32(self.game_seed)
        self.level = 1
        maze = self._build(None)
        logger.info("new game seed=%d level=1 maze_seed=%d hue=%.1f", self.game_seed, maze.seed, self.hue)
        return maze

    def next_level(self, facing: int) -> Maze:
        """Descend through the current exit, keeping the player's facing."""
        if self._rng is None:
            raise RuntimeError("next_level() called before new_game()")
        prev = self.exit
        forced = SpawnPoint(prev.x, prev.y, facing)
        self.level += 1
        maze = self._build(forced)
        logger.info("level=%d maze_seed=%d spawn=%s", self.level, maze.seed, maze.spawn)
        return maze
