from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .directions import VECTORS
from .tiles import WALL, is_open

@dataclass
class Grid:
    width: int
    height: int
    buf: List[int]

    @classmethod
    def filled(cls, width: int, height: int, cell: int = WALL) -> "Grid":
        return cls(width=width, height=height, buf=[cell] * (width * height))

    @classmethod
    def from_matrix(cls, rows: List[List[int]]) -> "Grid":
        height = len(rows)
        width = len(rows[0]) if height else 0
        buf = [v for row in rows for v in row]
        return cls(width=width, height=height, buf=buf)

    @classmethod
    def from_tsv(cls, path: str) -> "Grid":
        """Read a tab-separated grid, one row per line. Blank lines are skipped."""
        rows = []
        with open(path, encoding="utf-8") as f:
            for line in f:
                line = line.rstrip("\n")
                if line:
                    rows.append([int(v) for v in line.split("\t")])
        if not rows or any(len(r) != len(rows[0]) for r in rows):
            raise ValueError(f"{path}: expected a rectangular grid")
        return cls.from_matrix(rows)

    def copy(self) -> "Grid":
        return Grid(self.width, self.height, list(self.buf))

    def idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        self.buf[self.idx(x, y)] = v

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def in_interior(self, x: int, y: int) -> bool:
        # Everything but the outer rim, which stays WALL for good.
        return 1 <= x <= self.width - 2 and 1 <= y <= self.height - 2

    def on_interior_border(self, x: int, y: int) -> bool:
        return x == 1 or x == self.width - 2 or y == 1 or y == self.height - 2

    def is_corridor(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and is_open(self.get(x, y))

    def corridor_neighbors(self, x: int, y: int) -> int:
        return sum(1 for dx, dy in VECTORS if self.is_corridor(x + dx, y + dy))

    def cells(self, value: int) -> Iterator[Tuple[int, int]]:
        """(x, y) of every cell holding value, row-major."""
        for y in range(self.height):
            for x in range(self.width):
                if self.get(x, y) == value:
                    yield (x, y)

    def as_matrix(self) -> List[List[int]]:
        out = []
        for y in range(self.height):
            row = self.buf[y * self.width:(y + 1) * self.width]
            out.append(row)
        return out
