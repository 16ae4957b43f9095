from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from .directions import NAMES, is_direction

@dataclass(frozen=True)
class SpawnPoint:
    x: int
    y: int
    direction: int

    def __post_init__(self) -> None:
        if not is_direction(self.direction):
            raise ValueError(f"direction must be 0..3, got {self.direction!r}")

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "SpawnPoint":
        return cls(x=int(d["x"]), y=int(d["y"]), direction=int(d["direction"]))

    def as_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "direction": self.direction}

    @property
    def xy(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y}) facing {NAMES[self.direction]}"

@dataclass(frozen=True)
class ExitPoint:
    x: int
    y: int

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ExitPoint":
        return cls(x=int(d["x"]), y=int(d["y"]))

    def as_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}

    @property
    def xy(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
