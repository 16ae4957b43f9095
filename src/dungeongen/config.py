from dataclasses import dataclass

# Smallest grid holding the wall rim, a 1-cell interior border and carve space.
MIN_SIZE = 5

@dataclass(frozen=True)
class MazeConfig:
    width: int = 16
    height: int = 16

    def validate(self) -> "MazeConfig":
        if self.width < MIN_SIZE or self.height < MIN_SIZE:
            raise ValueError(
                f"maze must be at least {MIN_SIZE}x{MIN_SIZE}, got {self.width}x{self.height}"
            )
        return self

# Default dimensions used by the game and the tools
DEFAULT = MazeConfig()
