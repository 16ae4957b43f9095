# Cardinal facings, in the order the carver enumerates them.
from typing import Tuple

NORTH, EAST, SOUTH, WEST = 0, 1, 2, 3
ALL = (NORTH, EAST, SOUTH, WEST)

# (dx, dy) per facing; y grows downward.
VECTORS: Tuple[Tuple[int, int], ...] = (
    (0, -1),  # NORTH
    (1, 0),   # EAST
    (0, 1),   # SOUTH
    (-1, 0),  # WEST
)

NAMES = ("NORTH", "EAST", "SOUTH", "WEST")
ARROWS = ("▲", "▶", "▼", "◀")

def is_direction(d: int) -> bool:
    return isinstance(d, int) and 0 <= d <= 3

def reverse(d: int) -> int:
    return (d + 2) & 3

def turn_cw(d: int) -> int:
    return (d + 1) & 3

def turn_ccw(d: int) -> int:
    return (d + 3) & 3

def perpendicular(dx: int, dy: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """The two unit vectors at right angles to (dx, dy)."""
    return (-dy, dx), (dy, -dx)
