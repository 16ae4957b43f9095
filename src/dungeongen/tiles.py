# Cell values stored in the grid. Consumers compare against these directly.

WALL = 0
CORRIDOR = 1

# Text dump glyphs
WALL_GLYPH = "█"
CORRIDOR_GLYPH = " "
EXIT_GLYPH = "E"

def is_open(cell: int) -> bool:
    return cell == CORRIDOR
