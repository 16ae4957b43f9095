from dungeongen.directions import (
    ALL, EAST, NORTH, SOUTH, VECTORS, WEST, is_direction, perpendicular, reverse, turn_ccw, turn_cw,
)

def test_vectors_order():
    assert VECTORS[NORTH] == (0, -1)
    assert VECTORS[EAST] == (1, 0)
    assert VECTORS[SOUTH] == (0, 1)
    assert VECTORS[WEST] == (-1, 0)

def test_turns_and_reverse():
    for d in ALL:
        assert turn_ccw(turn_cw(d)) == d
        assert reverse(reverse(d)) == d
        rx, ry = VECTORS[reverse(d)]
        dx, dy = VECTORS[d]
        assert (rx, ry) == (-dx, -dy)
    assert turn_cw(WEST) == NORTH
    assert turn_ccw(NORTH) == WEST

def test_perpendicular():
    assert set(perpendicular(0, -1)) == {(1, 0), (-1, 0)}
    assert set(perpendicular(1, 0)) == {(0, 1), (0, -1)}

def test_is_direction():
    assert all(is_direction(d) for d in ALL)
    assert not is_direction(4) and not is_direction(-1)
