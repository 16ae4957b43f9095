import pytest

from dungeongen.analysis import border_is_wall, has_open_square, is_tree
from dungeongen.directions import EAST, NORTH, SOUTH, VECTORS, WEST
from dungeongen.mapgen.generator import DungeonGenerator, generate_maze
from dungeongen.mapgen.spawn import free_spawn_candidates
from dungeongen.points import ExitPoint, SpawnPoint
from dungeongen.tiles import CORRIDOR

SIZES = [(5, 5), (6, 6), (9, 9), (16, 16), (21, 15), (32, 24)]

def test_same_seed_same_maze():
    for seed in (0, 1, 42, 2**31 - 2, 1700000000000):
        a = generate_maze(seed)
        b = generate_maze(seed)
        assert a.as_matrix() == b.as_matrix()
        assert a.spawn == b.spawn and a.exit == b.exit

def test_same_forced_spawn_same_maze():
    forced = SpawnPoint(7, 9, WEST)
    a = generate_maze(8, forced_spawn=forced)
    b = generate_maze(8, forced_spawn={"x": 7, "y": 9, "direction": WEST})
    assert a == b

def test_invariants_hold_across_seeds_and_sizes():
    for w, h in SIZES:
        for seed in range(25):
            m = generate_maze(seed * 7919 + 13, w, h)
            g = m.grid
            label = f"{w}x{h} seed {seed}"
            assert border_is_wall(g), label
            assert is_tree(g), label
            assert not has_open_square(g), label
            assert g.get(*m.spawn.xy) == CORRIDOR, label
            assert m.exit.xy != m.spawn.xy, label
            assert g.get(*m.exit.xy) == CORRIDOR, label
            assert g.corridor_neighbors(*m.exit.xy) == 1, label

def test_free_spawn_is_a_border_candidate():
    cands = set(free_spawn_candidates(16, 16))
    for seed in range(50):
        m = generate_maze(seed)
        assert m.spawn in cands
        dx, dy = VECTORS[m.spawn.direction]
        assert m.grid.get(m.spawn.x + dx, m.spawn.y + dy) == CORRIDOR

def test_forced_spawn_continuation():
    for seed in range(20):
        m = generate_maze(seed, 16, 16, SpawnPoint(1, 5, SOUTH))
        assert m.spawn == SpawnPoint(1, 5, SOUTH)

def test_forced_spawn_redirection():
    for seed in range(20):
        m = generate_maze(seed, 16, 16, SpawnPoint(1, 1, NORTH))
        assert m.spawn.xy == (1, 1)
        assert m.spawn.direction in (SOUTH, EAST)

def test_too_small_rejected():
    with pytest.raises(ValueError):
        DungeonGenerator(4, 16)
    with pytest.raises(ValueError):
        generate_maze(1, 16, 3)

def test_bad_direction_rejected():
    with pytest.raises(ValueError):
        SpawnPoint(1, 1, 4)

def test_generator_accessors():
    gen = DungeonGenerator(16, 16)
    gen.set_seed(1234)
    assert gen.get_seed() == 1234
    grid = gen.generate()
    want = generate_maze(1234)
    assert grid == want.as_matrix()
    assert gen.get_spawn_point() == want.spawn
    assert gen.get_exit_point() == want.exit
    # Reads do not disturb state.
    for _ in range(3):
        assert gen.get_spawn_point() == want.spawn
        assert gen.get_exit_point() == want.exit
        assert gen.get_grid() == grid

def test_generate_with_seed_updates_seed():
    gen = DungeonGenerator()
    gen.generate(77)
    assert gen.get_seed() == 77
    again = gen.generate()
    assert again == generate_maze(77).as_matrix()

def test_returned_matrix_is_a_copy():
    gen = DungeonGenerator()
    grid = gen.generate(5)
    x, y = gen.get_spawn_point().xy
    grid[y][x] = 0
    assert gen.get_grid()[y][x] == CORRIDOR

def test_defaults_before_generate():
    gen = DungeonGenerator(10, 12)
    assert gen.get_spawn_point() == SpawnPoint(1, 1, NORTH)
    assert gen.get_exit_point() == ExitPoint(8, 10)
    assert isinstance(gen.get_seed(), int)
