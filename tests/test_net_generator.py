import pytest

from core import VOID, FREE, Turn, extract_net, walk
from cube_folders import synthesize_portals
from net_generator import NetFactory, SHAPES, SYMMETRIES, all_layouts
from net_generator.net_parts import transform_layout


def test_eleven_nets():
    assert len(SHAPES) == 11
    canonical = {min(transform_layout(shape, s) for s in range(len(SYMMETRIES))) for shape in SHAPES}
    assert len(canonical) == 11
    assert all(len(shape) == 6 for shape in SHAPES)


def test_symmetries_keep_shape():
    shape = SHAPES[6]
    for symmetry in range(len(SYMMETRIES)):
        layout = transform_layout(shape, symmetry)
        assert len(layout) == 6
        assert min(x for x, _ in layout) == 0 and min(y for _, y in layout) == 0


def test_layouts_are_distinct():
    layouts = all_layouts()
    assert len({frozenset(layout) for layout in layouts}) == len(layouts) == 64


def test_same_seed_same_puzzles():
    assert NetFactory(7).gen(0, amount=3) == NetFactory(7).gen(0, amount=3)


def test_reseed_restarts_stream():
    factory = NetFactory(11)
    first = factory.gen(2)
    assert factory.reseed(11).gen(2) == first


@pytest.mark.parametrize('mode', [0, 1, 2])
def test_generated_puzzles_fold(mode):
    for puzzle in NetFactory(mode).gen(mode, amount=5):
        net = extract_net(puzzle)
        assert net is not None
        assert puzzle.grid[0][puzzle.grid[0] != VOID][0] == FREE
        assert set(synthesize_portals(puzzle, 'affine')) == set(synthesize_portals(puzzle, 'colors'))


@pytest.mark.slow
def test_large_puzzles_walk():
    for puzzle in NetFactory(3).gen(3, amount=3):
        portals = synthesize_portals(puzzle, 'colors')
        assert walk(puzzle, portals).finished


def test_gen_manual():
    puzzle = NetFactory(5).gen_manual(shape=10, symmetry=0, side=3, stone_ratio=0.0, n_moves=4)
    assert puzzle.grid.shape == (6, 15)
    assert puzzle.dimensions == (15, 6)
    assert len(puzzle.moves) == 7
    assert isinstance(puzzle.moves[1], Turn)
    assert all(1 <= move <= 6 for move in puzzle.moves[::2])


def test_gen_manual_amount():
    puzzles = NetFactory(5).gen_manual(0, 0, 2, amount=4)
    assert len(puzzles) == 4


def test_invalid_arguments():
    factory = NetFactory(1)
    with pytest.raises(ValueError):
        factory.gen(9)
    with pytest.raises(ValueError):
        factory.gen(0, amount=0)
    with pytest.raises(ValueError):
        factory.gen_manual(shape=11, symmetry=0, side=2)
    with pytest.raises(ValueError):
        factory.gen_manual(shape=0, symmetry=0, side=2, stone_ratio=1.0)
