from collections import defaultdict

import pytest

from core import CUBE_VERTICES, VERTEX_DEGREE, NoFold, extract_net
from cube_folders import FoldingError
from cube_folders.affine import fold_positions
from cube_folders.colors import color_corners, PhaseResult
from cube_folders.colors.folder_colors import GRAY, Coloring, _initial_pass, _leftover_pass
from net_generator import all_layouts
from conftest import layout_puzzle


def classes(vertex_of):
    grouped = defaultdict(set)
    for corner, vertex in vertex_of.items():
        grouped[vertex].add(corner)
    return {frozenset(corners) for corners in grouped.values()}


def test_sample_is_fully_colored(sample_net):
    colors = color_corners(sample_net)
    assert colors is not None
    assert GRAY not in colors.values()
    assert len(set(colors.values())) == CUBE_VERTICES


def test_every_color_collects_three_faces(sample_net):
    colors = color_corners(sample_net)
    totals = defaultdict(int)
    for corner, color in colors.items():
        totals[color] += sample_net.corner_degree[corner]
    assert set(totals.values()) == {VERTEX_DEGREE}


def test_colors_match_folded_positions(sample_net):
    assert classes(color_corners(sample_net)) == classes(fold_positions(sample_net))


def test_degree_never_exceeds_three(sample_net):
    trace = []
    color_corners(sample_net, trace=trace)
    assert trace[0][0] == '_initial_pass'
    assert all(max(degrees) <= VERTEX_DEGREE for _, degrees in trace)


@pytest.mark.parametrize('side', [1, 2])
def test_degree_never_exceeds_three_on_every_layout(side):
    for layout in all_layouts():
        trace = []
        assert color_corners(extract_net(layout_puzzle(layout, side=side)), trace=trace) is not None
        assert all(max(degrees) <= VERTEX_DEGREE for _, degrees in trace)


def test_initial_pass_seeds_complete_corners(sample_net):
    state = Coloring(sample_net)
    assert _initial_pass(state) is PhaseResult.PROGRESS
    seeded = [c for c, color in enumerate(state.colors) if color != GRAY]
    assert [sample_net.corners[c] for c in seeded] == [(2, 1), (2, 2), (3, 2)]


def test_unify_refuses_fourth_face(sample_net):
    state = Coloring(sample_net)
    _initial_pass(state)
    first, second = (sample_net.corner_index[point] for point in [(2, 1), (2, 2)])
    assert state.unify(first, second) is False


def test_leftover_pass_paints_last_vertex(sample_net):
    colors = color_corners(sample_net)
    grouped = defaultdict(list)
    for corner, color in colors.items():
        grouped[color].append(corner)
    # 11 corners in 5 classes of at most 3, so some class has three corners
    last, corners = next((color, corners) for color, corners in grouped.items() if len(corners) == 3)

    state = Coloring(sample_net)
    state.colors = [GRAY if color == last else color for _, color in sorted(colors.items())]
    state.used = [color != last for color in range(CUBE_VERTICES)]
    state.degree = [0 if color == last else VERTEX_DEGREE for color in range(CUBE_VERTICES)]

    assert _leftover_pass(state) is PhaseResult.RESOLVED
    assert all(state.colors[corner] == last for corner in corners)


def test_leftover_pass_waits_for_single_unused_color(sample_net):
    state = Coloring(sample_net)
    _initial_pass(state)
    assert _leftover_pass(state) is PhaseResult.IDLE


def test_rectangle_gets_stuck():
    net = extract_net(layout_puzzle([(x, y) for x in range(3) for y in range(2)]))
    assert color_corners(net) is None


def test_color_folder_sample(color_folder, sample_puzzle):
    fold, _ = color_folder(sample_puzzle)
    assert fold.method == 'colors'
    assert len(fold) == 14


def test_color_folder_strict(color_folder):
    puzzle = layout_puzzle([(x, y) for x in range(3) for y in range(2)])
    assert isinstance(color_folder(puzzle)[0], NoFold)
    with pytest.raises(FoldingError):
        color_folder(puzzle, strict=True)


def test_max_rounds_must_be_positive(color_folder, sample_puzzle):
    with pytest.raises(ValueError):
        color_folder(sample_puzzle, max_rounds=0)
