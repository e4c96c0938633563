import pytest
from numpy import array, array_equal

from core import Direction
from cube_folders.affine.transforms import (IDENTITY, CORNER_OFFSETS, translation, rotation, compose,
                                            apply, axis_of, fold_step)


def test_rotation_is_right_handed():
    assert apply(rotation((0, 0, 1)), (1, 0, 0)) == (0, 1, 0)
    assert apply(rotation((1, 0, 0)), (0, 1, 0)) == (0, 0, 1)


@pytest.mark.parametrize('axis', [(1, 0, 0), (0, -1, 0), (0, 0, 1)])
def test_four_quarter_turns_are_identity(axis):
    full_turn = IDENTITY
    for _ in range(4):
        full_turn = compose(rotation(axis), full_turn)
    assert array_equal(full_turn, IDENTITY)
    assert array_equal(rotation(axis, 4), IDENTITY)


def test_translations_compose():
    assert array_equal(compose(translation([1, 2, 3]), translation([-4, 0, 1])), translation([-3, 2, 4]))


def test_compose_order():
    # rotate first, then shift
    transform = compose(translation([5, 0, 0]), rotation((0, 0, 1)))
    assert apply(transform, (1, 0, 0)) == (5, 1, 0)


def test_axis_of():
    assert tuple(axis_of(Direction.RIGHT)) == (0, -1, 0)
    assert tuple(axis_of(Direction.DOWN)) == (1, 0, 0)


def test_fold_step_keeps_hinge():
    step = fold_step(Direction.RIGHT)
    # neighbour's left edge lands on parent's right edge
    assert apply(step, (-1, -1, -1)) == (1, -1, -1)
    assert apply(step, (-1, 1, -1)) == (1, 1, -1)
    # far edge stands up
    assert apply(step, (1, -1, -1)) == (1, -1, 1)


@pytest.mark.parametrize('direction', list(Direction))
def test_fold_step_lands_on_cube(direction):
    placed = [apply(fold_step(direction), offset) for offset in CORNER_OFFSETS]
    assert all(abs(c) == 1 for corner in placed for c in corner)
    shared = set(placed) & {apply(IDENTITY, offset) for offset in CORNER_OFFSETS}
    assert len(shared) == 2


def test_identity_apply():
    assert apply(IDENTITY, array([1, -1, 1])) == (1, -1, 1)
