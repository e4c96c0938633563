import pytest

from core import Portal, Direction


@pytest.fixture
def portal():
    return Portal((11, 7), (11, 4), Direction.RIGHT, (12, 8), (15, 8), Direction.DOWN)


def test_teleport(portal):
    assert portal.teleport((11, 5), Direction.RIGHT) == ((14, 8), Direction.DOWN)
    assert portal.teleport((11, 7), Direction.RIGHT) == ((12, 8), Direction.DOWN)
    assert portal.teleport((11, 4), Direction.RIGHT) == ((15, 8), Direction.DOWN)


def test_teleport_misses(portal):
    assert portal.teleport((11, 5), Direction.LEFT) is None
    assert portal.teleport((10, 5), Direction.RIGHT) is None
    assert portal.teleport((11, 8), Direction.RIGHT) is None


def test_inverse(portal):
    inverse = portal.inverse()
    assert inverse.entrance_direction is Direction.UP
    assert inverse.exit_direction is Direction.LEFT
    assert inverse.teleport((14, 8), Direction.UP) == ((11, 5), Direction.LEFT)
    assert inverse.inverse() == portal


def test_round_trip(portal):
    for y in range(4, 8):
        landing, facing = portal.teleport((11, y), Direction.RIGHT)
        assert portal.inverse().teleport(landing, facing.opposite()) == ((11, y), Direction.LEFT)


def test_orientation_at(portal):
    assert portal.entrance_orientation_at((11, 6)) is Direction.UP
    assert portal.entrance_orientation_at((12, 6)) is None
    assert Portal.orientation_at((3, 3), (3, 3), (3, 3)) is Direction.DOWN


def test_single_cell_portal():
    portal = Portal((0, 1), (0, 1), Direction.LEFT, (3, 1), (3, 1), Direction.LEFT)
    assert portal.teleport((0, 1), Direction.LEFT) == ((3, 1), Direction.LEFT)


def test_diagonal_segment_rejected():
    with pytest.raises(ValueError):
        Portal((0, 0), (2, 2), Direction.LEFT, (5, 0), (5, 2), Direction.LEFT)


def test_unequal_segments_rejected():
    with pytest.raises(ValueError):
        Portal((0, 0), (0, 3), Direction.LEFT, (5, 0), (5, 2), Direction.LEFT)


def test_portal_is_immutable(portal):
    with pytest.raises(AttributeError):
        portal.entrance_direction = Direction.LEFT
