"""
3x4 affine transforms on integer column vectors: [R | t], applied as R @ v + t.

The cube is centered at the origin with side 2, so every cube vertex is a (+-1, +-1, +-1) point.
A face lies flat in its own local frame on the plane z = -1 with x, y in [-1, 1],
x and y following the net grid axes (y grows downwards).
"""
from typing import Tuple

from numpy import ndarray, array, cross, eye, hstack, zeros, int64

from core import Direction


__all__ = ['IDENTITY', 'translation', 'rotation', 'compose', 'apply', 'fold_step', 'CORNER_OFFSETS']


IDENTITY = hstack((eye(3, dtype=int64), zeros((3, 1), dtype=int64)))

UP_Z = array([0, 0, 1], dtype=int64)

# local face corners, same order as Net.face_corners: (x, y), (x, y+1), (x+1, y+1), (x+1, y)
CORNER_OFFSETS = array([
    [-1, -1, -1],
    [-1, 1, -1],
    [1, 1, -1],
    [1, -1, -1],
], dtype=int64)


def translation(vector) -> ndarray:
    transform = IDENTITY.copy()
    transform[:, 3] = vector
    return transform


def rotation(axis, quarter_turns: int = 1) -> ndarray:
    """
    Right-handed rotation by quarter_turns * 90 degrees about a unit axis.

    Rodrigues formula with sin/cos of quarter turns, stays exact in integers.
    """
    x, y, z = (int(v) for v in axis)
    k = array([
        [0, -z, y],
        [z, 0, -x],
        [-y, x, 0],
    ], dtype=int64)
    sin, cos = ((0, 1), (1, 0), (0, -1), (-1, 0))[quarter_turns % 4]
    matrix = eye(3, dtype=int64) + sin * k + (1 - cos) * (k @ k)
    return hstack((matrix, zeros((3, 1), dtype=int64)))


def compose(outer: ndarray, inner: ndarray) -> ndarray:
    """outer after inner"""
    matrix = outer[:, :3] @ inner[:, :3]
    shift = outer[:, :3] @ inner[:, 3] + outer[:, 3]
    return hstack((matrix, shift.reshape(3, 1)))


def apply(transform: ndarray, vector) -> Tuple[int, int, int]:
    x, y, z = transform[:, :3] @ array(vector, dtype=int64) + transform[:, 3]
    return int(x), int(y), int(z)


def axis_of(direction: Direction) -> ndarray:
    """Hinge axis for folding the neighbour in the given direction up towards +z"""
    dx, dy = direction.delta
    return cross(array([dx, dy, 0], dtype=int64), UP_Z)


def fold_step(direction: Direction) -> ndarray:
    """
    Transform from a neighbour's local frame to the parent's local frame.

    The neighbour first slides one face over in the net plane (2 units in the parent frame),
    then rotates a quarter turn about the shared edge so it stands up as the adjacent cube side.
    """
    dx, dy = direction.delta
    hinge = array([dx, dy, -1], dtype=int64)
    walk_over = array([2 * dx, 2 * dy, 0], dtype=int64)
    about_hinge = compose(translation(hinge), compose(rotation(axis_of(direction)), translation(-hinge)))
    return compose(about_hinge, translation(walk_over))
