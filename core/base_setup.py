from enum import Enum, IntEnum
from typing import Tuple

from numpy import array, int8


# File: core/base_setup.py
__all__ = [
    'VOID', 'FREE', 'STONE', 'CELL_MAP', 'CELL_MAP_REVERSE', 'CELL_INTS', 'CELL_SYMBOLS',
    'mapper_to_str', 'mapper_to_int', 'Direction', 'Turn',
    'CUBE_FACES', 'CUBE_VERTICES', 'CUBE_EDGES', 'VERTEX_DEGREE', 'SEAMS',
]


# cell codes, grid is stored as int8 matrix
VOID = 0
FREE = 1
STONE = 2

CELL_MAP = {
    VOID: " ",
    FREE: ".",
    STONE: "#",
}
CELL_MAP_REVERSE = {v: k for k, v in CELL_MAP.items()}

CELL_INTS = array(list(CELL_MAP.keys()), dtype=int8)
CELL_SYMBOLS = array(list(CELL_MAP.values()), dtype='<U1')


# mappers
mapper_to_str = CELL_MAP.__getitem__
mapper_to_int = CELL_MAP_REVERSE.__getitem__


# cube constants
CUBE_FACES = 6
CUBE_VERTICES = 8
CUBE_EDGES = 12
VERTEX_DEGREE = 3                       # faces meeting at each cube vertex
SEAMS = CUBE_EDGES - (CUBE_FACES - 1)   # edges not already joined by the net


class Direction(IntEnum):
    """
    Facing on the grid, values are the facing numbers used in the password.

    Grid coordinates are (x, y) = (column, row), y grows downwards.
    """
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def opposite(self) -> 'Direction':
        return Direction((self + 2) % 4)

    def turn_cw(self) -> 'Direction':
        return Direction((self + 1) % 4)

    def turn_ccw(self) -> 'Direction':
        return Direction((self + 3) % 4)


_DELTAS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}
_SYMBOLS = {
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.UP: "^",
}


class Turn(Enum):
    LEFT = "L"
    RIGHT = "R"

    def apply(self, direction: Direction) -> Direction:
        if self is Turn.LEFT:
            return direction.turn_ccw()
        return direction.turn_cw()
