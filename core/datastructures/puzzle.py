from dataclasses import dataclass
from typing import Tuple, Self
from numpy import ndarray, integer, issubdtype, array, isin

from core.base_setup import CELL_INTS, FREE, VOID, Turn


@dataclass(slots=True)
class Puzzle:
    """
    Represents single monkey-map puzzle: the unfolded cube net and the path to walk.

    - grid: ndarray(shape=(height, width), dtype=int8) of VOID/FREE/STONE codes, rows padded with VOID
    - moves: Tuple[int|Turn, ...] forward distances and turns
    """
    grid: ndarray
    moves: Tuple[int|Turn, ...] = ()

    def __post_init__(self):
        self._validate_inputs()

    def _validate_inputs(self):
        grid = self.grid
        moves = self.moves

        if not isinstance(grid, ndarray):
            raise TypeError("grid must be ndarray")
        if grid.ndim != 2 or grid.size == 0 or not issubdtype(grid.dtype, integer):
            raise ValueError("grid must be non-empty 2d integer array")
        if not isin(grid, CELL_INTS).all():
            raise ValueError(f"grid may contain only cell codes {CELL_INTS.tolist()}")
        if not isinstance(moves, tuple):
            raise TypeError("moves must be tuple")
        for move in moves:
            if isinstance(move, Turn):
                continue
            if isinstance(move, bool) or not isinstance(move, (int, integer)) or move < 0:
                raise ValueError(f"move must be non-negative int or Turn, got {move!r}")

    @property
    def dimensions(self) -> Tuple[int, int]:
        """(width, height) of the padded grid"""
        height, width = self.grid.shape
        return width, height

    def is_void_at(self, position: Tuple[int, int]) -> bool:
        x, y = position
        width, height = self.dimensions
        if not (0 <= x < width and 0 <= y < height):
            return True
        return bool(self.grid[y, x] == VOID)

    def can_walk_on(self, position: Tuple[int, int]) -> bool:
        x, y = position
        width, height = self.dimensions
        if not (0 <= x < width and 0 <= y < height):
            return False
        return bool(self.grid[y, x] == FREE)

    def copy(self) -> Self:
        return Puzzle(grid=self.grid.copy(), moves=self.moves)

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Self:
        return self.copy()

    def __eq__(self, other: Self) -> bool:
        if not isinstance(other, Puzzle):
            return NotImplemented
        return (self.grid.shape == other.grid.shape
                and bool((self.grid == other.grid).all())
                and self.moves == other.moves)


# side 1 cross net, smallest valid cube
DUMMY_PUZZLE: Puzzle = Puzzle(
    grid=array([
        [0, 1, 0, 0],
        [1, 1, 1, 1],
        [0, 1, 0, 0],
    ], dtype='int8'),
    moves=(1, Turn.RIGHT, 1),
)
