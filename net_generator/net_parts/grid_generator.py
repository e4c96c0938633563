from numpy import ndarray, int8, full, flatnonzero

from core.base_setup import VOID, FREE, STONE
from .parts_generator import NetGen, register_generator


@register_generator('grid')
class GeneratorGrid(NetGen):
    def __call__(self, layout, side: int, stone_ratio: float = 0.0) -> ndarray:
        """
        Draws faces of the layout on void grid and scatters stones over them.

        The first map cell of the top row is always left free, the walker starts there.

        :param layout: face coordinates in side units
        :param side: face side length in cells
        :param stone_ratio: chance of every map cell to be stone, in [0, 1)
        :return: ndarray(shape=(height, width), dtype=int8)
        """
        if side < 1:
            raise ValueError(f"Invalid side: {side}. Must be a positive integer.")
        if not 0.0 <= stone_ratio < 1.0:
            raise ValueError(f"Invalid stone_ratio: {stone_ratio}. Must be in [0, 1).")

        width = (max(x for x, _ in layout) + 1) * side
        height = (max(y for _, y in layout) + 1) * side
        grid = full((height, width), VOID, dtype=int8)

        for x, y in layout:
            face = grid[y * side:(y + 1) * side, x * side:(x + 1) * side]
            stones = self.rng.random(face.shape) < stone_ratio
            face[...] = FREE
            face[stones] = STONE

        start = flatnonzero(grid[0] != VOID)[0]
        grid[0, start] = FREE
        return grid
