from typing import Tuple

from core.base_setup import Turn
from .parts_generator import NetGen, register_generator


@register_generator('moves')
class GeneratorMoves(NetGen):
    def __call__(self, n_moves: int, max_distance: int) -> Tuple[int|Turn, ...]:
        """
        Forward distances in [1, max_distance] separated by random turns, starting and ending with distance.

        :param n_moves: number of forward moves
        :param max_distance: longest forward move
        """
        if n_moves < 0:
            raise ValueError(f"Invalid n_moves: {n_moves}. Must be non-negative.")
        if max_distance < 1:
            raise ValueError(f"Invalid max_distance: {max_distance}. Must be positive.")

        moves = []
        for i in range(n_moves):
            if i:
                moves.append(Turn.LEFT if self.rng.integers(0, 2) else Turn.RIGHT)
            moves.append(int(self.rng.integers(1, max_distance + 1)))
        return tuple(moves)
