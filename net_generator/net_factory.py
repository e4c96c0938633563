from numpy import integer
from numpy.random import Generator, SeedSequence, default_rng, PCG64

from .net_parts import NetGen, CallableGenerator
from core import Puzzle

from typing import List, Self


NET_MODES = set(range(0, 4))


class NetFactory:
    """
    Factory for Puzzle with cube net map, callable object.

    Main method for generation is ``.gen()``, supports shortcut via ``.__call__()``
    Secondary method is ``.gen_manual()``

    .. seealso::
        ``.gen()``
          ``mode:int=0``:
            - ``0``: Default, any net, side 2-6, few stones
            - ``1``: Small, side 4 without stones (same scale as the puzzle example)
            - ``2``: Medium, side 6-10, some stones
            - ``3``: Large, side 10-20, many stones and long walk
          ``amount:int=1``
        ``.gen_manual()``
           ``shape``: index of the net, 0-10
           ``symmetry``: index of the square symmetry, 0-7
           ``side``: face side length in cells
           ``stone_ratio``: chance of every map cell to be stone
           ``n_moves``: number of forward moves
           ``amount:int=1``

    :param seed: optional, seed for main rng, rest derived from it.
    """
    _rng: Generator
    _layout_gen: CallableGenerator
    _grid_gen: CallableGenerator
    _moves_gen: CallableGenerator

    def __init__(self, seed: int|integer=None):
        self.reseed(seed)

    def reseed(self, seed: int|integer=None) -> Self:
        """
        Reset internal RNG states with optional seed, enabling method chaining.

        :param seed: RNG seed. If None, uses system-generated state.
        :return: Self instance
        """
        self._rng = default_rng(seed)

        main_ss_seed = self._rng.integers(0, 2 ** 32)
        main_ss = SeedSequence(main_ss_seed)
        child_gens_seeds = main_ss.spawn(3)
        child_gens = [Generator(PCG64(seed)) for seed in child_gens_seeds]

        self._layout_gen = NetGen.create('layout', child_gens[0])
        self._grid_gen = NetGen.create('grid', child_gens[1])
        self._moves_gen = NetGen.create('moves', child_gens[2])
        return self

    def __call__(self, mode: int = 0) -> Puzzle:
        return self.gen(mode)

    def gen(self, mode: int = 0, amount: int = 1) -> Puzzle|List[Puzzle]:
        """
        Main generator function.

        Generation modes:
            - ``0``: Default, any net, side 2-6, few stones
            - ``1``: Small, side 4 without stones
            - ``2``: Medium, side 6-10, some stones
            - ``3``: Large, side 10-20, many stones and long walk

        :param mode: generation mode (see list above)
        :param amount: Optional number of puzzles to generate. If ``amount>1``, returns list; if ``1`` (default), returns single instance
        :return: ``Puzzle`` instance or ``list`` of ``Puzzle`` instances
        """
        if mode not in NET_MODES:
            raise ValueError(f"invalid mode must be on of {NET_MODES}")
        if not isinstance(amount, int) or amount <= 0:
            raise ValueError("amount must be positive integer")

        puzzles = []
        for _ in range(amount):
            if mode == 0:
                side = int(self._rng.integers(2, 7))
                stone_ratio = 0.05
                n_moves = int(self._rng.integers(10, 31))
            elif mode == 1:
                side = 4
                stone_ratio = 0.0
                n_moves = 10
            elif mode == 2:
                side = int(self._rng.integers(6, 11))
                stone_ratio = 0.1
                n_moves = int(self._rng.integers(50, 101))
            else:
                side = int(self._rng.integers(10, 21))
                stone_ratio = 0.2
                n_moves = int(self._rng.integers(200, 501))

            puzzles.append(self._make(None, None, side, stone_ratio, n_moves))

        if amount == 1:
            return puzzles[0]
        else:
            return puzzles

    def gen_manual(self, shape: int, symmetry: int, side: int, stone_ratio: float = 0.0,
                   n_moves: int = 10, amount: int = 1) -> Puzzle|List[Puzzle]:
        """
        Manually generates Puzzle instance based on specified parameters.

        Does not verify inputs - delegates validation to generators.
        Returns single Puzzle if `amount == 1` (default), or list of Puzzles if `amount > 1`.

        :param shape: index of the net in ``SHAPES`` (0-5: 1-4-1, 6-8: 2-3-1, 9: 2-2-2, 10: 3-3)
        :param symmetry: index in ``SYMMETRIES`` (0-3 rotations, 4-7 reflections)
        :param side: face side length in cells
        :param stone_ratio: chance of every map cell to be stone
        :param n_moves: number of forward moves, distances up to 2 sides
        :param amount: Optional number of puzzles to generate.
        :return: ``Puzzle`` instance or ``list`` of ``Puzzle`` instances
        """
        if not isinstance(amount, int) or amount <= 0:
            raise ValueError("amount must be positive integer")
        puzzles = [self._make(shape, symmetry, side, stone_ratio, n_moves) for _ in range(amount)]
        if amount == 1:
            return puzzles[0]
        else:
            return puzzles

    def _make(self, shape, symmetry, side: int, stone_ratio: float, n_moves: int) -> Puzzle:
        layout = self._layout_gen(shape, symmetry)
        return Puzzle(
            grid=self._grid_gen(layout, side, stone_ratio),
            moves=self._moves_gen(n_moves, 2 * side),
        )
