from typing import List, Tuple, FrozenSet

from .parts_generator import NetGen, register_generator


__all__ = ['SHAPES', 'SYMMETRIES', 'transform_layout', 'all_layouts', 'GeneratorLayout']


Layout = Tuple[Tuple[int, int], ...]


def _from_rows(*rows: str) -> Layout:
    return tuple((x, y) for y, row in enumerate(rows) for x, cell in enumerate(row) if cell == "X")


# the 11 nets of the cube, face coordinates in side units
SHAPES: Tuple[Layout, ...] = (
    # 1-4-1
    _from_rows("X...", "XXXX", "X..."),
    _from_rows("X...", "XXXX", ".X.."),
    _from_rows("X...", "XXXX", "..X."),
    _from_rows("X...", "XXXX", "...X"),
    _from_rows(".X..", "XXXX", ".X.."),
    _from_rows(".X..", "XXXX", "..X."),
    # 2-3-1
    _from_rows("XX..", ".XXX", ".X.."),
    _from_rows("XX..", ".XXX", "..X."),
    _from_rows("XX..", ".XXX", "...X"),
    # 2-2-2
    _from_rows("XX..", ".XX.", "..XX"),
    # 3-3
    _from_rows("XXX..", "..XXX"),
)

# the 8 symmetries of the square as (x, y) -> (x', y')
SYMMETRIES = (
    lambda x, y: (x, y),
    lambda x, y: (-y, x),
    lambda x, y: (-x, -y),
    lambda x, y: (y, -x),
    lambda x, y: (-x, y),
    lambda x, y: (x, -y),
    lambda x, y: (y, x),
    lambda x, y: (-y, -x),
)


def transform_layout(layout: Layout, symmetry: int) -> Layout:
    """Apply symmetry and shift back to non-negative coordinates, faces sorted by (x, y)"""
    moved = [SYMMETRIES[symmetry](x, y) for x, y in layout]
    min_x = min(x for x, _ in moved)
    min_y = min(y for _, y in moved)
    return tuple(sorted((x - min_x, y - min_y) for x, y in moved))


def all_layouts() -> List[Layout]:
    """Every distinct placement of the 11 nets on the grid: 64 layouts"""
    seen: set[FrozenSet[Tuple[int, int]]] = set()
    layouts = []
    for shape in SHAPES:
        for symmetry in range(len(SYMMETRIES)):
            layout = transform_layout(shape, symmetry)
            if frozenset(layout) not in seen:
                seen.add(frozenset(layout))
                layouts.append(layout)
    return layouts


@register_generator('layout')
class GeneratorLayout(NetGen):
    def __call__(self, shape: int = None, symmetry: int = None) -> Layout:
        """
        Picks net layout, random shape and/or symmetry if not given.

        :param shape: index in SHAPES
        :param symmetry: index in SYMMETRIES
        :return: face coordinates in side units
        """
        if shape is None:
            shape = int(self.rng.integers(0, len(SHAPES)))
        if symmetry is None:
            symmetry = int(self.rng.integers(0, len(SYMMETRIES)))
        if not 0 <= shape < len(SHAPES):
            raise ValueError(f"Invalid shape: {shape}, must be in [0, {len(SHAPES)})")
        if not 0 <= symmetry < len(SYMMETRIES):
            raise ValueError(f"Invalid symmetry: {symmetry}, must be in [0, {len(SYMMETRIES)})")
        return transform_layout(SHAPES[shape], symmetry)
