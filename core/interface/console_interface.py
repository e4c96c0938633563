from core.datastructures import Puzzle, Fold, NoFold
from core.base_setup import Direction
from core.net_extractor import extract_net
from .puzzle_translator import map_cells, format_moves

from numpy import array
from multipledispatch import dispatch

from collections.abc import Sequence
from typing import Dict, Optional, Tuple


__all__ = ['aligned_print', 'grid_print', 'net_print', 'cprint']


FACE_LABELS = "123456"


def aligned_print(arraylike, *line_suffixes) -> None:
    """
    Prints 2d arraylike with aligned cells in console.

    Allows multiple optional suffixes to be appended to each row, aligns both cells and suffixes.
    Does not verify dimensions.

    :param arraylike: 2d nested list: List[List[ int|str ]] or 2d numpy.ndarray
    :param line_suffixes: optional, each is 1d array-like of same length as given arraylike
    """
    array_len = len(arraylike)
    for suffix in line_suffixes:
        if len(suffix) != array_len:
            raise ValueError("All line_suffixes must have same length as arraylike")

    max_len = max(len(str(cell)) for row in arraylike for cell in row)
    max_num_columns = max(len(row) for row in arraylike)
    row_width = max_len * max_num_columns + (max_num_columns - 1) * 2

    suffix_widths = [max(len(str(value)) for value in suffix) for suffix in line_suffixes]

    for i, row in enumerate(arraylike):
        row_str = "  ".join(str(cell).rjust(max_len) for cell in row).ljust(row_width + 4)
        if line_suffixes:
            suffix_str = "    ".join(str(suffix[i]).rjust(width) for suffix, width in zip(line_suffixes, suffix_widths))
            print(f"{row_str}| {suffix_str}")
        else:
            print(row_str)


def grid_print(grid, trail: Optional[Dict[Tuple[int, int], Direction]] = None) -> None:
    """
    Prints the map with its own symbols, optionally with walker trail drawn as facing arrows.

    :param grid: 2d int array of cell codes
    :param trail: (x, y) -> last facing on that cell, look ``Walker.visited``
    """
    rows = map_cells(array(grid)).tolist()
    if trail:
        for (x, y), direction in trail.items():
            rows[y][x] = direction.symbol
    for row in rows:
        print("".join(row).rstrip())


def net_print(puzzle: Puzzle, fold: Optional[Fold] = None) -> None:
    """
    Prints face layout of the net one character per face, and portals of the fold if given.
    """
    net = extract_net(puzzle)
    if net is None:
        print("Not a cube net")
        return

    width = max(x for x, _ in net.faces) + 1
    height = max(y for _, y in net.faces) + 1
    layout = [["."] * width for _ in range(height)]
    for face, (x, y) in enumerate(net.faces):
        layout[y][x] = FACE_LABELS[face]
    print(f"Net (side {net.side}): ")
    aligned_print(layout)

    if fold is not None and not isinstance(fold, NoFold):
        print(f"Portals ({fold.method or 'unknown'}): ")
        for portal in fold.portals:
            print(f"  {portal}")


@dispatch(Puzzle, bool)
def cprint(puzzle: Puzzle, show_moves: bool = False) -> None:
    """
    Prints single Puzzle in console.
    """
    _puzzle_print(puzzle, show_moves)
@dispatch(Puzzle)
def cprint(puzzle: Puzzle) -> None:
    cprint(puzzle, False)

@dispatch(Puzzle, (Fold, NoFold))
def cprint(puzzle: Puzzle, fold: Fold|NoFold) -> None:
    """
    Prints single Puzzle with its Fold in console.
    """
    _full_print(puzzle, fold)
    print()

@dispatch(Puzzle, (Fold, NoFold), float)
def cprint(puzzle: Puzzle, fold: Fold|NoFold, time) -> None:
    """
    Prints single Puzzle with its Fold and folding time in console.
    """
    _full_print(puzzle, fold)
    print(f"Time: {time:.4}\n")

@dispatch(Puzzle, (list, tuple))
def cprint(puzzle: Puzzle, folds: Sequence[Fold|NoFold]) -> None:
    """
    Prints single Puzzle with Folds of several folders in console.
    """
    if not all(isinstance(fold, (Fold, NoFold)) for fold in folds):
        raise TypeError(f"all folds must be of type {Fold} or {NoFold}")
    for fold in folds:
        _full_print(puzzle, fold)
        print()

@dispatch((list, tuple), (list, tuple), (list, tuple))
def cprint(puzzles: Sequence[Puzzle], folds: Sequence[Fold|NoFold], times: Sequence[float]) -> None:
    """
    Multiple dispatched function for printing Puzzles and Folds in console.

    .. note::
        - Multipledispatch does not support keyword arguments.
        - `Sequence[]` typehint accepts only `List` or `Tuple` (or subclasses).

    Accept different combinations of arguments:
        - ``Puzzle``, ``show_moves``: single puzzle
        - ``Puzzle``, ``Fold|NoFold``: puzzle and its fold
        - ``Puzzle``, ``Fold|NoFold``, ``time``: puzzle, fold and folding time
        - ``Puzzle``, ``Sequence[Fold|NoFold]``: puzzle folded by several folders
        - ``Sequence[Puzzle]``, ``Sequence[Fold|NoFold]``, ``Sequence[float]``: puzzles with folds and times
    """
    if not len(puzzles) == len(folds) == len(times):
        raise ValueError(f"Lengths are not equal: {len(puzzles)}, {len(folds)}, {len(times)}")
    for puzzle, fold, time in zip(puzzles, folds, times):
        if not isinstance(puzzle, Puzzle) or not isinstance(fold, (Fold, NoFold)):
            raise TypeError(f"(puzzle, fold) pair must be of types ({Puzzle}, {Fold}|{NoFold}), not ({type(puzzle)}, {type(fold)})")
        _full_print(puzzle, fold)
        print(f"Time: {time:.4}\n")


def _puzzle_print(puzzle: Puzzle, show_moves: bool = False) -> None:
    print("Map: ")
    grid_print(puzzle.grid)
    if show_moves:
        print(f"Moves: {format_moves(puzzle.moves)}")


def _full_print(puzzle: Puzzle, fold: Fold|NoFold) -> None:
    net_print(puzzle, fold)
    if isinstance(fold, NoFold):
        print(f"Reason:\n{fold.reason}")
