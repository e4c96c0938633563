import re
from typing import List, Tuple

from numpy import ndarray, vectorize, integer, array, full, int8

from core.base_setup import mapper_to_int, mapper_to_str, VOID, Turn
from core.datastructures import Puzzle

__all__ = ['map_cells', 'parse_grid', 'parse_moves', 'parse_puzzle', 'format_grid', 'format_moves']


MOVE_TOKEN = re.compile(r"\d+|[LR]")


def map_cells(arraylike):
    """
    Automatically maps all elements in a 2d list or 2d ndarray between map symbols and their cell codes

    :param arraylike: 2d list or array of symbols (str) or codes (int)
    :return: 2d list or array of same shape as input with converted values (str <-> int)
    :raises ValueError: if input contains unknown values
    :raises TypeError: if input is not consistent in types
    """
    if isinstance(arraylike, ndarray):
        if arraylike.ndim != 2 or arraylike.size == 0:
            raise ValueError("Input array must be 2D and non-empty")
        first = arraylike.flat[0]
    else:
        if not arraylike or not len(arraylike[0]):
            raise ValueError("Input is empty")
        first = arraylike[0][0]

    if isinstance(first, str):
        mapper = mapper_to_int
    elif isinstance(first, (int, integer)):
        mapper = mapper_to_str
    else:
        raise TypeError(f"Unsupported type: {type(first).__name__}. Must be int or str")

    try:
        if isinstance(arraylike, ndarray):
            converted = vectorize(mapper)(arraylike)
        else:
            converted = [[mapper(cell) for cell in row] for row in arraylike]
    except KeyError as e:
        raise ValueError(f"Unknown value: {e.args[0]!r}")

    return converted


def parse_grid(text: str) -> ndarray:
    """
    Parse map rows into an int8 grid, shorter rows are padded with void.

    :param text: rows of ' ', '.', '#' separated by newlines
    :return: ndarray(shape=(height, width), dtype=int8)
    """
    rows = text.splitlines()
    while rows and not rows[-1].strip():
        rows.pop()
    if not rows:
        raise ValueError("Map is empty")

    width = max(len(row) for row in rows)
    grid = full((len(rows), width), VOID, dtype=int8)
    for y, row in enumerate(rows):
        if row:
            grid[y, :len(row)] = map_cells([list(row)])[0]
    return grid


def parse_moves(text: str) -> Tuple[int|Turn, ...]:
    """
    Parse move string like ``10R5L5``.

    :raises ValueError: on characters other than digits, L and R
    """
    text = text.strip()
    tokens = MOVE_TOKEN.findall(text)
    if "".join(tokens) != text:
        raise ValueError(f"Invalid move string: {text!r}")
    return tuple(Turn(token) if token in "LR" else int(token) for token in tokens)


def parse_puzzle(text: str) -> Puzzle:
    """
    Parse full puzzle input: map, blank line, move string.
    """
    text = text.strip("\n")
    map_text, sep, moves_text = text.rpartition("\n\n")
    if not sep:
        map_text, moves_text = text, ""
    return Puzzle(grid=parse_grid(map_text), moves=parse_moves(moves_text))


def format_grid(grid: ndarray) -> str:
    """Inverse of parse_grid, trailing void is stripped from every row"""
    rows: List[str] = ["".join(row).rstrip() for row in map_cells(array(grid))]
    return "\n".join(rows)


def format_moves(moves: Tuple[int|Turn, ...]) -> str:
    return "".join(move.value if isinstance(move, Turn) else str(move) for move in moves)
