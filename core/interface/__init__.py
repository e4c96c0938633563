# core/interface/__init__.py

from .puzzle_translator import map_cells, parse_grid, parse_moves, parse_puzzle, format_grid, format_moves
from .console_interface import aligned_print, grid_print, net_print, cprint

__all__ = [
    'map_cells', 'parse_grid', 'parse_moves', 'parse_puzzle', 'format_grid', 'format_moves',
    'aligned_print', 'grid_print', 'net_print', 'cprint',
]
