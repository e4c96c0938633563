# core/__init__.py

from .base_setup import (VOID, FREE, STONE, CELL_MAP, CELL_MAP_REVERSE, CELL_INTS, CELL_SYMBOLS,
                         mapper_to_str, mapper_to_int, Direction, Turn,
                         CUBE_FACES, CUBE_VERTICES, CUBE_EDGES, VERTEX_DEGREE, SEAMS)

from .datastructures import Puzzle, DUMMY_PUZZLE, Portal, Net, Edge, Fold, NoFold
from .net_extractor import side_length, face_coordinates, extract_net
from .walker import go_from, Walker, walk, password
from .portal_verifier import validate_portals, verify_portals
from .interface import (map_cells, parse_grid, parse_moves, parse_puzzle, format_grid, format_moves,
                        aligned_print, grid_print, net_print, cprint)


__all__ = []
__all__ += base_setup.__all__
__all__ += datastructures.__all__
__all__ += net_extractor.__all__
__all__ += walker.__all__
__all__ += portal_verifier.__all__
__all__ += interface.__all__
