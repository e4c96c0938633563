# /common/__init__.py
# lazy empty module for grouping imports
# use for wild-card import

from core import Puzzle, DUMMY_PUZZLE, Portal, Fold, NoFold, Direction, Turn, parse_puzzle, walk, password, cprint
from cube_folders import get_folder, synthesize_portals
from net_generator import NetFactory

import core             # noqa
import cube_folders     # noqa
import net_generator    # noqa


__all__ = [
    'Puzzle', 'DUMMY_PUZZLE', 'Portal', 'Fold', 'NoFold', 'Direction', 'Turn',
    'parse_puzzle', 'walk', 'password', 'cprint', 'get_folder', 'synthesize_portals', 'NetFactory',
]
