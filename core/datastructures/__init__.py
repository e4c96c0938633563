# core/datastructures/__init__.py

from .puzzle import Puzzle, DUMMY_PUZZLE
from .portal import Portal
from .net import Net, Edge
from .fold import Fold, NoFold

__all__ = ['Puzzle', 'DUMMY_PUZZLE', 'Portal', 'Net', 'Edge', 'Fold', 'NoFold']
