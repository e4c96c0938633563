# net_generator/__init__.py

from .net_parts import NetGen, GeneratorLayout, GeneratorGrid, GeneratorMoves, SHAPES, SYMMETRIES, all_layouts
from .net_factory import NetFactory

__all__ = ['NetFactory', 'SHAPES', 'SYMMETRIES', 'all_layouts']
