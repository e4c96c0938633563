# net_generator/net_parts/__init__.py

from .parts_generator import NetGen, CallableGenerator

from .layout_generator import GeneratorLayout, SHAPES, SYMMETRIES, transform_layout, all_layouts
from .grid_generator import GeneratorGrid
from .moves_generator import GeneratorMoves


__all__ = ['NetGen', 'CallableGenerator', 'GeneratorLayout', 'GeneratorGrid', 'GeneratorMoves',
           'SHAPES', 'SYMMETRIES', 'transform_layout', 'all_layouts']
