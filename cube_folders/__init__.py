# cube_folders/__init__.py

from .affine import AffineFolder
from .colors import ColorFolder

from .folders_abc import FoldingError, folder_registry
from .folders_getter import get_folder, synthesize_portals

__all__ = ['get_folder', 'synthesize_portals', 'FoldingError', 'folder_registry']
