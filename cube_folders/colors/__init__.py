# cube_folders/colors/__init__.py

from .folder_colors import ColorFolder, color_corners, PhaseResult

__all__ = ['ColorFolder', 'color_corners', 'PhaseResult']
