# cube_folders/affine/__init__.py

from .folder_affine import AffineFolder, fold_positions, fold_transforms

__all__ = ['AffineFolder', 'fold_positions', 'fold_transforms']
