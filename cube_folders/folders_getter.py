from typing import overload, Literal, Optional, Tuple, Dict

from core import Puzzle, Portal, NoFold
from .affine import AffineFolder
from .colors import ColorFolder
from .folders_abc import Folder, folder_registry


__all__ = ['get_folder', 'synthesize_portals']


_instances: Dict[type, Folder] = {}


@overload
def get_folder(name: Literal['affine', 'af']) -> AffineFolder: ...

@overload
def get_folder(name: Literal['colors', 'cc']) -> ColorFolder: ...


def get_folder(name: str) -> Folder:
    """
    Retrieve a Folder instance by name, acting as a factory for creating Folder instances.

    Main folder interface provides ``.solve(puzzle:Puzzle,**kwargs)`` method returning ``(Fold|NoFold, time)``.
    Each folder also supports ``.solve_iter(puzzles:Iterable[Puzzle],**kwargs)`` for batch processing.
    Shortcut methods ``.s()`` and ``.__call__()`` are available (all require same args/kwargs as ``.solve()``).

    Supported Folders & type code:
        - **Affine** ``{'affine','af'}``: places faces in 3D by composing quarter-turn rotations across the net.
        - **Corner colors** ``{'colors','cc'}``: colors net corners by cube vertex, zipping the boundary from
          corners where three faces meet. No geometry involved.

    ---

    Keyword arguments by Folder:

    **All**
       - ``strict``: *bool* = ``False``
         Raise ``FoldingError`` instead of returning ``NoFold``.
    **Corner colors**
       - ``max_rounds``: *int* = ``32``
         Bound on repeated coloring phases, must be positive.

    .. note::
        Both folders yield the same set of portals on every valid net.

    :param name: Folder type code: (`'affine'`, `'colors'`), including corresponding shortcuts.
    :return: Instance of the specified Folder subclass.
    """
    folder_class = folder_registry.get(name, None)
    if not folder_class:
        raise ValueError(f"Unknown folder: {name}, must be one of {list(folder_registry.keys())}")
    return folder_class()


def synthesize_portals(puzzle: Puzzle, method: str = 'affine') -> Optional[Tuple[Portal, ...]]:
    """
    Portals of the cube drawn on the puzzle grid.

    Folder instances are cached per class, so warm-up happens once.

    :param puzzle: Puzzle with unfolded cube
    :param method: Folder type code, look ``get_folder``
    :return: 14 portals (7 seams, both directions), or None if the grid does not fold into a cube
    """
    folder_class = folder_registry.get(method, None)
    if not folder_class:
        raise ValueError(f"Unknown folder: {method}, must be one of {list(folder_registry.keys())}")
    if folder_class not in _instances:
        _instances[folder_class] = folder_class()

    fold, _ = _instances[folder_class].solve(puzzle)
    if isinstance(fold, NoFold):
        return None
    return fold.portals
