from collections import deque
from typing import Any, Dict, Optional, Tuple

from numpy import ndarray

from core import Net, CUBE_FACES, CUBE_VERTICES
from cube_folders.folders_abc import Folder, register_folder
from cube_folders.portal_synthesis import synthesize_from_vertices
from .transforms import IDENTITY, CORNER_OFFSETS, apply, compose, fold_step


Position3D = Tuple[int, int, int]


def fold_transforms(net: Net) -> Dict[int, ndarray]:
    """
    Breadth-first placement of every face, starting from face 0 (lowest coordinate) at identity.

    :return: face id -> transform from face local frame to cube frame, for reached faces
    """
    root = 0
    transforms = {root: IDENTITY}
    queue = deque([root])
    while queue:
        face = queue.popleft()
        for direction, other in net.neighbours[face]:
            if other not in transforms:
                transforms[other] = compose(transforms[face], fold_step(direction))
                queue.append(other)
    return transforms


def fold_positions(net: Net) -> Optional[Dict[int, Position3D]]:
    """
    Cube vertex position of every net corner.

    :param net: Net of the cube
    :return: corner id -> (x, y, z) with coordinates +-1, or None if the net does not fold into a cube
    """
    transforms = fold_transforms(net)
    if len(transforms) != len(net.faces):
        return None

    positions: Dict[int, Position3D] = {}
    for face, corners in enumerate(net.face_corners):
        placed = [apply(transforms[face], offset) for offset in CORNER_OFFSETS]
        for corner, position in zip(corners, placed):
            if positions.setdefault(corner, position) != position:
                return None

    # two faces folded onto the same side leave other vertices unused
    sides = {frozenset(positions[corner] for corner in corners) for corners in net.face_corners}
    if len(sides) != CUBE_FACES or len(set(positions.values())) != CUBE_VERTICES:
        return None
    return positions


@register_folder('affine', 'af')
class AffineFolder(Folder):
    """
    Geometric folder: carries a rotation + translation across the face adjacency graph
    and glues net edges whose corners land on the same cube vertices.
    """
    _allowed_kwargs = {'strict': bool}

    def _fold(self, net: Net, **kwargs: Any):
        positions = fold_positions(net)
        if positions is None:
            return None, None
        return positions, synthesize_from_vertices(net, positions)
