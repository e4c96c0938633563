from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from core.base_setup import Direction


Cell = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Edge:
    """
    Oriented unit segment of one face boundary, corners given by id.

    Faces are walked counter-clockwise on screen (Down, Right, Up, Left),
    so the outward normal is the travel direction turned clockwise.
    """
    face: int
    start: int
    end: int
    direction: Direction

    @property
    def outward(self) -> Direction:
        return self.direction.turn_cw()


@dataclass(frozen=True, slots=True)
class Net:
    """
    Face/corner/edge graph of an unfolded cube, all nodes are small integer ids.

    - side: face side length in cells
    - faces: face coordinates (x, y) in side units, sorted
    - corners: lattice points (x, y) in side units, sorted
    - face_corners: per face, ids of corners (x, y), (x, y+1), (x+1, y+1), (x+1, y)
    - edges: 4 per face, face-major, in the same order as face_corners
    - corner_degree: per corner, number of net faces touching it
    - neighbours: per face, (direction, face id) of faces sharing a net edge
    - boundary: ids of edges not shared with another face
    """
    side: int
    faces: Tuple[Cell, ...]
    corners: Tuple[Cell, ...]
    face_corners: Tuple[Tuple[int, int, int, int], ...]
    edges: Tuple[Edge, ...]
    corner_degree: Tuple[int, ...]
    neighbours: Tuple[Tuple[Tuple[Direction, int], ...], ...]
    boundary: Tuple[int, ...]
    face_index: Dict[Cell, int] = field(repr=False, compare=False)
    corner_index: Dict[Cell, int] = field(repr=False, compare=False)

    def face_edges(self, face: int) -> range:
        return range(4 * face, 4 * face + 4)

    def corner_cell(self, face: int, corner: int) -> Cell:
        """Grid cell of the face that touches the given corner"""
        face_x, face_y = self.faces[face]
        corner_x, corner_y = self.corners[corner]
        side = self.side
        x = corner_x * side if corner_x == face_x else corner_x * side - 1
        y = corner_y * side if corner_y == face_y else corner_y * side - 1
        return x, y

    def boundary_cycle(self) -> Optional[List[int]]:
        """
        Boundary edges chained end -> start, starting from the lowest edge id.

        :return: list of edge ids, or None if the boundary is not one simple loop
        """
        if not self.boundary:
            return None

        outgoing: Dict[int, int] = {}
        for edge_id in self.boundary:
            start = self.edges[edge_id].start
            if start in outgoing:
                # corners touched diagonally, boundary pinches
                return None
            outgoing[start] = edge_id

        cycle = [self.boundary[0]]
        while True:
            following = outgoing.get(self.edges[cycle[-1]].end)
            if following is None:
                return None
            if following == cycle[0]:
                break
            if len(cycle) >= len(self.boundary):
                return None
            cycle.append(following)

        if len(cycle) != len(self.boundary):
            return None
        return cycle
