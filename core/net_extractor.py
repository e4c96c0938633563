from collections import deque
from math import gcd
from typing import List, Optional, Tuple

from core.base_setup import CUBE_FACES, VOID, Direction
from core.datastructures import Puzzle, Net, Edge


__all__ = ['side_length', 'face_coordinates', 'extract_net']


def side_length(puzzle: Puzzle) -> int:
    """Face side length of the unfolded cube, gcd of grid dimensions"""
    width, height = puzzle.dimensions
    return gcd(width, height)


def face_coordinates(puzzle: Puzzle, side: int) -> List[Tuple[int, int]]:
    """
    Coordinates (x, y) in side units of every side x side block holding at least one non-void cell.
    Sorted, so every later traversal is deterministic.
    """
    width, height = puzzle.dimensions
    grid = puzzle.grid
    faces = []
    for y in range(height // side):
        for x in range(width // side):
            block = grid[y * side:(y + 1) * side, x * side:(x + 1) * side]
            if (block != VOID).any():
                faces.append((x, y))
    return sorted(faces)


def extract_net(puzzle: Puzzle) -> Optional[Net]:
    """
    Build the face/corner/edge graph of the unfolded cube drawn on the puzzle grid.

    :param puzzle: Puzzle with cube net grid
    :return: Net, or None if the grid is not 6 connected faces
    """
    side = side_length(puzzle)
    faces = face_coordinates(puzzle, side)
    if len(faces) != CUBE_FACES:
        return None

    face_index = {face: i for i, face in enumerate(faces)}

    # corners, counter-clockwise on screen
    face_points = [
        ((x, y), (x, y + 1), (x + 1, y + 1), (x + 1, y))
        for x, y in faces
    ]
    corners = sorted({point for points in face_points for point in points})
    corner_index = {point: i for i, point in enumerate(corners)}

    degree = [0] * len(corners)
    face_corners = []
    for points in face_points:
        ids = tuple(corner_index[point] for point in points)
        for corner in ids:
            degree[corner] += 1
        face_corners.append(ids)

    sides = (Direction.DOWN, Direction.RIGHT, Direction.UP, Direction.LEFT)
    edges = []
    for face, ids in enumerate(face_corners):
        for k, direction in enumerate(sides):
            edges.append(Edge(face=face, start=ids[k], end=ids[(k + 1) % 4], direction=direction))

    # shared edge is walked both ways by its two faces
    by_ends = {(edge.start, edge.end): i for i, edge in enumerate(edges)}
    boundary = tuple(i for i, edge in enumerate(edges) if (edge.end, edge.start) not in by_ends)

    neighbours = []
    for x, y in faces:
        adjacent = []
        for direction in Direction:
            dx, dy = direction.delta
            other = face_index.get((x + dx, y + dy))
            if other is not None:
                adjacent.append((direction, other))
        neighbours.append(tuple(adjacent))

    if not _is_connected(neighbours):
        return None

    return Net(
        side=side,
        faces=tuple(faces),
        corners=tuple(corners),
        face_corners=tuple(face_corners),
        edges=tuple(edges),
        corner_degree=tuple(degree),
        neighbours=tuple(neighbours),
        boundary=boundary,
        face_index=face_index,
        corner_index=corner_index,
    )


def _is_connected(neighbours: List[Tuple[Tuple[Direction, int], ...]]) -> bool:
    seen = {0}
    queue = deque([0])
    while queue:
        face = queue.popleft()
        for _, other in neighbours[face]:
            if other not in seen:
                seen.add(other)
                queue.append(other)
    return len(seen) == len(neighbours)
