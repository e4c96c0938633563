"""
Topological folder, no coordinates in 3D.

Every net corner gets a color naming the cube vertex it folds onto. A color is finished once the
net degrees of its corners add up to 3 (three faces meet at every cube vertex). The two boundary
edges leaving a finished corner can only be glued to each other, so their far corners share a
color too. Starting from the corners where three faces already meet in the net, this zips the
boundary up seam by seam.
"""
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from core import Net, CUBE_VERTICES, VERTEX_DEGREE
from cube_folders.folders_abc import Folder, register_folder
from cube_folders.portal_synthesis import synthesize_from_vertices


__all__ = ['GRAY', 'MAX_ROUNDS', 'PhaseResult', 'Coloring', 'color_corners', 'ColorFolder']


GRAY = -1       # not resolved yet
MAX_ROUNDS = 32


class PhaseResult(Enum):
    RESOLVED = 'resolved'
    PROGRESS = 'progress'
    IDLE = 'idle'
    STUCK = 'stuck'


class Coloring:
    """
    Mutable state of a single coloring run.

    - colors: per corner id, color in range(CUBE_VERTICES) or GRAY
    - degree: per color, summed net degree of its corners, never above VERTEX_DEGREE
    - cycle: boundary edge ids not glued yet, in boundary order
    """

    def __init__(self, net: Net):
        self.net = net
        self.colors: List[int] = [GRAY] * len(net.corners)
        self.degree: List[int] = [0] * CUBE_VERTICES
        self.used: List[bool] = [False] * CUBE_VERTICES
        self.cycle: Optional[List[int]] = net.boundary_cycle()

    @property
    def gray(self) -> List[int]:
        return [corner for corner, color in enumerate(self.colors) if color == GRAY]

    @property
    def resolved(self) -> bool:
        return (GRAY not in self.colors
                and all(self.used)
                and all(total == VERTEX_DEGREE for total in self.degree))

    def outcome(self, progressed: bool) -> PhaseResult:
        if self.resolved:
            return PhaseResult.RESOLVED
        return PhaseResult.PROGRESS if progressed else PhaseResult.IDLE

    def fresh(self) -> Optional[int]:
        for color, used in enumerate(self.used):
            if not used:
                self.used[color] = True
                return color
        return None

    def paint(self, corner: int, color: int) -> bool:
        total = self.degree[color] + self.net.corner_degree[corner]
        if total > VERTEX_DEGREE:
            return False
        self.colors[corner] = color
        self.degree[color] = total
        return True

    def is_complete(self, corner: int) -> bool:
        color = self.colors[corner]
        return color != GRAY and self.degree[color] == VERTEX_DEGREE

    def unify(self, a: int, b: int) -> bool:
        """
        Mark corners a and b as the same cube vertex.
        :return: False if that would put more than 3 faces on one vertex
        """
        color_a, color_b = self.colors[a], self.colors[b]

        if a == b or (color_a == color_b and color_a != GRAY):
            if color_a == GRAY:
                color = self.fresh()
                return color is not None and self.paint(a, color)
            return True

        if color_a == GRAY and color_b == GRAY:
            color = self.fresh()
            return color is not None and self.paint(a, color) and self.paint(b, color)
        if color_a == GRAY:
            return self.paint(a, color_b)
        if color_b == GRAY:
            return self.paint(b, color_a)

        # two finished chains meet, keep the lower color
        keep, drop = min(color_a, color_b), max(color_a, color_b)
        if self.degree[keep] + self.degree[drop] > VERTEX_DEGREE:
            return False
        self.colors = [keep if color == drop else color for color in self.colors]
        self.degree[keep] += self.degree[drop]
        self.degree[drop] = 0
        self.used[drop] = False
        return True

    def position_of(self, corner: int) -> Optional[int]:
        """Index in cycle of the boundary edge leaving corner, if it is still open"""
        edges = self.net.edges
        for index, edge_id in enumerate(self.cycle):
            if edges[edge_id].start == corner:
                return index
        return None

    def zip_at(self, index: int) -> bool:
        """
        Glue the two open boundary edges meeting at cycle position index:
        the edge before it ends where the edge at it starts.
        """
        edges = self.net.edges
        size = len(self.cycle)
        before = self.cycle[index - 1]
        after = self.cycle[index]
        glued = self.unify(edges[before].start, edges[after].end)

        if size <= 2:
            self.cycle.clear()
        else:
            for position in sorted({(index - 1) % size, index}, reverse=True):
                del self.cycle[position]
        return glued

    def vertex_map(self) -> Dict[int, int]:
        return dict(enumerate(self.colors))


def _initial_pass(state: Coloring) -> PhaseResult:
    """
    Corners where three faces meet in the net are whole cube vertices.

    Corners of lower degree stay gray, zipping gives them the color of the vertex they fold onto.
    """
    if state.cycle is None:
        return PhaseResult.STUCK

    progressed = False
    for corner, degree in enumerate(state.net.corner_degree):
        if degree == VERTEX_DEGREE and state.colors[corner] == GRAY:
            color = state.fresh()
            if color is None or not state.paint(corner, color):
                return PhaseResult.STUCK
            progressed = True
    return state.outcome(progressed)


def _diagonal_pass(state: Coloring) -> PhaseResult:
    """
    Scan 2x2 blocks of faces with exactly one face missing.

    The corner in the middle of the block is finished, so the two corners of the missing face
    next to it fold together: a gray one takes the other's color, two gray ones get a fresh color.
    """
    net = state.net
    xs = [x for x, _ in net.faces]
    ys = [y for _, y in net.faces]

    progressed = False
    for block_y in range(min(ys) - 1, max(ys) + 1):
        for block_x in range(min(xs) - 1, max(xs) + 1):
            present = sum(
                (block_x + i, block_y + j) in net.face_index
                for i in (0, 1) for j in (0, 1)
            )
            if present != 3:
                continue

            middle = net.corner_index[(block_x + 1, block_y + 1)]
            if not state.is_complete(middle):
                continue
            index = state.position_of(middle)
            if index is None:
                continue
            if state.colors[net.edges[state.cycle[index - 1]].end] != state.colors[middle]:
                continue
            if not state.zip_at(index):
                return PhaseResult.STUCK
            progressed = True
    return state.outcome(progressed)


def _distant_pass(state: Coloring) -> PhaseResult:
    """
    Continue zipping from corners finished by earlier merges.

    Restarts the scan after every zip, since a zip shortens the open boundary.
    """
    edges = state.net.edges
    progressed = False
    while state.cycle:
        for index, edge_id in enumerate(state.cycle):
            if state.is_complete(edges[edge_id].start):
                if not state.zip_at(index):
                    return PhaseResult.STUCK
                progressed = True
                break
        else:
            break
    return state.outcome(progressed)


def _leftover_pass(state: Coloring) -> PhaseResult:
    """
    Last cube vertex: one unused color and gray corners adding up to exactly three faces.

    Zipping colors every net on its own; this pass only catches a zip run that stalled one vertex short.
    """
    unused = [color for color, used in enumerate(state.used) if not used]
    gray = state.gray
    if len(unused) != 1 or len(gray) != VERTEX_DEGREE:
        return state.outcome(False)
    if sum(state.net.corner_degree[corner] for corner in gray) != VERTEX_DEGREE:
        return state.outcome(False)

    color = state.fresh()
    for corner in gray:
        state.paint(corner, color)
    return state.outcome(True)


PHASES: Tuple[Callable[[Coloring], PhaseResult], ...] = (_diagonal_pass, _distant_pass, _leftover_pass)


def color_corners(net: Net, max_rounds: int = MAX_ROUNDS,
                  trace: Optional[List[Tuple[str, Tuple[int, ...]]]] = None) -> Optional[Dict[int, int]]:
    """
    Color every net corner with the cube vertex it folds onto.

    Phases run in order and are repeated until the coloring is resolved; a round without progress,
    a vertex collecting more than three faces or running out of rounds gives up.

    :param net: Net of the cube
    :param max_rounds: bound on phase rounds
    :param trace: optional list, receives (phase name, color degrees) after every phase
    :return: corner id -> color, or None if the coloring got stuck
    """
    state = Coloring(net)

    result = _initial_pass(state)
    if trace is not None:
        trace.append((_initial_pass.__name__, tuple(state.degree)))
    if result is PhaseResult.STUCK:
        return None
    if result is PhaseResult.RESOLVED:
        return state.vertex_map()

    for _ in range(max_rounds):
        progressed = False
        for phase in PHASES:
            result = phase(state)
            if trace is not None:
                trace.append((phase.__name__, tuple(state.degree)))
            if result is PhaseResult.STUCK:
                return None
            if result is PhaseResult.RESOLVED:
                return state.vertex_map()
            progressed |= result is PhaseResult.PROGRESS
        if not progressed:
            return None
    return None


@register_folder('colors', 'cc')
class ColorFolder(Folder):
    """
    Topological folder: colors net corners by cube vertex through boundary zipping,
    then glues net edges between the same pair of colors.
    """
    _allowed_kwargs = {'strict': bool, 'max_rounds': int}

    def _fold(self, net: Net, **kwargs: Any):
        max_rounds = kwargs.get('max_rounds', MAX_ROUNDS)
        if max_rounds < 1:
            raise ValueError(f"max_rounds must be positive, got {max_rounds}")

        colors = color_corners(net, max_rounds=max_rounds)
        if colors is None:
            return None, None
        return colors, synthesize_from_vertices(net, colors)
