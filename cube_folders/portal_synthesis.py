"""
Edge matcher and portal synthesizer shared by all folders.

Folders only decide which cube vertex every net corner lands on (a 3D position, a color, ...).
Two boundary edges are glued when they run between the same two cube vertices in opposite
directions: faces are walked counter-clockwise, so a crease reverses the walking order.
"""
from typing import Dict, Hashable, List, Optional, Tuple

from core import Net, Portal, SEAMS


__all__ = ['match_edges', 'portals_from_matches', 'synthesize_from_vertices']


def match_edges(net: Net, vertex_of: Dict[int, Hashable]) -> Optional[List[Tuple[int, int]]]:
    """
    Pair boundary edges of the net into seams.

    :param net: Net of the cube
    :param vertex_of: net corner id -> cube vertex key
    :return: pairs of edge ids (lower id first, sorted), or None if some edge has no unique partner
    """
    by_vertices: Dict[Tuple[Hashable, Hashable], int] = {}
    for edge_id in net.boundary:
        edge = net.edges[edge_id]
        key = (vertex_of[edge.start], vertex_of[edge.end])
        if key[0] == key[1] or key in by_vertices:
            return None
        by_vertices[key] = edge_id

    pairs = []
    matched = set()
    for edge_id in net.boundary:
        if edge_id in matched:
            continue
        edge = net.edges[edge_id]
        partner = by_vertices.get((vertex_of[edge.end], vertex_of[edge.start]))
        if partner is None or partner in matched:
            return None
        matched.update((edge_id, partner))
        pairs.append((edge_id, partner))

    if len(pairs) != SEAMS:
        return None
    return pairs


def portals_from_matches(net: Net, pairs: List[Tuple[int, int]]) -> Tuple[Portal, ...]:
    """
    Direct portal and its inverse for every seam.

    Entrance cells are the last cells of the first face along its edge, exit cells the first cells
    of the second face, so a crossing lands one step beyond the entrance segment.
    """
    portals = []
    for first, second in pairs:
        entrance = net.edges[first]
        exit_ = net.edges[second]
        portal = Portal(
            entrance_start=net.corner_cell(entrance.face, entrance.start),
            entrance_end=net.corner_cell(entrance.face, entrance.end),
            entrance_direction=entrance.direction.turn_cw(),
            exit_start=net.corner_cell(exit_.face, exit_.end),
            exit_end=net.corner_cell(exit_.face, exit_.start),
            exit_direction=exit_.direction.turn_ccw(),
        )
        portals.append(portal)
        portals.append(portal.inverse())
    return tuple(portals)


def synthesize_from_vertices(net: Net, vertex_of: Dict[int, Hashable]) -> Optional[Tuple[Portal, ...]]:
    pairs = match_edges(net, vertex_of)
    if pairs is None:
        return None
    return portals_from_matches(net, pairs)
