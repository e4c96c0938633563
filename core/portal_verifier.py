from typing import Iterable

from core.base_setup import SEAMS
from core.datastructures import Puzzle, Portal, Fold


__all__ = ['validate_portals', 'verify_portals']


def _segment_cells(start, end):
    (start_x, start_y), (end_x, end_y) = start, end
    length = max(abs(end_x - start_x), abs(end_y - start_y))
    step_x = (end_x > start_x) - (end_x < start_x)
    step_y = (end_y > start_y) - (end_y < start_y)
    return [(start_x + i * step_x, start_y + i * step_y) for i in range(length + 1)]


def validate_portals(puzzle: Puzzle, portals: Iterable[Portal]) -> bool:
    """
    Validates portals on being glue rules of the puzzle net.

    Every entrance cell lies on the map with void (or grid border) ahead of it,
    every exit cell lies on the map with void behind it, and no crossing is claimed twice.
    :param puzzle: Puzzle the portals were made for
    :param portals: iterable of Portal
    :return: True if all portals satisfy rules
    """
    portals = tuple(portals)
    claimed = set()

    for portal in portals:
        dx, dy = portal.entrance_direction.delta
        for x, y in _segment_cells(portal.entrance_start, portal.entrance_end):
            if puzzle.is_void_at((x, y)):
                print(f"Entrance cell {(x, y)} of portal {portal} is off the map")
                return False
            if not puzzle.is_void_at((x + dx, y + dy)):
                print(f"Entrance cell {(x, y)} of portal {portal} does not face the map edge")
                return False
            if ((x, y), portal.entrance_direction) in claimed:
                print(f"Crossing {(x, y)} {portal.entrance_direction.name} claimed twice")
                return False
            claimed.add(((x, y), portal.entrance_direction))

        dx, dy = portal.exit_direction.delta
        for x, y in _segment_cells(portal.exit_start, portal.exit_end):
            if puzzle.is_void_at((x, y)):
                print(f"Exit cell {(x, y)} of portal {portal} is off the map")
                return False
            if not puzzle.is_void_at((x - dx, y - dy)):
                print(f"Exit cell {(x, y)} of portal {portal} is not entered from the map edge")
                return False

    return True


def verify_portals(puzzle: Puzzle, fold: Fold) -> bool:
    """
    Verifies fold against the puzzle.

    On top of ``validate_portals``: one portal per seam side, every portal's inverse is present,
    and every crossing comes back where it started when walked back.
    """
    portals = fold.portals

    if len(portals) != 2 * SEAMS:
        print(f"Expected {2 * SEAMS} portals, got {len(portals)}")
        return False

    if not validate_portals(puzzle, portals):
        return False

    as_tuples = {portal.as_tuple() for portal in portals}
    for portal in portals:
        inverse = portal.inverse()
        if inverse.as_tuple() not in as_tuples:
            print(f"Portal {portal} has no inverse")
            return False

        for cell in _segment_cells(portal.entrance_start, portal.entrance_end):
            landing, facing = portal.teleport(cell, portal.entrance_direction)
            back = inverse.teleport(landing, facing.opposite())
            if back != (cell, portal.entrance_direction.opposite()):
                print(f"Crossing from {cell} through {portal} does not walk back, got {back}")
                return False

    return True
