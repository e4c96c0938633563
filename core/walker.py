from typing import Dict, Iterable, Optional, Sequence, Tuple

from numpy import flatnonzero

from core.base_setup import FREE, Direction, Turn
from core.datastructures import Puzzle, Portal


__all__ = ['go_from', 'Walker', 'walk', 'password']


Cell = Tuple[int, int]


def go_from(puzzle: Puzzle, portals: Iterable[Portal], position: Cell,
            direction: Direction) -> Optional[Tuple[Cell, Direction]]:
    """
    Single forward step.

    Every portal is tried first, then flat wraparound over void cells.
    :return: (new position, new direction), or None if the target cell is stone
    """
    for portal in portals:
        ported = portal.teleport(position, direction)
        if ported is not None:
            target, new_direction = ported
            if puzzle.can_walk_on(target):
                return target, new_direction
            return None

    width, height = puzzle.dimensions
    dx, dy = direction.delta
    x, y = position
    while True:
        x = (x + dx) % width
        y = (y + dy) % height
        if not puzzle.is_void_at((x, y)):
            break

    if puzzle.can_walk_on((x, y)):
        return (x, y), direction
    return None


class Walker:
    """
    State machine following puzzle moves across the map.

    Starts on the first free cell of the top row, facing right.
    ``visited`` keeps the last facing on every cell stepped on, for drawing the trail.
    """

    def __init__(self, puzzle: Puzzle, portals: Sequence[Portal] = ()):
        free = flatnonzero(puzzle.grid[0] == FREE)
        if free.size == 0:
            raise ValueError("Top row has no free cell to start from")

        self.puzzle = puzzle
        self.portals = tuple(portals)
        self.position: Cell = (int(free[0]), 0)
        self.direction = Direction.RIGHT
        self.step_index = 0
        self.visited: Dict[Cell, Direction] = {self.position: self.direction}

    @property
    def finished(self) -> bool:
        return self.step_index >= len(self.puzzle.moves)

    def step(self) -> None:
        """Execute next move"""
        move = self.puzzle.moves[self.step_index]
        if isinstance(move, Turn):
            self.direction = move.apply(self.direction)
            self.visited[self.position] = self.direction
        else:
            for _ in range(move):
                moved = go_from(self.puzzle, self.portals, self.position, self.direction)
                if moved is None:
                    break
                self.position, self.direction = moved
                self.visited[self.position] = self.direction
        self.step_index += 1

    def run(self) -> 'Walker':
        while not self.finished:
            self.step()
        return self

    @property
    def password(self) -> int:
        x, y = self.position
        return 1000 * (y + 1) + 4 * (x + 1) + int(self.direction)


def walk(puzzle: Puzzle, portals: Optional[Sequence[Portal]] = None) -> Walker:
    """
    Follow all puzzle moves.

    :param puzzle: Puzzle to walk
    :param portals: glue rules of the folded cube, None walks the flat map with wraparound
    :return: finished Walker
    """
    return Walker(puzzle, portals or ()).run()


def password(puzzle: Puzzle, portals: Optional[Sequence[Portal]] = None) -> int:
    """1000 * row + 4 * column + facing, rows and columns counted from 1"""
    return walk(puzzle, portals).password
