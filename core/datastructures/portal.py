from dataclasses import dataclass
from typing import Optional, Self, Tuple

from core.base_setup import Direction


Cell = Tuple[int, int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True, slots=True)
class Portal:
    """
    Glue rule between two boundary segments of the net.

    Walking off the entrance segment (inclusive ends, grid (x, y) cells) in ``entrance_direction``
    lands on the exit segment at the same offset from its start, facing ``exit_direction``.

    - entrance_start, entrance_end: Cell
    - entrance_direction: Direction, direction of travel that triggers the portal
    - exit_start, exit_end: Cell
    - exit_direction: Direction, facing after the crossing
    """
    entrance_start: Cell
    entrance_end: Cell
    entrance_direction: Direction
    exit_start: Cell
    exit_end: Cell
    exit_direction: Direction

    def __post_init__(self):
        msg = ""
        for name in ('entrance', 'exit'):
            start = getattr(self, f'{name}_start')
            end = getattr(self, f'{name}_end')
            if start[0] != end[0] and start[1] != end[1]:
                msg += f"{name} segment must be horizontal or vertical, got {start} -> {end}\n"
        entrance_len = max(abs(self.entrance_end[0] - self.entrance_start[0]),
                           abs(self.entrance_end[1] - self.entrance_start[1]))
        exit_len = max(abs(self.exit_end[0] - self.exit_start[0]),
                       abs(self.exit_end[1] - self.exit_start[1]))
        if entrance_len != exit_len:
            msg += f"entrance and exit segments must have equal length, got {entrance_len} and {exit_len}\n"
        if not isinstance(self.entrance_direction, Direction) or not isinstance(self.exit_direction, Direction):
            msg += "portal directions must be Direction\n"

        if msg != "":
            raise ValueError(msg)

    def teleport(self, position: Cell, direction: Direction) -> Optional[Tuple[Cell, Direction]]:
        """
        Resolve a crossing through this portal.

        :param position: cell the walker leaves from
        :param direction: direction of travel
        :return: (landing cell, new facing), or None if the crossing does not go through this portal
        """
        if direction != self.entrance_direction or self.entrance_orientation_at(position) is None:
            return None

        x, y = position
        start_x, start_y = self.entrance_start
        end_x, end_y = self.entrance_end
        offset = (x - start_x) * _sign(end_x - start_x) + (y - start_y) * _sign(end_y - start_y)

        exit_x, exit_y = self.exit_start
        exit_end_x, exit_end_y = self.exit_end
        landing = (exit_x + offset * _sign(exit_end_x - exit_x),
                   exit_y + offset * _sign(exit_end_y - exit_y))
        return landing, self.exit_direction

    def inverse(self) -> Self:
        """Same seam travelled the other way"""
        return Portal(
            entrance_start=self.exit_start,
            entrance_end=self.exit_end,
            entrance_direction=self.exit_direction.opposite(),
            exit_start=self.entrance_start,
            exit_end=self.entrance_end,
            exit_direction=self.entrance_direction.opposite(),
        )

    def entrance_orientation_at(self, position: Cell) -> Optional[Direction]:
        return self.orientation_at(self.entrance_start, self.entrance_end, position)

    @staticmethod
    def orientation_at(start: Cell, end: Cell, position: Cell) -> Optional[Direction]:
        """
        Direction in which segment start -> end runs, if position lies on it.
        Single cell segments read as running Down/Right.
        """
        (start_x, start_y), (end_x, end_y), (x, y) = start, end, position

        if x == start_x == end_x:
            if min(start_y, end_y) <= y <= max(start_y, end_y):
                return Direction.UP if start_y > end_y else Direction.DOWN
            return None
        if y == start_y == end_y:
            if min(start_x, end_x) <= x <= max(start_x, end_x):
                return Direction.LEFT if start_x > end_x else Direction.RIGHT
            return None
        return None

    def as_tuple(self) -> Tuple[Cell, Cell, Direction, Cell, Cell, Direction]:
        return (self.entrance_start, self.entrance_end, self.entrance_direction,
                self.exit_start, self.exit_end, self.exit_direction)

    def __str__(self) -> str:
        return (f"{self.entrance_start}..{self.entrance_end} {self.entrance_direction.symbol}"
                f"  ->  {self.exit_start}..{self.exit_end} {self.exit_direction.symbol}")
