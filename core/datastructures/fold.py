from dataclasses import dataclass, field
from typing import Dict, Hashable, Optional, Self, Tuple, FrozenSet
from warnings import warn

from core.base_setup import SEAMS
from .portal import Portal


@dataclass(slots=True)
class Fold:
    """
    Represents folding result for a cube net, only non-optional parameter is portals.

    - portals: Tuple[Portal, ...], direct portal followed by its inverse for every seam
    - vertices: Optional[Dict[int, Hashable]], net corner id -> cube vertex key used for matching
    - method: Optional[str], registry name of the folder that produced it
    """
    portals: Tuple[Portal, ...] = ()
    vertices: Optional[Dict[int, Hashable]] = field(default=None, compare=False)
    method: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        portals = self.portals

        msg = ""
        if not isinstance(portals, tuple):
            msg += "portals must be tuple\n"
        elif len(portals) == 0:
            msg += "Fold must have portals, for failed folds use NoFold instead\n"
        elif not all(isinstance(p, Portal) for p in portals):
            msg += "every portal must be Portal\n"
        elif len(portals) != 2 * SEAMS:
            msg += f"cube net folds into {2 * SEAMS} portals, got {len(portals)}\n"

        if msg != "":
            raise ValueError(msg)

    @property
    def portal_set(self) -> FrozenSet[tuple]:
        """Order independent view, used to compare folds of different methods"""
        return frozenset(p.as_tuple() for p in self.portals)

    def __eq__(self, other: Self) -> bool:
        if not isinstance(other, Fold):
            return NotImplemented
        return self.portal_set == other.portal_set

    def __len__(self) -> int:
        return len(self.portals)

    def __iter__(self):
        return iter(self.portals)


@dataclass(slots=True)
class NoFold(Fold):
    """
    Represents failed folds (input is not an unfolded cube)
    """

    reason: str = None

    def __post_init__(self):
        if self.portals:
            warn(f"Creating NoFold with {len(self.portals)} portals, dropping them")
        self.portals = ()
        self.vertices = None

    def __repr__(self) -> str:
        reason = self.reason or "Unknown"
        return f"NoFold({reason=})"

    def __eq__(self, other: Self) -> bool:
        if not isinstance(other, NoFold):
            return NotImplemented
        return True
