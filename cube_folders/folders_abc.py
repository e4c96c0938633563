from typing import Callable, Any, Tuple, Dict, Type, List, Iterable, Optional
from abc import ABC, ABCMeta, abstractmethod
from time import perf_counter
from warnings import warn

from core import Puzzle, DUMMY_PUZZLE, Fold, NoFold, Net, extract_net


COERCIBLE_TYPES = {int}     # strings like "5", bool only as bool


folder_registry: Dict[str, Type['Folder']] = {}


def register_folder(*names: str) -> Callable[[Any], Any]:
    """Decorator to register folders under a name and its shortcuts"""
    def decorator(cls):
        for name in names:
            folder_registry[name] = cls
        cls.name = names[0]
        return cls
    return decorator


class FoldingError(Exception):
    """Raised when a net cannot be folded into a cube"""
    pass


class Folder(ABC, metaclass=ABCMeta):
    """
    Folder abstract base class.

    Subclasses implement ``_fold`` on an extracted Net; extraction, timing,
    strict mode and NoFold wrapping live here.
    """
    #! WARNING: only bool and int allowed to be specified as kwarg type
    _allowed_kwargs: Dict[str, Type] = {'strict': bool}
    name: str = 'abstract'

    def __init__(self):
        self._warm_up()

    def _warm_up(self) -> None:
        """Folder initialization and dummy puzzle run"""
        try:
            start_init = perf_counter()
            fold, _ = self.solve(DUMMY_PUZZLE, strict=True)
            end_init = perf_counter()
        except Exception as e:
            raise RuntimeError(f"Error while initialization {self.name} folder occurred: {e}") from e
        else:
            print(f"\rSuccessfully initialized {self.name} folder in {end_init - start_init:.4} sec", flush=True)

    def __call__(self, puzzle: Puzzle, **kwargs: Any) -> Tuple[Fold|NoFold, float]:
        return self.solve(puzzle, **kwargs)

    def s(self, puzzle: Puzzle, **kwargs: Any) -> Tuple[Fold|NoFold, float]:
        return self.solve(puzzle, **kwargs)

    def solve_iter(self, puzzles: Iterable[Puzzle], **kwargs: Any) -> Tuple[List[Fold|NoFold], List[float]]:
        """
        Fold puzzles from any iterable in loop.
        :param puzzles:
        :param kwargs: kwargs accepted by self.solve
        :return: List of folds, list of times
        """
        folds = []
        times = []
        for puzzle in puzzles:
            fold, time = self.solve(puzzle, **kwargs)
            folds.append(fold); times.append(time)
        return folds, times

    def solve(self, puzzle: Puzzle, **kwargs: Any) -> Tuple[Fold|NoFold, float]:
        """
        Derive portals of the cube drawn on the puzzle grid.

        Possible keyword arguments:
            - strict:bool=False - if True raise FoldingError instead of returning NoFold.
            - folder specific ones, look ``_allowed_kwargs`` of subclass.

        :param puzzle: Puzzle with unfolded cube
        :return: Fold or NoFold, folding time (without net extraction)
        """
        self._validate_kwargs(kwargs)
        strict = kwargs.pop('strict', False)

        net = extract_net(puzzle)
        if net is None:
            return self._fail("grid is not 6 connected square faces", strict)

        start = perf_counter()
        vertices, portals = self._fold(net, **kwargs)
        end = perf_counter()

        if vertices is None:
            return self._fail(f"{self.name} folder could not place net corners on cube vertices", strict)
        if portals is None:
            return self._fail("net edges do not pair into cube seams", strict)

        return Fold(portals=portals, vertices=vertices, method=self.name), end - start

    @abstractmethod
    def _fold(self, net: Net, **kwargs: Any) -> Tuple[Optional[dict], Optional[tuple]]:
        """
        Folder core.
        :return: corner id -> vertex key map, portals; None in place of the first step that failed
        """
        ...

    def _fail(self, reason: str, strict: bool) -> Tuple[NoFold, float]:
        if strict:
            raise FoldingError(reason)
        return NoFold(reason=reason), 0.0

    def _validate_kwargs(self, kwargs: Dict[str, Any]) -> None:
        """Method to validate optional kwargs for folders main method"""
        # Access _allowed_kwargs from the subclass
        allowed_kwargs = self.__class__._allowed_kwargs
        if kwargs and not allowed_kwargs:
            raise TypeError(f"{self.__class__.__name__} does not support any keyword arguments. Received: {list(kwargs.keys())}")
        for name, value in kwargs.items():
            if name not in allowed_kwargs:
                raise TypeError(f"Unexpected keyword argument: '{name}'")

            expected_type = allowed_kwargs[name]
            if isinstance(value, expected_type):
                continue
            if expected_type == int and isinstance(value, float):
                if not value.is_integer():
                    warn(f"Argument '{name}' truncated to int: {value}")
                kwargs[name] = int(value)
                continue
            if expected_type in COERCIBLE_TYPES:
                try:
                    kwargs[name] = expected_type(value)
                    continue
                except (ValueError, TypeError):
                    pass

            raise TypeError(f"Argument '{name}' must be {expected_type.__name__} or convertable to it. "
                            f"Got {type(value).__name__} with value: {repr(value)}")
