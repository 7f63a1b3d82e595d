"""Id minting strategies for store collections."""

import itertools
from abc import ABC, abstractmethod


class IdMinter(ABC):
    """Produces the id for the next record appended to a collection."""

    @abstractmethod
    def next_id(self, current_length: int) -> str:
        """Return a fresh id given the collection's length before the append."""
        pass

    @abstractmethod
    def reset(self) -> None:
        pass


class LengthIdMinter(IdMinter):
    """
    Legacy scheme: the id is ``len(collection) + 1``.

    Ids are unique among live records only as long as nothing has been removed.
    After a removal the next id can repeat one handed out earlier, e.g. adding
    three items, removing "2", then adding again yields a second "3".
    """

    def next_id(self, current_length: int) -> str:
        return str(current_length + 1)

    def reset(self) -> None:
        pass


class CounterIdMinter(IdMinter):
    """Monotonic counter starting at 1; ids are never reused within a process."""

    def __init__(self, start: int = 1):
        self._start = start
        self._counter = itertools.count(start)

    def next_id(self, current_length: int) -> str:
        _ = current_length
        return str(next(self._counter))

    def reset(self) -> None:
        self._counter = itertools.count(self._start)


_STRATEGIES: dict[str, type[IdMinter]] = {
    "counter": CounterIdMinter,
    "length": LengthIdMinter,
}


def create_id_minter(strategy: str) -> IdMinter:
    """
    Build an id minter by strategy name.

    Raises:
        ValueError: If the strategy name is unknown
    """
    try:
        minter_class = _STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown id strategy '{strategy}'. Expected one of: {', '.join(sorted(_STRATEGIES))}"
        ) from None
    return minter_class()
