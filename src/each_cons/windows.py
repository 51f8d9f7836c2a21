from __future__ import annotations

import collections
import enum
import logging
from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Generic, TypeVar

# A port of Ruby's `Enumerable#each_cons`, built on the `sliding_window` recipe.
# See: https://docs.python.org/3/library/itertools.html#itertools-recipes
T = TypeVar("T")

logger = logging.getLogger(__name__)


class ConsState(enum.Enum):
    ACTIVE = enum.auto()
    # The source is exhausted, but trailing padded windows are still owed.
    DRAINING = enum.auto()
    EXHAUSTED = enum.auto()


def validate_size(size: int) -> int:
    """Make sure that `size` is usable as a window size.

    :param size: The requested window size.
    :return: The size, unchanged.
    :raises TypeError: If `size` is not an integer.
    :raises ValueError: If `size` is less than 1.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"Window size must be an integer, not {type(size).__name__}.")
    if size < 1:
        raise ValueError(f"Window size must be at least 1 (got {size}).")
    return size


class EachCons(Iterator[tuple[T | None, ...]], Generic[T]):
    """Yield overlapping windows of `size` consecutive items from an iterable.

    >>> list(EachCons(2, [1, 2, 3]))
    [(1, 2), (2, 3)]

    >>> list(EachCons(4, 'ABCDEFG', nulls=2))
    ```
    [
     ('A', 'B', 'C', 'D'), ('B', 'C', 'D', 'E'), ('C', 'D', 'E', 'F'),
     ('D', 'E', 'F', 'G'), ('E', 'F', 'G', None), ('F', 'G', None, None),
    ]
    ```

    The first `size - 1` items are pulled when the adapter is created. If the
    source can't supply them, the adapter is exhausted for good and the source
    is never polled again. Windows share references to the source's items;
    nothing is copied.
    """

    def __init__(self, size: int, iterable: Iterable[T], *, nulls: int = 0) -> None:
        self.size = validate_size(size)
        if nulls < 0:
            raise ValueError(f"Number of nulls cannot be negative (got {nulls}).")
        # Every padded window must still hold at least one item from the source.
        self._nulls_owed = min(size - 1, nulls)

        self._source: Iterator[T] | None = iter(iterable)
        # Padding only follows a source that filled at least one window.
        self._produced = False
        self._pending: collections.deque[T | None] = collections.deque(
            islice(self._source, size - 1), maxlen=size - 1
        )
        self.state = ConsState.ACTIVE
        if len(self._pending) < size - 1:
            logger.debug(
                "Source yielded %d of the %d items needed before a window of size %d.",
                len(self._pending),
                size - 1,
                size,
            )
            self._exhaust()

    @property
    def exhausted(self) -> bool:
        return self.state is ConsState.EXHAUSTED

    def __iter__(self) -> EachCons[T]:
        return self

    def __next__(self) -> tuple[T | None, ...]:
        if self.state is ConsState.ACTIVE:
            assert self._source is not None
            try:
                item = next(self._source)
            except StopIteration:
                self._source = None
                if self._produced and self._nulls_owed:
                    self.state = ConsState.DRAINING
                else:
                    self._exhaust()
            else:
                self._produced = True
                return self._slide(item)

        if self.state is ConsState.DRAINING:
            self._nulls_owed -= 1
            if not self._nulls_owed:
                # Leave the buffer intact until this last window is built.
                window = self._slide(None)
                self._exhaust()
                return window
            return self._slide(None)

        raise StopIteration

    def _slide(self, item: T | None) -> tuple[T | None, ...]:
        window = (*self._pending, item)
        self._pending.append(item)
        return window

    def _exhaust(self) -> None:
        self.state = ConsState.EXHAUSTED
        self._source = None
        self._pending.clear()
        logger.debug("Window adapter (size %d) is exhausted.", self.size)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, state={self.state.name})"


def each_cons(size: int, iterable: Iterable[T], *, nulls: int = 0) -> EachCons[T]:
    """Return an iterator of overlapping `size`-length windows over `iterable`.

    :param size: The size of each window. Must be at least 1.
    :param iterable: The iterable to iterate over.
    :param nulls: The number of trailing windows padded with `None`.
    :return: An `EachCons` iterator of tuples.
    """
    return EachCons(size, iterable, nulls=nulls)
