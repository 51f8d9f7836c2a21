from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False, repr=False)
class Run(Sequence[T], Generic[T]):
    """A read-only view of `backing[start:stop]`.

    Nothing is copied: indexing and iteration read through to the backing
    sequence, so a run is only meaningful while that sequence is unchanged.
    """

    backing: Sequence[T]
    start: int
    stop: int

    @property
    def value(self) -> T:
        """The element that every member of the run is equal to."""
        return self.backing[self.start]

    def __len__(self) -> int:
        return self.stop - self.start

    @overload
    def __getitem__(self, index: int) -> T:
        ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[T]:
        ...

    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        positions = range(self.start, self.stop)[index]
        if isinstance(positions, int):
            return self.backing[positions]
        if positions.step == 1:
            # An empty slice can have `stop < start`; keep the view's length at zero.
            return Run(self.backing, positions.start, positions.start + len(positions))
        return tuple(self.backing[i] for i in positions)

    def __iter__(self) -> Iterator[T]:
        for i in range(self.start, self.stop):
            yield self.backing[i]

    def __eq__(self, other: object) -> bool:
        # Strings are sequences too, but a run is never equal to one.
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes)):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Run({list(self)!r})"


class ConsGroup(Iterator[Run[T]], Generic[T]):
    """Yield maximal runs of consecutive equal elements from a sequence.

    >>> [list(run) for run in ConsGroup([1, 1, 2, 3, 3, 3, 4, 5])]
    [[1, 1], [2], [3, 3, 3], [4], [5]]

    Random access is required, so only `Sequence`s are accepted. When `key`
    is given, elements are compared by `key(element)` instead of themselves.
    """

    def __init__(
        self, sequence: Sequence[T], *, key: Callable[[T], Any] | None = None
    ) -> None:
        if not isinstance(sequence, Sequence):
            raise TypeError(
                f"Runs can only be grouped from a sequence, not {type(sequence).__name__}."
            )
        self._sequence = sequence
        self._key = key
        self._start = 0

    def __iter__(self) -> ConsGroup[T]:
        return self

    def __next__(self) -> Run[T]:
        start, end = self._start, len(self._sequence)
        if start >= end:
            raise StopIteration

        key = self._key or _identity
        anchor = key(self._sequence[start])
        stop = start + 1
        # Scan all the way to `end`, so that a run at the tail is kept whole.
        while stop < end and key(self._sequence[stop]) == anchor:
            stop += 1

        self._start = stop
        if stop == end:
            logger.debug("Grouped the last run of a %d-element sequence.", end)
        return Run(self._sequence, start, stop)


def _identity(value: T) -> T:
    return value


def cons_group(
    sequence: Sequence[T], *, key: Callable[[T], Any] | None = None
) -> ConsGroup[T]:
    """Return an iterator of the runs of consecutive equal elements in `sequence`.

    :param sequence: The sequence to group.
    :param key: Optional function computing the value to compare elements by.
    :return: A `ConsGroup` iterator of `Run` views into `sequence`.
    """
    return ConsGroup(sequence, key=key)
