from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from each_cons.runs import ConsGroup
from each_cons.windows import EachCons

T = TypeVar("T")


class Cons(Generic[T]):
    """Give any iterable `each_cons` and `cons_group` methods.

    >>> [w for w in Cons(range(4)).each_cons(3)]
    [(0, 1, 2), (1, 2, 3)]
    >>> [list(r) for r in Cons("aab").cons_group()]
    [['a', 'a'], ['b']]
    """

    def __init__(self, source: Iterable[T]) -> None:
        self.source = source

    def __iter__(self) -> Iterator[T]:
        return iter(self.source)

    def each_cons(self, size: int, *, nulls: int = 0) -> EachCons[T]:
        return EachCons(size, self.source, nulls=nulls)

    def cons_group(self, *, key: Callable[[T], Any] | None = None) -> ConsGroup[T]:
        """Group the source into runs. The source must be a `Sequence`."""
        return ConsGroup(self.source, key=key)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"Cons({self.source!r})"
