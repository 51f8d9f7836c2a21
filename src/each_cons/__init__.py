"""Ruby's `Enumerable#each_cons` and run grouping for Python iterables."""

from each_cons.fluent import Cons
from each_cons.runs import ConsGroup, Run, cons_group
from each_cons.windows import ConsState, EachCons, each_cons

__all__ = [
    "Cons",
    "ConsGroup",
    "ConsState",
    "EachCons",
    "Run",
    "cons_group",
    "each_cons",
]
