from __future__ import annotations

import itertools

import pytest

from each_cons import ConsGroup, Run, cons_group


def test_cons_group_groups_by_identical_values() -> None:
    runs = cons_group([1, 1, 2, 3, 3, 3, 4, 5])

    assert next(runs) == [1, 1]
    assert next(runs) == [2]
    assert next(runs) == [3, 3, 3]
    assert next(runs) == [4]
    assert next(runs) == [5]
    assert next(runs, None) is None
    assert next(runs, None) is None


def test_cons_group_empty_sequence() -> None:
    assert next(cons_group([]), None) is None


def test_cons_group_single_element() -> None:
    assert [list(run) for run in cons_group(["x"])] == [["x"]]


def test_cons_group_all_equal() -> None:
    runs = list(cons_group((7, 7, 7, 7)))

    assert len(runs) == 1
    assert (runs[0].start, runs[0].stop) == (0, 4)


@pytest.mark.parametrize(
    "sequence, expected",
    [
        ([1, 2, 2], [[1], [2, 2]]),
        ([1, 1, 2], [[1, 1], [2]]),
        ([1, 2], [[1], [2]]),
        ([2, 2], [[2, 2]]),
    ],
)
def test_cons_group_keeps_the_last_element_in_its_run(
    sequence: list[int], expected: list[list[int]]
) -> None:
    assert [list(run) for run in cons_group(sequence)] == expected


@pytest.mark.parametrize(
    "sequence",
    [
        [],
        [0],
        [1, 1, 2, 3, 3, 3, 4, 5],
        [5, 5, 5, 1, 5, 5],
        "mississippi",
        [None, None, 0, 0, False, ""],
    ],
)
def test_cons_group_runs_partition_the_sequence(sequence: list) -> None:
    runs = list(cons_group(sequence))

    assert list(itertools.chain.from_iterable(runs)) == list(sequence)
    for run in runs:
        assert len(run) >= 1
        assert all(item == run.value for item in run)
    for previous, current in zip(runs, runs[1:]):
        assert previous.stop == current.start
        assert previous.value != current.value


def test_cons_group_with_key() -> None:
    words = ["apple", "avocado", "banana", "blueberry", "cherry"]

    runs = cons_group(words, key=lambda word: word[0])

    assert [list(run) for run in runs] == [
        ["apple", "avocado"],
        ["banana", "blueberry"],
        ["cherry"],
    ]


def test_cons_group_requires_a_sequence() -> None:
    with pytest.raises(TypeError, match="sequence"):
        cons_group(iter([1, 2, 3]))  # type: ignore[arg-type]


def test_run_is_a_view_into_the_backing_sequence() -> None:
    backing = [1, 1, 2, 2, 2]

    _, run = cons_group(backing)

    assert run.backing is backing
    assert (run.start, run.stop, run.value) == (2, 5, 2)
    backing[3] = 9
    assert list(run) == [2, 9, 2]


def test_run_indexing() -> None:
    run = Run("aabbbbc", 2, 6)

    assert run[0] == "b"
    assert run[-1] == "b"
    assert len(run) == 4
    with pytest.raises(IndexError):
        run[4]
    assert run[1:3] == ["b", "b"]
    assert isinstance(run[1:3], Run)
    assert run[::2] == ("b", "b")
    empty = run[3:1]
    assert isinstance(empty, Run)
    assert len(empty) == 0
    assert empty == []
    assert list(empty) == []
    assert len(run[10:]) == 0


def test_run_equality() -> None:
    run = Run([3, 3, 4], 0, 2)

    assert run == [3, 3]
    assert [3, 3] == run
    assert run == (3, 3)
    assert run == Run([0, 3, 3], 1, 3)
    assert run != [3]
    assert Run("aa", 0, 2) != "aa"
    assert repr(run) == "Run([3, 3])"
    with pytest.raises(TypeError):
        hash(run)


def test_cons_group_is_its_own_iterator() -> None:
    runs = ConsGroup([1])

    assert iter(runs) is runs
