import pytest

from infinite_arrays.combinators.broadcast import Broadcast, broadcast
from infinite_arrays.generators.constants import Ones
from infinite_arrays.generators.ranges import OneToInf


class Evens:
    def get(self, index: int) -> int:
        return 2 * index


@pytest.mark.parametrize("index", [0, 1, 100])
def test_broadcast_doubles_ones(index: int) -> None:
    doubled = broadcast(Ones(), lambda x: x * 2.0)
    assert doubled.get(index) == 2.0


def test_broadcast_returns_broadcast() -> None:
    assert isinstance(broadcast(Ones(), abs), Broadcast)


def test_broadcast_changes_type() -> None:
    labels = broadcast(OneToInf(), lambda x: f"#{x}")
    assert labels.take(3) == ["#1", "#2", "#3"]


def test_broadcast_is_lazy_and_not_memoized() -> None:
    seen: list[int] = []

    def square(x: int) -> int:
        seen.append(x)
        return x * x

    squares = broadcast(OneToInf(), square)
    assert seen == []

    assert squares.get(2) == 9
    assert squares.get(2) == 9
    assert seen == [3, 3]


def test_broadcast_over_foreign_indexable() -> None:
    halves = broadcast(Evens(), lambda x: x // 2)
    assert halves.get(21) == 21


def test_broadcast_composes() -> None:
    arr = broadcast(broadcast(OneToInf(), lambda x: x + 1), lambda x: x * 10)
    assert arr.get(0) == 20


def test_broadcast_function_errors_propagate() -> None:
    def fail(_: float) -> float:
        raise ValueError("boom")

    arr = broadcast(Ones(), fail)
    with pytest.raises(ValueError, match="boom"):
        arr.get(0)


def test_broadcast_validates_index() -> None:
    with pytest.raises(IndexError):
        broadcast(Evens(), str).get(-1)
