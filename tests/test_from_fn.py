import pytest

from infinite_arrays.generators.from_fn import FromFn, InfiniteArrayFromFn


def test_from_fn() -> None:
    arr = FromFn(lambda i: i * 2)
    assert arr.get(0) == 0
    assert arr.get(1) == 2
    assert arr.get(5) == 10


def test_alias() -> None:
    assert FromFn is InfiniteArrayFromFn


def test_function_called_on_every_query() -> None:
    calls: list[int] = []

    def record(i: int) -> int:
        calls.append(i)
        return i + 100

    arr = FromFn(record)
    assert calls == []

    assert arr.get(3) == 103
    assert arr.get(3) == 103
    assert calls == [3, 3]


def test_function_errors_propagate() -> None:
    arr = FromFn(lambda i: 10 // (i - 3))
    assert arr.get(1) == -5

    with pytest.raises(ZeroDivisionError):
        arr.get(3)


def test_index_checked_before_calling_function() -> None:
    calls: list[int] = []
    arr = FromFn(calls.append)

    with pytest.raises(IndexError):
        arr.get(-2)
    assert calls == []
