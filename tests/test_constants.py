import numpy as np
import pytest

from infinite_arrays.generators.constants import Ones, Zeros


@pytest.mark.parametrize("index", [0, 1, 100, 10_000])
def test_ones(index: int) -> None:
    assert Ones().get(index) == 1.0


@pytest.mark.parametrize("index", [0, 1, 100, 10_000])
def test_zeros(index: int) -> None:
    assert Zeros().get(index) == 0.0


def test_default_dtype_is_float() -> None:
    assert type(Ones().get(0)) is float
    assert type(Zeros().get(0)) is float


def test_explicit_dtype() -> None:
    assert type(Ones(int).get(3)) is int
    assert isinstance(Ones(np.float32).get(3), np.float32)
    assert isinstance(Zeros("i2").get(3), np.int16)
    assert Zeros(complex).get(5) == 0j


def test_constants_are_idempotent() -> None:
    assert Ones().get(7) == Ones().get(7)
    assert Zeros().get(7) == Zeros().get(7)


def test_constants_validate_index() -> None:
    with pytest.raises(IndexError):
        Ones().get(-1)

    with pytest.raises(TypeError):
        Zeros().get("0")  # type: ignore[arg-type]


def test_constants_compare_by_dtype() -> None:
    assert Ones() == Ones(float)
    assert Ones(int) != Ones(float)
    assert Ones() != Zeros()
