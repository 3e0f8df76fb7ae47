import pytest

from infinite_arrays.generators.constants import Ones
from infinite_arrays.generators.from_fn import FromFn
from infinite_arrays.generators.ranges import InfStepRange, OneToInf
from infinite_arrays.sequence.infinite_array import InfiniteArray, SupportsGet, version_of


class Squares:
    """A plain indexable object that does not subclass InfiniteArray."""
    def get(self, index: int) -> int:
        return index * index


@pytest.fixture(name="naturals")
def naturals_impl() -> OneToInf:
    return OneToInf()


def test_cannot_instantiate_abstract_base() -> None:
    with pytest.raises(TypeError):
        InfiniteArray()  # type: ignore[abstract]  # pylint: disable=abstract-class-instantiated


def test_supports_get_protocol() -> None:
    assert isinstance(Ones(), SupportsGet)
    assert isinstance(Squares(), SupportsGet)
    assert not isinstance(3.0, SupportsGet)


def test_get_item(naturals: OneToInf) -> None:
    assert naturals[0] == 1
    assert naturals[99] == 100


def test_get_slice(naturals: OneToInf) -> None:
    assert naturals[0:3] == [1, 2, 3]
    assert naturals[:3] == [1, 2, 3]
    assert naturals[2:10:3] == [3, 6, 9]
    assert naturals[3:1] == []


def test_unbounded_slice_rejected(naturals: OneToInf) -> None:
    with pytest.raises(ValueError, match="unbounded slice"):
        _ = naturals[5:]


def test_malformed_slices_rejected(naturals: OneToInf) -> None:
    with pytest.raises(ValueError, match="negative slice bounds"):
        _ = naturals[-1:3]

    with pytest.raises(ValueError, match="negative slice bounds"):
        _ = naturals[0:-1]

    with pytest.raises(ValueError, match="step must be positive"):
        _ = naturals[3:0:-1]


def test_take(naturals: OneToInf) -> None:
    assert naturals.take(4) == [1, 2, 3, 4]
    assert naturals.take(0) == []

    with pytest.raises(ValueError, match="negative number"):
        naturals.take(-1)


def test_no_length(naturals: OneToInf) -> None:
    assert naturals.length is None
    with pytest.raises(TypeError):
        len(naturals)  # type: ignore[arg-type]


def test_membership_not_supported(naturals: OneToInf) -> None:
    with pytest.raises(TypeError, match="membership test"):
        _ = 3 in naturals


def test_operators_between_arrays(naturals: OneToInf) -> None:
    assert (Ones() + Ones()).get(5) == 2.0
    assert (naturals - Ones()).get(4) == 4.0
    assert (naturals * naturals).get(3) == 16
    assert (naturals / naturals).get(4) == 1


def test_operators_with_scalars(naturals: OneToInf) -> None:
    assert (naturals + 1).get(0) == 2
    assert (naturals - 1).get(0) == 0
    assert (naturals * 2).get(3) == 8
    assert (OneToInf(float) / 2.0).get(2) == 1.5


def test_reflected_operators(naturals: OneToInf) -> None:
    assert (2 + naturals).get(0) == 3
    assert (10 - naturals).get(0) == 9
    assert (3 * naturals).get(1) == 6
    assert (1.0 / OneToInf(float)).get(1) == 0.5


def test_operators_with_foreign_indexable(naturals: OneToInf) -> None:
    combined = naturals + Squares()
    assert combined.get(3) == 4 + 9

    reflected = Squares() - naturals  # Squares has no __sub__, so naturals.__rsub__ handles it
    assert reflected.get(3) == 9 - 4


def test_negation(naturals: OneToInf) -> None:
    assert (-naturals).get(2) == -3


def test_map_and_cumsum(naturals: OneToInf) -> None:
    assert naturals.map(str).get(0) == "1"
    assert naturals.cumsum().get(3) == 10


def test_operators_are_lazy() -> None:
    calls: list[int] = []

    def record(i: int) -> int:
        calls.append(i)
        return i

    arr = FromFn(record)
    composed = (arr + arr) * 3 - 1
    assert calls == []

    assert composed.get(2) == 11
    assert calls == [2, 2]


def test_iter_starts_at_zero(naturals: OneToInf) -> None:
    cursor = iter(naturals)
    assert next(cursor) == 1
    assert next(cursor) == 2


def test_true_division_operator(naturals: OneToInf) -> None:
    assert (naturals / 2).take(3) == [0.5, 1.0, 1.5]
    assert (InfStepRange(-7, 0) / 2).get(0) == -3.5
    assert (1 / naturals).get(1) == 0.5

    with pytest.raises(ZeroDivisionError):
        (naturals / 0).get(0)


def test_mappings_are_not_arrays(naturals: OneToInf) -> None:
    with pytest.raises(TypeError):
        _ = naturals + {0: 1}

    with pytest.raises(TypeError):
        _ = {0: 1} * naturals


def test_pure_arrays_have_version_zero(naturals: OneToInf) -> None:
    assert naturals.version == 0
    assert (naturals + Squares()).version == 0
    assert version_of(Squares()) == 0
